"""Tests for error-first callback delivery."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from okex_rest.exchange.callbacks import deliver
from okex_rest.exchange.errors import ConfigurationError, ExchangeAPIError


async def _returns(value: object) -> object:
    return value


async def _raises(error: Exception) -> object:
    raise error


class TestDeliver:
    """Tests for deliver."""

    @pytest.mark.asyncio
    async def test_success_calls_once_with_data(self) -> None:
        """Success invokes callback(None, data) exactly once."""
        callback = MagicMock()
        await deliver(callback, _returns({"asks": [], "bids": []}))
        callback.assert_called_once_with(None, {"asks": [], "bids": []})

    @pytest.mark.asyncio
    async def test_error_calls_once_with_error(self) -> None:
        """OkexError invokes callback(error, None) exactly once."""
        callback = MagicMock()
        error = ExchangeAPIError("boom", code=10007)
        await deliver(callback, _raises(error))
        callback.assert_called_once_with(error, None)

    @pytest.mark.asyncio
    async def test_async_callback_awaited(self) -> None:
        """Coroutine callbacks are awaited."""
        callback = AsyncMock()
        await deliver(callback, _returns([1]))
        callback.assert_awaited_once_with(None, [1])

    @pytest.mark.asyncio
    async def test_missing_callback(self) -> None:
        """Non-callable callback raises before the operation runs."""
        operation = _returns("unused")
        with pytest.raises(ConfigurationError, match="callback"):
            await deliver(None, operation)  # type: ignore[arg-type]
        assert operation.cr_frame is None

    @pytest.mark.asyncio
    async def test_other_exceptions_propagate(self) -> None:
        """Non-client exceptions are not converted into callback errors."""
        callback = MagicMock()
        with pytest.raises(RuntimeError):
            await deliver(callback, _raises(RuntimeError("bug")))
        callback.assert_not_called()
