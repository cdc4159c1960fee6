"""Error-first callback delivery for client coroutines."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

from .errors import ConfigurationError, OkexError

Callback = Callable[[OkexError | None, Any], Any]


async def deliver(callback: Callback, operation: Awaitable[Any]) -> None:
    """Await ``operation`` and report the outcome to ``callback(error, data)``.

    The callback is invoked exactly once: ``callback(None, data)`` on success,
    ``callback(error, None)`` when the client raises an OkexError. A
    non-callable callback raises ConfigurationError without awaiting the
    operation.

    Example:
        await deliver(log_response, client.get_depth("btc_usd"))
    """
    if not callable(callback):
        if inspect.iscoroutine(operation):
            operation.close()
        msg = f"callback {callback!r} must be a function taking (error, data)"
        raise ConfigurationError(msg)

    try:
        data = await operation
    except OkexError as e:
        result = callback(e, None)
    else:
        result = callback(None, data)

    if inspect.isawaitable(result):
        await result
