"""Tests for CLI."""

import json
from unittest.mock import AsyncMock, patch

import pytest
from asyncclick.testing import CliRunner

from okex_rest.cli import cli, make_client, run_call
from okex_rest.config import Config
from okex_rest.exchange.errors import ExchangeAPIError


@pytest.fixture
def cli_runner() -> CliRunner:
    """AsyncClick CLI runner."""
    return CliRunner()


@pytest.fixture
def mock_okex_client() -> AsyncMock:
    """Mock OkexClient for CLI tests."""
    client = AsyncMock()
    client.get_ticker = AsyncMock(return_value={"ticker": {"last": "4000"}})
    client.get_depth = AsyncMock(return_value={"asks": [], "bids": []})
    client.get_future_ticker = AsyncMock(return_value={"ticker": {"last": "4100"}})
    client.get_user_info = AsyncMock(return_value={"result": True})
    client.get_future_user_info = AsyncMock(return_value={"result": True, "info": {}})
    client.get_future_user_info_fix = AsyncMock(return_value={"result": True, "fix": True})
    client.close = AsyncMock(return_value=None)
    return client


class TestCliGroup:
    """Tests for CLI group."""

    @pytest.mark.asyncio
    async def test_cli_help(self, cli_runner: CliRunner) -> None:
        """cli shows help with subcommands."""
        result = await cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("ticker", "depth", "future-ticker", "userinfo", "future-userinfo"):
            assert name in result.output

    @pytest.mark.asyncio
    async def test_future_ticker_help(self, cli_runner: CliRunner) -> None:
        """future-ticker lists contract types."""
        result = await cli_runner.invoke(cli, ["future-ticker", "--help"])
        assert result.exit_code == 0
        assert "contract-type" in result.output


class TestCommands:
    """Tests for individual commands."""

    @pytest.mark.asyncio
    async def test_ticker_prints_json(
        self, cli_runner: CliRunner, config: Config, mock_okex_client: AsyncMock
    ) -> None:
        """ticker prints the payload and exits 0."""
        with (
            patch("okex_rest.cli.Config", return_value=config),
            patch("okex_rest.cli.OkexClient", return_value=mock_okex_client),
        ):
            result = await cli_runner.invoke(cli, ["ticker", "ltc_btc"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"ticker": {"last": "4000"}}
        mock_okex_client.get_ticker.assert_called_once_with("ltc_btc")
        mock_okex_client.close.assert_called_once()

    @pytest.mark.asyncio
    async def test_depth_uses_configured_symbol(
        self, cli_runner: CliRunner, config: Config, mock_okex_client: AsyncMock
    ) -> None:
        """depth falls back to the configured symbol."""
        with (
            patch("okex_rest.cli.Config", return_value=config),
            patch("okex_rest.cli.OkexClient", return_value=mock_okex_client),
        ):
            result = await cli_runner.invoke(cli, ["depth", "--size", "5"])
        assert result.exit_code == 0
        mock_okex_client.get_depth.assert_called_once_with("btc_usd", size=5, merge="1")

    @pytest.mark.asyncio
    async def test_future_ticker_contract_type(
        self, cli_runner: CliRunner, config: Config, mock_okex_client: AsyncMock
    ) -> None:
        """future-ticker passes the chosen contract type."""
        with (
            patch("okex_rest.cli.Config", return_value=config),
            patch("okex_rest.cli.OkexClient", return_value=mock_okex_client),
        ):
            result = await cli_runner.invoke(
                cli, ["future-ticker", "btc_usd", "--contract-type", "next_week"]
            )
        assert result.exit_code == 0
        mock_okex_client.get_future_ticker.assert_called_once_with("btc_usd", "next_week")

    @pytest.mark.asyncio
    async def test_userinfo_requires_credentials(
        self, cli_runner: CliRunner, config_public: Config
    ) -> None:
        """userinfo exits with error when credentials are missing."""
        with (
            patch("okex_rest.cli.Config", return_value=config_public),
            patch("okex_rest.cli.OkexClient") as client_class,
        ):
            result = await cli_runner.invoke(cli, ["userinfo"])
        assert result.exit_code == 1
        client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_future_userinfo_fixed(
        self, cli_runner: CliRunner, config: Config, mock_okex_client: AsyncMock
    ) -> None:
        """--fixed queries the fixed-margin account."""
        with (
            patch("okex_rest.cli.Config", return_value=config),
            patch("okex_rest.cli.OkexClient", return_value=mock_okex_client),
        ):
            result = await cli_runner.invoke(cli, ["future-userinfo", "--fixed"])
        assert result.exit_code == 0
        mock_okex_client.get_future_user_info_fix.assert_called_once()
        mock_okex_client.get_future_user_info.assert_not_called()


class TestRunCall:
    """Tests for run_call function."""

    @pytest.mark.asyncio
    async def test_run_call_api_error(
        self, config: Config, mock_okex_client: AsyncMock
    ) -> None:
        """run_call returns 1 and closes the client when the API fails."""
        mock_okex_client.get_user_info = AsyncMock(
            side_effect=ExchangeAPIError("bad sign", code=10007)
        )
        with patch("okex_rest.cli.OkexClient", return_value=mock_okex_client):
            exit_code = await run_call(config, lambda c: c.get_user_info(), private=True)
        assert exit_code == 1
        mock_okex_client.close.assert_called_once()

    def test_make_client_from_config(self, config: Config) -> None:
        """make_client passes credentials and URL through."""
        client = make_client(config)
        assert client.api_key == "test-key"
        assert client.base_url == "https://www.okex.com"
        assert client.timeout == 20.0
