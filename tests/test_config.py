"""Tests for Config."""

import pytest
from pydantic import ValidationError

from okex_rest.config import Config
from okex_rest.exchange.endpoints import ContractType


class TestConfig:
    """Tests for Config."""

    def test_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Config has expected defaults."""
        for name in ("OKEX_BASE_URL", "OKEX_TIMEOUT_MS", "OKEX_PRIVATE_TIMEOUT_MS", "SYMBOL", "CONTRACT_TYPE"):
            monkeypatch.delenv(name, raising=False)
        config = Config(_env_file=None)
        assert config.okex_base_url == "https://www.okex.com"
        assert config.okex_timeout_ms == 20000
        assert config.okex_private_timeout_ms is None
        assert config.symbol == "btc_usd"
        assert config.contract_type == ContractType.QUARTER

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings are read case-insensitively from the environment."""
        monkeypatch.setenv("OKEX_API_KEY", "env-key")
        monkeypatch.setenv("contract_type", "this_week")
        config = Config(_env_file=None)
        assert config.okex_api_key == "env-key"
        assert config.contract_type == ContractType.THIS_WEEK

    def test_validate_public_allows_empty_credentials(self) -> None:
        """Public-only use needs no credentials."""
        config = Config(okex_api_key="", okex_api_secret="")
        assert config.validate(private=False) == []

    def test_validate_requires_credentials_for_private(self) -> None:
        """Private use requires both key and secret."""
        config = Config(okex_api_key="", okex_api_secret="")
        errors = config.validate()
        assert len(errors) == 2
        assert any("OKEX_API_KEY" in e for e in errors)
        assert any("OKEX_API_SECRET" in e for e in errors)

    def test_validate_valid_credentials(self) -> None:
        """No errors when credentials provided."""
        config = Config(okex_api_key="key", okex_api_secret="secret")
        assert config.validate() == []

    @pytest.mark.parametrize("invalid_timeout", [0, -1])
    def test_timeout_must_be_positive(self, invalid_timeout: float) -> None:
        """okex_timeout_ms must be > 0."""
        with pytest.raises(ValidationError):
            Config(okex_timeout_ms=invalid_timeout)

    def test_invalid_contract_type(self) -> None:
        """contract_type must be a known delivery period."""
        with pytest.raises(ValidationError):
            Config(contract_type="monthly")
