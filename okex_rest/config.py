"""Configuration for the OKEx client and CLI."""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exchange.endpoints import ContractType


# Load .env from project root (when developing) or cwd (when installed)
def _load_env_files() -> None:
    cwd = Path.cwd()
    project_root = Path(__file__).resolve().parent.parent
    for base in (cwd, project_root):
        env_default = base / ".env.default"
        env_file = base / ".env"
        if env_default.exists():
            load_dotenv(env_default)
        if env_file.exists():
            load_dotenv(env_file)
            break


_load_env_files()


class Config(BaseSettings):
    """Client configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_ignore_case=True,
    )

    # Exchange
    okex_api_key: str = Field(default="")
    okex_api_secret: str = Field(default="")
    okex_base_url: str = Field(default="https://www.okex.com")
    okex_timeout_ms: float = Field(default=20000, gt=0)
    okex_private_timeout_ms: float | None = Field(default=None, gt=0)

    # Market
    symbol: str = Field(default="btc_usd")
    contract_type: ContractType = Field(default=ContractType.QUARTER)

    def validate(self, private: bool = True) -> list[str]:
        """Validate configuration and return list of error messages."""
        errors = []
        if private:
            if not self.okex_api_key:
                errors.append("OKEX_API_KEY is required for private endpoints")
            if not self.okex_api_secret:
                errors.append("OKEX_API_SECRET is required for private endpoints")
        return errors
