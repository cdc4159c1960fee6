"""Command-line interface for the OKEx REST client."""

import json
from collections.abc import Awaitable, Callable
from typing import Any

import asyncclick as click
from loguru import logger

from .config import Config
from .exchange.client import OkexClient
from .exchange.endpoints import ContractType
from .exchange.errors import OkexError


def make_client(config: Config) -> OkexClient:
    """Build a client from configuration."""
    return OkexClient(
        api_key=config.okex_api_key,
        api_secret=config.okex_api_secret,
        base_url=config.okex_base_url,
        timeout_ms=config.okex_timeout_ms,
        private_timeout_ms=config.okex_private_timeout_ms,
    )


async def run_call(
    config: Config,
    call: Callable[[OkexClient], Awaitable[Any]],
    private: bool = False,
) -> int:
    """Run one API call and print its payload. Returns 0 on success, 1 on error."""
    errors = config.validate(private=private)
    if errors:
        for err in errors:
            logger.error("Config error: {}", err)
        logger.info("Copy .env.example to .env and set OKEX_API_KEY, OKEX_API_SECRET.")
        return 1

    client = make_client(config)
    try:
        data = await call(client)
    except OkexError as e:
        logger.error("{} failed: {}", e.kind, e)
        return 1
    finally:
        await client.close()

    click.echo(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


contract_type_option = click.option(
    "--contract-type",
    type=click.Choice([c.value for c in ContractType]),
    default=None,
    help="Futures contract (defaults to CONTRACT_TYPE setting)",
)


@click.group()
def cli() -> None:
    """okex-rest - query the OKEx v1 REST API."""


@cli.command()
@click.argument("symbol", required=False)
async def ticker(symbol: str | None) -> None:
    """Show the spot ticker for SYMBOL."""
    config = Config()
    symbol = symbol or config.symbol
    raise SystemExit(await run_call(config, lambda c: c.get_ticker(symbol)))


@cli.command()
@click.argument("symbol", required=False)
@click.option("--size", type=int, default=200, show_default=True, help="Book depth (1-200)")
@click.option("--merge", default="1", show_default=True, help="Merge depth (e.g. 0.1)")
async def depth(symbol: str | None, size: int, merge: str) -> None:
    """Show the spot order book for SYMBOL."""
    config = Config()
    symbol = symbol or config.symbol
    raise SystemExit(
        await run_call(config, lambda c: c.get_depth(symbol, size=size, merge=merge))
    )


@cli.command("future-ticker")
@click.argument("symbol", required=False)
@contract_type_option
async def future_ticker(symbol: str | None, contract_type: str | None) -> None:
    """Show the futures ticker for SYMBOL."""
    config = Config()
    symbol = symbol or config.symbol
    contract = contract_type or config.contract_type
    raise SystemExit(
        await run_call(config, lambda c: c.get_future_ticker(symbol, contract))
    )


@cli.command()
async def userinfo() -> None:
    """Show spot account balances (needs API credentials)."""
    config = Config()
    raise SystemExit(
        await run_call(config, lambda c: c.get_user_info(), private=True)
    )


@cli.command("future-userinfo")
@click.option("--fixed", is_flag=True, help="Fixed-margin account instead of cross-margin")
async def future_userinfo(fixed: bool) -> None:
    """Show futures account information (needs API credentials)."""
    config = Config()
    if fixed:
        call = lambda c: c.get_future_user_info_fix()  # noqa: E731
    else:
        call = lambda c: c.get_future_user_info()  # noqa: E731
    raise SystemExit(await run_call(config, call, private=True))
