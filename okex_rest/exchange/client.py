"""OKEx v1 REST API client for spot and futures market data and trading."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Self, TYPE_CHECKING

import httpx
from loguru import logger

from . import endpoints as ep
from .errors import ConfigurationError
from .normalize import normalize_response
from .signing import sign, stringify_params

if TYPE_CHECKING:
    import sys
    from types import TracebackType

DEFAULT_BASE_URL = "https://www.okex.com"
DEFAULT_TIMEOUT_MS = 20000

DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType(
    {"User-Agent": "OKEX Python API Wrapper"}
)
FORM_HEADERS: Mapping[str, str] = MappingProxyType(
    {"Content-Type": "application/x-www-form-urlencoded"}
)


@dataclass(slots=True, frozen=True)
class Credentials:
    """API key and secret used to sign private requests."""

    api_key: str = ""
    secret: str = field(default="", repr=False)

    def __bool__(self) -> bool:
        return bool(self.api_key and self.secret)


def _describe(method: str, url: str, params: Mapping[str, str]) -> str:
    shown = {k: v for k, v in params.items() if k != "sign"}
    return f"{method} request to url {url} with params {json.dumps(shown)}"


class OkexClient:
    """Async client for the OKEx v1 REST API.

    Public endpoints need no credentials. Private endpoints raise
    ConfigurationError unless both ``api_key`` and ``api_secret`` are set.
    Every call returns the decoded JSON payload or raises an OkexError.
    """

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
        base_url: str = DEFAULT_BASE_URL,
        timeout_ms: float = DEFAULT_TIMEOUT_MS,
        private_timeout_ms: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._credentials = Credentials(api_key or "", api_secret or "")
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._timeout = timeout_ms / 1000
        self._private_timeout = (
            private_timeout_ms / 1000 if private_timeout_ms is not None else None
        )
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def api_key(self) -> str:
        return self._credentials.api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        """Public request timeout in seconds."""
        return self._timeout

    @property
    def private_timeout(self) -> float | None:
        """Private request timeout in seconds, ``None`` for no timeout."""
        return self._private_timeout

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers=dict(DEFAULT_HEADERS),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        await self._get_client()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: sys.exc_info  # noqa: PYI036
        | tuple[type[BaseException], BaseException, TracebackType]
        | None,
    ) -> None:
        await self.close()

    def _url(self, endpoint: str) -> str:
        return f"{self._base_url}/api/v1/{endpoint}.do"

    def _sign(self, params: Mapping[str, Any]) -> str:
        """Generate the MD5 signature for signed endpoints."""
        return sign(params, self._credentials.secret)

    async def _public_request(self, endpoint: str, params: Any) -> Any:
        """GET a market data endpoint; params go in the query string."""
        wire = stringify_params(params)
        url = self._url(endpoint)
        description = _describe("GET", url, wire)
        logger.debug("Sending {}", description)

        client = await self._get_client()
        try:
            response = await client.get(url, params=wire, timeout=self._timeout)
        except httpx.RequestError as e:
            return normalize_response(description, form=False, cause=e).unwrap()

        return normalize_response(description, form=False, response=response).unwrap()

    async def _private_request(self, endpoint: str, params: Any) -> Any:
        """POST a signed, form-encoded request to an account endpoint."""
        if not self._credentials:
            msg = "api_key and secret must be provided to make this API request"
            raise ConfigurationError(msg)

        wire = stringify_params(params)
        wire["api_key"] = self._credentials.api_key
        wire["sign"] = self._sign(wire)

        url = self._url(endpoint)
        description = _describe("POST", url, wire)
        logger.debug("Sending {}", description)

        client = await self._get_client()
        try:
            response = await client.post(
                url,
                data=wire,
                headers=dict(FORM_HEADERS),
                timeout=self._private_timeout,
            )
        except httpx.RequestError as e:
            return normalize_response(description, form=True, cause=e).unwrap()

        return normalize_response(description, form=True, response=response).unwrap()

    async def request(self, record: ep.EndpointRequest) -> Any:
        """Dispatch an endpoint record to the public or private path."""
        if record.signed:
            return await self._private_request(record.endpoint, record.to_params())
        return await self._public_request(record.endpoint, record.to_params())

    # --- Spot, public ---

    async def get_ticker(self, symbol: str) -> dict[str, Any]:
        """Get the latest ticker for a symbol, e.g. ``btc_usd``."""
        return await self.request(ep.TickerRequest(symbol))

    async def get_depth(
        self, symbol: str, size: int | None = 200, merge: ep.Scalar | None = 1
    ) -> dict[str, Any]:
        """Get the order book (``asks`` and ``bids``)."""
        return await self.request(ep.DepthRequest(symbol, size, merge))

    async def get_trades(self, symbol: str, since: int | None = None) -> list[dict]:
        """Get recent trades, optionally only those after trade id ``since``."""
        return await self.request(ep.TradesRequest(symbol, since))

    async def get_kline(
        self,
        symbol: str,
        type: str | None = None,
        size: int | None = None,
        since: int | None = None,
    ) -> list[list]:
        """Get candlestick data.

        Returns list of [timestamp, open, high, low, close, volume]
        """
        return await self.request(ep.KlineRequest(symbol, type, size, since))

    async def get_lend_depth(self, symbol: str) -> dict[str, Any]:
        return await self.request(ep.LendDepthRequest(symbol))

    # --- Spot, private ---

    async def get_user_info(self) -> dict[str, Any]:
        """Get account information including balances."""
        return await self.request(ep.UserInfoRequest())

    async def add_trade(
        self,
        symbol: str,
        type: str,
        amount: ep.Scalar | None = None,
        price: ep.Scalar | None = None,
    ) -> dict[str, Any]:
        """Place a spot order.

        Args:
            symbol: Trading pair (e.g. btc_usd)
            type: buy, sell, buy_market or sell_market
            amount: Base quantity (omit for buy_market)
            price: Limit price, or quote amount for buy_market
        """
        logger.info("Placing order: {} {} amount={} price={}", type, symbol, amount, price)
        result = await self.request(ep.TradeRequest(symbol, type, amount, price))
        logger.info("Order response: {}", result)
        return result

    async def add_batch_trades(
        self, symbol: str, type: str, orders: list[dict[str, Any]] | str
    ) -> dict[str, Any]:
        """Place up to five limit orders; ``orders`` is a list of price/amount/type dicts."""
        logger.info("Placing batch order: {} {} {}", type, symbol, orders)
        return await self.request(ep.BatchTradeRequest.build(symbol, type, orders))

    async def cancel_order(self, symbol: str, order_id: ep.Scalar) -> dict[str, Any]:
        logger.info("Cancelling order {} on {}", order_id, symbol)
        return await self.request(ep.CancelOrderRequest(symbol, order_id))

    async def get_order_info(self, symbol: str, order_id: ep.Scalar) -> dict[str, Any]:
        """Get one order, or all unfilled orders when ``order_id`` is -1."""
        return await self.request(ep.OrderInfoRequest(symbol, order_id))

    async def get_orders_info(
        self, symbol: str, type: int, order_id: ep.Scalar
    ) -> dict[str, Any]:
        """Get several orders by comma separated ids (``type`` 0 unfilled, 1 filled)."""
        return await self.request(ep.OrdersInfoRequest(symbol, type, order_id))

    async def get_account_records(
        self, symbol: str, type: int, current_page: int, page_length: int
    ) -> dict[str, Any]:
        return await self.request(
            ep.AccountRecordsRequest(symbol, type, current_page, page_length)
        )

    async def get_trade_history(self, symbol: str, since: int) -> list[dict]:
        return await self.request(ep.TradeHistoryRequest(symbol, since))

    async def get_order_history(
        self, symbol: str, status: int, current_page: int, page_length: int
    ) -> dict[str, Any]:
        return await self.request(
            ep.OrderHistoryRequest(symbol, status, current_page, page_length)
        )

    async def add_withdraw(
        self,
        symbol: str,
        chargefee: ep.Scalar,
        trade_pwd: str,
        withdraw_address: str,
        withdraw_amount: ep.Scalar,
    ) -> dict[str, Any]:
        logger.info("Withdrawing {} {} to {}", withdraw_amount, symbol, withdraw_address)
        return await self.request(
            ep.WithdrawRequest(symbol, chargefee, trade_pwd, withdraw_address, withdraw_amount)
        )

    async def cancel_withdraw(self, symbol: str, withdraw_id: ep.Scalar) -> dict[str, Any]:
        logger.info("Cancelling withdrawal {} on {}", withdraw_id, symbol)
        return await self.request(ep.CancelWithdrawRequest(symbol, withdraw_id))

    # --- Futures, public ---

    async def get_future_ticker(
        self, symbol: str, contract_type: ep.ContractType | str | None = None
    ) -> dict[str, Any]:
        return await self.request(ep.FutureTickerRequest(symbol, contract_type))

    async def get_future_depth(
        self,
        symbol: str,
        size: int | None = 200,
        merge: ep.Scalar | None = 1,
        contract_type: ep.ContractType | str | None = None,
    ) -> dict[str, Any]:
        return await self.request(ep.FutureDepthRequest(symbol, size, merge, contract_type))

    async def get_future_trades(
        self, symbol: str, contract_type: ep.ContractType | str | None = None
    ) -> list[dict]:
        return await self.request(ep.FutureTradesRequest(symbol, contract_type))

    async def get_future_index(self, symbol: str) -> dict[str, Any]:
        return await self.request(ep.FutureIndexRequest(symbol))

    async def get_exchange_rate(self) -> dict[str, Any]:
        """Get the USD/CNY rate used by the exchange."""
        return await self.request(ep.ExchangeRateRequest())

    async def get_future_estimated_price(self, symbol: str) -> dict[str, Any]:
        """Get the estimated delivery price."""
        return await self.request(ep.FutureEstimatedPriceRequest(symbol))

    async def get_future_kline(
        self,
        symbol: str,
        type: str | None = None,
        size: int | None = None,
        since: int | None = None,
        contract_type: ep.ContractType | str | None = None,
    ) -> list[list]:
        """Get futures candlesticks; ``type`` is e.g. 1min, 30min, 1hour, 1day, 1week."""
        return await self.request(ep.FutureKlineRequest(symbol, type, size, since, contract_type))

    async def get_future_hold_amount(
        self, symbol: str, contract_type: ep.ContractType | str | None = None
    ) -> list[dict]:
        return await self.request(ep.FutureHoldAmountRequest(symbol, contract_type))

    # --- Futures, private ---

    async def get_future_user_info(self) -> dict[str, Any]:
        """Get cross-margin futures account information."""
        return await self.request(ep.FutureUserInfoRequest())

    async def get_future_position(
        self, symbol: str, contract_type: ep.ContractType | str | None = None
    ) -> dict[str, Any]:
        return await self.request(ep.FuturePositionRequest(symbol, contract_type))

    async def add_future_trade(
        self,
        symbol: str,
        type: ep.Scalar,
        amount: ep.Scalar | None = None,
        price: ep.Scalar | None = None,
        match_price: ep.Scalar | None = None,
        lever_rate: int | None = None,
        contract_type: ep.ContractType | str | None = None,
    ) -> dict[str, Any]:
        """Place a futures order.

        Args:
            symbol: Contract underlying (e.g. btc_usd)
            type: 1 open long, 2 open short, 3 close long, 4 close short
            amount: Number of contracts
            price: Limit price (ignored when match_price is 1)
            match_price: 1 to trade at the counterparty price
            lever_rate: 10 or 20
            contract_type: this_week, next_week or quarter (default)
        """
        record = ep.FutureTradeRequest(
            symbol, type, amount, price, match_price, lever_rate, contract_type
        )
        logger.info("Placing future order: {}", record.to_params())
        result = await self.request(record)
        logger.info("Future order response: {}", result)
        return result

    async def add_future_batch_trades(
        self,
        symbol: str,
        orders: list[dict[str, Any]] | str,
        lever_rate: int | None = None,
        contract_type: ep.ContractType | str | None = None,
    ) -> dict[str, Any]:
        logger.info("Placing future batch order: {} {}", symbol, orders)
        return await self.request(
            ep.FutureBatchTradeRequest.build(symbol, orders, lever_rate, contract_type)
        )

    async def get_future_trades_history(
        self, symbol: str, date: str, since: int
    ) -> list[dict]:
        return await self.request(ep.FutureTradesHistoryRequest(symbol, date, since))

    async def cancel_future_order(
        self,
        symbol: str,
        order_id: ep.Scalar,
        contract_type: ep.ContractType | str | None = None,
    ) -> dict[str, Any]:
        logger.info("Cancelling future order {} on {}", order_id, symbol)
        return await self.request(ep.FutureCancelRequest(symbol, order_id, contract_type))

    async def get_future_order_info(
        self,
        symbol: str,
        order_id: ep.Scalar,
        status: int | None = None,
        current_page: int | None = None,
        page_length: int | None = None,
        contract_type: ep.ContractType | str | None = None,
    ) -> dict[str, Any]:
        """Get one futures order, or a page of orders by ``status`` when ``order_id`` is -1."""
        return await self.request(
            ep.FutureOrderInfoRequest(
                symbol, order_id, status, current_page, page_length, contract_type
            )
        )

    async def get_future_orders_info(
        self,
        symbol: str,
        order_id: ep.Scalar,
        contract_type: ep.ContractType | str | None = None,
    ) -> dict[str, Any]:
        return await self.request(ep.FutureOrdersInfoRequest(symbol, order_id, contract_type))

    async def get_future_user_info_fix(self) -> dict[str, Any]:
        """Get fixed-margin futures account information."""
        return await self.request(ep.FutureUserInfoFixRequest())

    async def get_future_position_fix(
        self, symbol: str, contract_type: ep.ContractType | str | None = None
    ) -> dict[str, Any]:
        return await self.request(ep.FuturePositionFixRequest(symbol, contract_type))

    async def get_future_explosive(
        self,
        symbol: str,
        status: int,
        current_page: int | None = None,
        page_length: int | None = None,
        contract_type: ep.ContractType | str | None = None,
    ) -> dict[str, Any]:
        return await self.request(
            ep.FutureExplosiveRequest(symbol, status, current_page, page_length, contract_type)
        )

    async def add_future_devolve(self, symbol: str, type: int, amount: ep.Scalar) -> dict[str, Any]:
        """Transfer funds between the spot and futures accounts."""
        logger.info("Transferring {} {} (type={})", amount, symbol, type)
        return await self.request(ep.FutureDevolveRequest(symbol, type, amount))
