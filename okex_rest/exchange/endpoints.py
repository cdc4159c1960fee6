"""Typed parameter records for every OKEx v1 endpoint.

Each record knows its endpoint name and whether it must be signed, and
flattens itself into the wire parameter mapping with ``to_params()``.
Fields left as ``None`` are not sent, so the exchange applies its own
defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from enum import StrEnum
from typing import Any, ClassVar

from .errors import ConfigurationError

Scalar = str | int | float


class ContractType(StrEnum):
    """Futures contract delivery period."""

    THIS_WEEK = "this_week"
    NEXT_WEEK = "next_week"
    QUARTER = "quarter"


def contract_type(value: ContractType | str | None = None) -> ContractType:
    """Normalize a ``contract_type`` argument, defaulting to quarterly."""
    if value is None or value == "":
        return ContractType.QUARTER
    try:
        return ContractType(value)
    except ValueError:
        valid = ", ".join(c.value for c in ContractType)
        msg = f"contract_type {value!r} is not one of: {valid}"
        raise ConfigurationError(msg) from None


def _orders_data(orders: Any) -> str:
    """Batch orders travel as a compact JSON array string."""
    if isinstance(orders, str):
        return orders
    return json.dumps(list(orders), separators=(",", ":"))


@dataclass(slots=True, frozen=True)
class EndpointRequest:
    """Base for endpoint parameter records."""

    endpoint: ClassVar[str]
    signed: ClassVar[bool] = False

    def to_params(self) -> dict[str, Scalar]:
        params: dict[str, Scalar] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                params[f.name] = value
        return params


@dataclass(slots=True, frozen=True)
class FutureRequest(EndpointRequest):
    """Futures record; ``contract_type`` is always sent, last."""

    def to_params(self) -> dict[str, Scalar]:
        params = EndpointRequest.to_params(self)
        params["contract_type"] = contract_type(params.pop("contract_type", None)).value
        return params


# --- Spot, public ---


@dataclass(slots=True, frozen=True)
class TickerRequest(EndpointRequest):
    endpoint: ClassVar[str] = "ticker"

    symbol: str


@dataclass(slots=True, frozen=True)
class DepthRequest(EndpointRequest):
    endpoint: ClassVar[str] = "depth"

    symbol: str
    size: int | None = 200
    merge: Scalar | None = 1


@dataclass(slots=True, frozen=True)
class TradesRequest(EndpointRequest):
    endpoint: ClassVar[str] = "trades"

    symbol: str
    since: int | None = None


@dataclass(slots=True, frozen=True)
class KlineRequest(EndpointRequest):
    """K-line query; ``type`` is the bar period, e.g. ``1min`` or ``1day``."""

    endpoint: ClassVar[str] = "kline"

    symbol: str
    type: str | None = None
    size: int | None = None
    since: int | None = None


@dataclass(slots=True, frozen=True)
class LendDepthRequest(EndpointRequest):
    endpoint: ClassVar[str] = "lend_depth"

    symbol: str


# --- Spot, private ---


@dataclass(slots=True, frozen=True)
class UserInfoRequest(EndpointRequest):
    endpoint: ClassVar[str] = "userinfo"
    signed: ClassVar[bool] = True


@dataclass(slots=True, frozen=True)
class TradeRequest(EndpointRequest):
    """Spot order. Market buys omit ``amount``, market sells omit ``price``."""

    endpoint: ClassVar[str] = "trade"
    signed: ClassVar[bool] = True

    symbol: str
    type: str
    amount: Scalar | None = None
    price: Scalar | None = None


@dataclass(slots=True, frozen=True)
class BatchTradeRequest(EndpointRequest):
    endpoint: ClassVar[str] = "batch_trade"
    signed: ClassVar[bool] = True

    symbol: str
    type: str
    orders_data: str

    @classmethod
    def build(cls, symbol: str, type: str, orders: Any) -> BatchTradeRequest:
        return cls(symbol=symbol, type=type, orders_data=_orders_data(orders))


@dataclass(slots=True, frozen=True)
class CancelOrderRequest(EndpointRequest):
    """``order_id`` may hold several ids separated by commas."""

    endpoint: ClassVar[str] = "cancel_order"
    signed: ClassVar[bool] = True

    symbol: str
    order_id: Scalar


@dataclass(slots=True, frozen=True)
class OrderInfoRequest(EndpointRequest):
    """``order_id=-1`` returns all unfilled orders."""

    endpoint: ClassVar[str] = "order_info"
    signed: ClassVar[bool] = True

    symbol: str
    order_id: Scalar


@dataclass(slots=True, frozen=True)
class OrdersInfoRequest(EndpointRequest):
    endpoint: ClassVar[str] = "orders_info"
    signed: ClassVar[bool] = True

    symbol: str
    type: int
    order_id: Scalar


@dataclass(slots=True, frozen=True)
class AccountRecordsRequest(EndpointRequest):
    """``type`` 0 lists deposits, 1 lists withdrawals."""

    endpoint: ClassVar[str] = "account_records"
    signed: ClassVar[bool] = True

    symbol: str
    type: int
    current_page: int
    page_length: int


@dataclass(slots=True, frozen=True)
class TradeHistoryRequest(EndpointRequest):
    endpoint: ClassVar[str] = "trade_history"
    signed: ClassVar[bool] = True

    symbol: str
    since: int


@dataclass(slots=True, frozen=True)
class OrderHistoryRequest(EndpointRequest):
    """``status`` 0 is unfilled, 1 is filled."""

    endpoint: ClassVar[str] = "order_history"
    signed: ClassVar[bool] = True

    symbol: str
    status: int
    current_page: int
    page_length: int


@dataclass(slots=True, frozen=True)
class WithdrawRequest(EndpointRequest):
    endpoint: ClassVar[str] = "withdraw"
    signed: ClassVar[bool] = True

    symbol: str
    chargefee: Scalar
    trade_pwd: str
    withdraw_address: str
    withdraw_amount: Scalar


@dataclass(slots=True, frozen=True)
class CancelWithdrawRequest(EndpointRequest):
    endpoint: ClassVar[str] = "cancel_withdraw"
    signed: ClassVar[bool] = True

    symbol: str
    withdraw_id: Scalar


# --- Futures, public ---


@dataclass(slots=True, frozen=True)
class FutureTickerRequest(FutureRequest):
    endpoint: ClassVar[str] = "future_ticker"

    symbol: str
    contract_type: ContractType | str | None = None


@dataclass(slots=True, frozen=True)
class FutureDepthRequest(FutureRequest):
    endpoint: ClassVar[str] = "future_depth"

    symbol: str
    size: int | None = 200
    merge: Scalar | None = 1
    contract_type: ContractType | str | None = None


@dataclass(slots=True, frozen=True)
class FutureTradesRequest(FutureRequest):
    endpoint: ClassVar[str] = "future_trades"

    symbol: str
    contract_type: ContractType | str | None = None


@dataclass(slots=True, frozen=True)
class FutureIndexRequest(EndpointRequest):
    endpoint: ClassVar[str] = "future_index"

    symbol: str


@dataclass(slots=True, frozen=True)
class ExchangeRateRequest(EndpointRequest):
    """USD/CNY exchange rate."""

    endpoint: ClassVar[str] = "exchange_rate"


@dataclass(slots=True, frozen=True)
class FutureEstimatedPriceRequest(EndpointRequest):
    endpoint: ClassVar[str] = "future_estimated_price"

    symbol: str


@dataclass(slots=True, frozen=True)
class FutureKlineRequest(FutureRequest):
    endpoint: ClassVar[str] = "future_kline"

    symbol: str
    type: str | None = None
    size: int | None = None
    since: int | None = None
    contract_type: ContractType | str | None = None


@dataclass(slots=True, frozen=True)
class FutureHoldAmountRequest(FutureRequest):
    endpoint: ClassVar[str] = "future_hold_amount"

    symbol: str
    contract_type: ContractType | str | None = None


# --- Futures, private ---


@dataclass(slots=True, frozen=True)
class FutureUserInfoRequest(EndpointRequest):
    """Cross-margin account info."""

    endpoint: ClassVar[str] = "future_userinfo"
    signed: ClassVar[bool] = True


@dataclass(slots=True, frozen=True)
class FuturePositionRequest(FutureRequest):
    endpoint: ClassVar[str] = "future_position"
    signed: ClassVar[bool] = True

    symbol: str
    contract_type: ContractType | str | None = None


@dataclass(slots=True, frozen=True)
class FutureTradeRequest(FutureRequest):
    """Futures order.

    ``type``: 1 open long, 2 open short, 3 close long, 4 close short.
    ``match_price``: 1 to trade at the counterparty price, ignoring ``price``.
    """

    endpoint: ClassVar[str] = "future_trade"
    signed: ClassVar[bool] = True

    symbol: str
    type: Scalar
    amount: Scalar | None = None
    price: Scalar | None = None
    match_price: Scalar | None = None
    lever_rate: int | None = None
    contract_type: ContractType | str | None = None


@dataclass(slots=True, frozen=True)
class FutureBatchTradeRequest(FutureRequest):
    endpoint: ClassVar[str] = "future_batch_trade"
    signed: ClassVar[bool] = True

    symbol: str
    orders_data: str
    lever_rate: int | None = None
    contract_type: ContractType | str | None = None

    @classmethod
    def build(
        cls,
        symbol: str,
        orders: Any,
        lever_rate: int | None = None,
        contract_type: ContractType | str | None = None,
    ) -> FutureBatchTradeRequest:
        return cls(
            symbol=symbol,
            orders_data=_orders_data(orders),
            lever_rate=lever_rate,
            contract_type=contract_type,
        )


@dataclass(slots=True, frozen=True)
class FutureTradesHistoryRequest(EndpointRequest):
    """Public futures trades for a day (``date`` as ``yyyy-MM-dd``)."""

    endpoint: ClassVar[str] = "future_trades_history"
    signed: ClassVar[bool] = True

    symbol: str
    date: str
    since: int


@dataclass(slots=True, frozen=True)
class FutureCancelRequest(FutureRequest):
    endpoint: ClassVar[str] = "future_cancel"
    signed: ClassVar[bool] = True

    symbol: str
    order_id: Scalar
    contract_type: ContractType | str | None = None


@dataclass(slots=True, frozen=True)
class FutureOrderInfoRequest(FutureRequest):
    """Order lookup; ``status`` and paging apply only to ``order_id=-1``."""

    endpoint: ClassVar[str] = "future_order_info"
    signed: ClassVar[bool] = True

    symbol: str
    order_id: Scalar
    status: int | None = None
    current_page: int | None = None
    page_length: int | None = None
    contract_type: ContractType | str | None = None

    def to_params(self) -> dict[str, Scalar]:
        params = FutureRequest.to_params(self)
        if str(self.order_id) != "-1":
            for key in ("status", "current_page", "page_length"):
                params.pop(key, None)
        return params


@dataclass(slots=True, frozen=True)
class FutureOrdersInfoRequest(FutureRequest):
    endpoint: ClassVar[str] = "future_orders_info"
    signed: ClassVar[bool] = True

    symbol: str
    order_id: Scalar
    contract_type: ContractType | str | None = None


@dataclass(slots=True, frozen=True)
class FutureUserInfoFixRequest(EndpointRequest):
    """Fixed-margin account info."""

    endpoint: ClassVar[str] = "future_userinfo_4fix"
    signed: ClassVar[bool] = True


@dataclass(slots=True, frozen=True)
class FuturePositionFixRequest(FutureRequest):
    endpoint: ClassVar[str] = "future_position_4fix"
    signed: ClassVar[bool] = True

    symbol: str
    contract_type: ContractType | str | None = None


@dataclass(slots=True, frozen=True)
class FutureExplosiveRequest(FutureRequest):
    """Liquidated orders; ``status`` 0 is within the last 7 days, 1 is older."""

    endpoint: ClassVar[str] = "future_explosive"
    signed: ClassVar[bool] = True

    symbol: str
    status: int
    current_page: int | None = None
    page_length: int | None = None
    contract_type: ContractType | str | None = None


@dataclass(slots=True, frozen=True)
class FutureDevolveRequest(EndpointRequest):
    """Fund transfer; ``type`` 1 is spot to futures, 2 is futures to spot."""

    endpoint: ClassVar[str] = "future_devolve"
    signed: ClassVar[bool] = True

    symbol: str
    type: int
    amount: Scalar
