"""OKEx client errors and the exchange error-code table."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

import httpx


class ErrorKind(StrEnum):
    """Failure class of an OKEx request."""

    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    HTTP = "http"
    MALFORMED = "malformed"
    EXCHANGE = "exchange"


class OkexError(Exception):
    """Raised when an OKEx request cannot produce a payload."""

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        code: int | str | None = None,
        description: str = "",
        response: httpx.Response | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.description = description
        self.response = response

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!s}, code={self.code!r}, message={self.message!r})"


class ConfigurationError(OkexError):
    """Missing credentials or invalid arguments, detected before any network call."""

    kind = ErrorKind.CONFIGURATION


class TransportError(OkexError):
    """DNS, connection or timeout failure."""

    kind = ErrorKind.TRANSPORT


class HTTPStatusError(OkexError):
    """Status code outside the 2xx range."""

    kind = ErrorKind.HTTP


class MalformedResponseError(OkexError):
    """Response body could not be parsed into structured data."""

    kind = ErrorKind.MALFORMED


class ExchangeAPIError(OkexError):
    """Response body carries an ``error_code`` field."""

    kind = ErrorKind.EXCHANGE


ERROR_CODES: dict[int, str] = {
    # Spot
    10000: "Required parameter can not be null",
    10001: "Requests are too frequent",
    10002: "System Error",
    10003: "Restricted list request, please try again later",
    10004: "IP restriction",
    10005: "Key does not exist",
    10006: "User does not exist",
    10007: "Signatures do not match",
    10008: "Illegal parameter",
    10009: "Order does not exist",
    10010: "Insufficient balance",
    10011: "Order is less than minimum trade amount",
    10012: "Unsupported symbol (not btc_usd or ltc_usd)",
    10013: "This interface only accepts https requests",
    10014: "Order price must be between 0 and 1,000,000",
    10015: "Order price differs from current market price too much",
    10016: "Insufficient coins balance",
    10017: "API authorization error",
    10026: "Loan (including reserved loan) and margin cannot be withdrawn",
    10027: "Cannot withdraw within 24 hrs of authentication information modification",
    10028: "Withdrawal amount exceeds daily limit",
    10029: "Account has unpaid loan, please cancel/pay off the loan before withdraw",
    10031: "Deposits can only be withdrawn after 6 confirmations",
    10032: "Please enabled phone/google authenticator",
    10033: "Fee higher than maximum network transaction fee",
    10034: "Fee lower than minimum network transaction fee",
    10035: "Insufficient BTC/LTC",
    10036: "Withdrawal amount too low",
    10037: "Trade password not set",
    10040: "Withdrawal cancellation fails",
    10041: "Withdrawal address not approved",
    10042: "Admin password error",
    10100: "User account frozen",
    10216: "Non-available API",
    # Futures
    20001: "User does not exist",
    20002: "User frozen",
    20003: "User frozen due to liquidation",
    20004: "Futures account frozen",
    20005: "User futures account does not exist",
    20006: "Required field missing",
    20007: "Illegal parameter",
    20008: "Futures account balance is empty",
    20009: "Futures contract status error",
    20010: "Risk rate information does not exist",
    20011: (
        "Margin ratio below 90%/80% before opening BTC with 10x/20x leverage, "
        "or below 80%/60% before opening LTC with 10x/20x leverage"
    ),
    20012: (
        "Margin ratio below 90%/80% after opening BTC with 10x/20x leverage, "
        "or below 80%/60% after opening LTC with 10x/20x leverage"
    ),
    20013: "Temporarily no counter party price",
    20014: "System error",
    20015: "Order does not exist",
    20016: "Close amount exceeds available position in the same direction",
    20017: "Not authorized operation",
    20018: "Order price is more than 103% or less than 97% of the previous minute price",
    20019: "IP restricted from accessing this resource",
    20020: "Secret key does not exist",
    20021: "Index information does not exist",
    20022: (
        "Wrong API interface (cross margin mode must call cross margin API, "
        "fixed margin mode must call fixed margin API)"
    ),
    20023: "Account in fixed-margin mode",
    20024: "Sign signature does not match",
    20025: "Leverage rate error",
    20026: "API authentication error",
    20027: "No transaction record",
    20028: "Contract does not exist",
    20029: "Transfer amount exceeds transferable amount",
    20030: "Account has outstanding loans",
    20038: "This function is not available in your country or region due to local regulations",
    20049: "Request frequency too high",
    20061: "Only one leverage is supported per direction of the same contract",
    21020: "Contract is being delivered, orders cannot be placed",
    21021: "Contract is being settled, orders cannot be placed",
    # HTTP
    503: "Too many requests (Http)",
}


def error_message(code: Any) -> str:
    """Human readable message for an OKEx ``error_code``."""
    try:
        message = ERROR_CODES.get(int(code))
    except (TypeError, ValueError):
        message = None
    if message is None:
        return f"Unknown OKEX error code: {code}"
    return message
