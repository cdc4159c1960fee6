"""Exchange connectivity module."""

from .callbacks import deliver
from .client import Credentials, OkexClient
from .endpoints import ContractType, contract_type
from .errors import (
    ConfigurationError,
    ErrorKind,
    ExchangeAPIError,
    HTTPStatusError,
    MalformedResponseError,
    OkexError,
    TransportError,
    error_message,
)
from .normalize import Outcome, normalize_response
from .signing import canonicalize, sign

__all__ = [
    "ConfigurationError",
    "ContractType",
    "Credentials",
    "ErrorKind",
    "ExchangeAPIError",
    "HTTPStatusError",
    "MalformedResponseError",
    "OkexClient",
    "OkexError",
    "Outcome",
    "TransportError",
    "canonicalize",
    "contract_type",
    "deliver",
    "error_message",
    "normalize_response",
    "sign",
]
