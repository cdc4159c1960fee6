"""Turn an httpx result into a single success-or-error outcome."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import httpx
from loguru import logger

from .errors import (
    ExchangeAPIError,
    HTTPStatusError,
    MalformedResponseError,
    OkexError,
    TransportError,
    error_message,
)


@dataclass(slots=True, frozen=True)
class Outcome:
    """Exactly one of ``data`` or ``error`` is meaningful."""

    data: Any = None
    error: OkexError | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.data is not None:
            msg = "Outcome cannot carry both data and an error"
            raise ValueError(msg)

    @classmethod
    def success(cls, data: Any) -> Outcome:
        return cls(data=data)

    @classmethod
    def failure(cls, error: OkexError) -> Outcome:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the payload or raise the error."""
        if self.error is not None:
            raise self.error
        return self.data


_NOT_PARSED = object()


def _parse_body(response: httpx.Response, form: bool) -> Any:
    """Parse the response body, returning ``_NOT_PARSED`` on failure."""
    try:
        if form:
            return json.loads(response.text)
        data = response.json()
    except ValueError:
        return _NOT_PARSED
    # Public endpoints always answer with an object or an array
    if not isinstance(data, (dict, list)):
        return _NOT_PARSED
    return data


def _exchange_error(
    data: Any, description: str, response: httpx.Response
) -> ExchangeAPIError | None:
    if not isinstance(data, dict) or "error_code" not in data:
        return None
    code = data["error_code"]
    message = error_message(code)
    return ExchangeAPIError(
        f'{description} returned error code {code}, message: "{message}"',
        code=code,
        description=description,
        response=response,
    )


def normalize_response(
    description: str,
    *,
    form: bool,
    response: httpx.Response | None = None,
    cause: httpx.RequestError | None = None,
) -> Outcome:
    """Classify a finished request.

    Args:
        description: Human readable description of the attempted call.
        form: True for private (form-encoded POST) calls.
        response: The HTTP response, when the transport produced one.
        cause: The transport exception, when it did not.
    """
    if cause is not None or response is None:
        transport_error = TransportError(
            f"{description} failed: {cause}",
            code=type(cause).__name__ if cause is not None else None,
            description=description,
        )
        transport_error.__cause__ = cause
        if isinstance(cause, httpx.TimeoutException):
            logger.error("OKEx API request timed out: {}", transport_error)
        else:
            logger.error("OKEx request failed: {}", transport_error)
        return Outcome.failure(transport_error)

    data = _parse_body(response, form)

    if not 200 <= response.status_code < 300:
        failure: OkexError | None = None
        # Private bodies are only read on success
        if not form and data is not _NOT_PARSED:
            failure = _exchange_error(data, description, response)
        if failure is None:
            failure = HTTPStatusError(
                f"HTTP status code {response.status_code} returned from {description}",
                code=response.status_code,
                description=description,
                response=response,
            )
        logger.error("OKEx request failed: {}", failure)
        return Outcome.failure(failure)

    if data is _NOT_PARSED:
        if form:
            msg = f"Could not parse response from server: {response.text}"
        else:
            msg = f"Could not parse response from {description}\nResponse: {response.text}"
        malformed = MalformedResponseError(msg, description=description, response=response)
        logger.error("OKEx returned malformed response: {}", malformed)
        return Outcome.failure(malformed)

    exchange_error = _exchange_error(data, description, response)
    if exchange_error is not None:
        logger.error(
            "OKEx returned error code {}: {}",
            exchange_error.code,
            error_message(exchange_error.code),
        )
        return Outcome.failure(exchange_error)

    return Outcome.success(data)
