"""Parameter canonicalization and MD5 request signing."""

from __future__ import annotations

import hashlib
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from .errors import ConfigurationError

_SCALARS = (str, int, float, Decimal)


def stringify_params(params: Any) -> dict[str, str]:
    """Convert request parameters to the strings that are signed and sent.

    Raises ConfigurationError for a non-mapping argument or a value that is
    not a scalar (str, int, float, Decimal, bool).
    """
    if not isinstance(params, Mapping):
        msg = (
            f"params {params!r} must be a mapping. "
            "If there are no params then pass an empty dict {}"
        )
        raise ConfigurationError(msg)

    wire: dict[str, str] = {}
    for key, value in params.items():
        if isinstance(value, bool):
            wire[str(key)] = "true" if value else "false"
        elif isinstance(value, float):
            wire[str(key)] = format(Decimal(repr(value)), "f")
        elif isinstance(value, Decimal):
            wire[str(key)] = format(value, "f")
        elif isinstance(value, _SCALARS):
            wire[str(key)] = str(value)
        else:
            msg = f"param {key!r} has unsupported value {value!r}; expected a scalar"
            raise ConfigurationError(msg)
    return wire


def canonicalize(params: Mapping[str, Any]) -> str:
    """Join params as ``key=value`` pairs with ``&``, keys sorted ascending.

    Values are concatenated as-is, without URL encoding.
    """
    return "&".join(f"{key}={params[key]}" for key in sorted(params))


def sign(params: Mapping[str, Any], secret: str) -> str:
    """Generate the uppercase MD5 signature for a private endpoint."""
    payload = f"{canonicalize(params)}&secret_key={secret}"
    return hashlib.md5(payload.encode("utf-8")).hexdigest().upper()
