"""Header access for request-like values and the body-presence check."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

# plain decimal numbers only; no "inf", "nan" or digit separators
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@runtime_checkable
class HasHeaders(Protocol):
    """Anything exposing a ``headers`` mapping (aiohttp requests included)."""

    @property
    def headers(self) -> Mapping[str, Any]: ...


def headers_of(value: HasHeaders | Mapping[str, Any]) -> Mapping[str, Any]:
    if isinstance(value, HasHeaders):
        return value.headers
    return value


def get_header(headers: Mapping[str, Any], name: str) -> Any:
    """Return header *name* (lowercase) or ``None`` when absent.

    Lowercase keys are tried first; plain dicts with other casing fall
    back to a case-folded scan.  Multidicts are case-insensitive already.
    """
    value = headers.get(name)
    if value is not None:
        return value
    for key, candidate in headers.items():
        if isinstance(key, str) and key.lower() == name:
            return candidate
    return None


def _is_number(value: Any) -> bool:
    if isinstance(value, (int, float)):
        return not math.isnan(value)
    if not isinstance(value, str):
        return False
    text = value.strip()
    if not text:
        # an empty header converts to 0
        return True
    return _DECIMAL_RE.fullmatch(text) is not None


def has_body(value: HasHeaders | Mapping[str, Any]) -> bool:
    """Return whether the message carries a body.

    A message with a body must set ``Transfer-Encoding`` or a numeric
    ``Content-Length`` (RFC 7230 section 3.3).
    """
    headers = headers_of(value)
    if get_header(headers, "transfer-encoding") is not None:
        return True
    content_length = get_header(headers, "content-length")
    return content_length is not None and _is_number(content_length)
