"""Content-Type header grammar (RFC 7231 section 3.1.1.1).

``type "/" subtype *( OWS ";" OWS parameter )`` where both names are
tokens and parameter values are tokens or quoted-strings.  Parsing
failures are reported through :class:`~typeis.util.result.Result`
instead of exceptions.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from ..util.result import Result

logger = logging.getLogger(__name__)

_TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_QUOTED = r'"(?:[\x0b\x20\x21\x23-\x5b\x5d-\x7e\x80-\xff]|\\[\x0b\x20-\xff])*"'

_TYPE_RE = re.compile(rf"{_TOKEN}/{_TOKEN}")
_PARAM_RE = re.compile(rf"; *({_TOKEN}) *= *({_QUOTED}|{_TOKEN}) *")
_QESC_RE = re.compile(r"\\([\x0b\x20-\xff])")

# RFC 6838 restricted names
_MEDIA_TYPE_RE = re.compile(
    r" *([A-Za-z0-9][A-Za-z0-9!#$&^_-]{0,126})"
    r"/([A-Za-z0-9][A-Za-z0-9!#$&^_.+-]{0,126}) *"
)


@dataclass(frozen=True)
class ContentType:
    type: str
    parameters: dict[str, str] = field(default_factory=dict)


def parse_content_type(header: str) -> Result:
    """Parse *header* into a :class:`ContentType`.

    The media type is lowercased, as are parameter names.  Any text that
    does not fit the grammar (including a dangling ``;``) fails the parse.
    """
    if not isinstance(header, str):
        return Result.fail("content-type must be a string")

    index = header.find(";")
    media_type = (header[:index] if index != -1 else header).strip()
    if not _TYPE_RE.fullmatch(media_type):
        return Result.fail(f"invalid media type {media_type!r}")

    params: dict[str, str] = {}
    if index != -1:
        pos = index
        while (m := _PARAM_RE.match(header, pos)) is not None:
            pos = m.end()
            value = m.group(2)
            if value.startswith('"'):
                value = value[1:-1]
                if "\\" in value:
                    value = _QESC_RE.sub(r"\1", value)
            params[m.group(1).lower()] = value
        if header[pos:].strip():
            return Result.fail(f"invalid parameter format at offset {pos}")

    return Result.ok(value=ContentType(type=media_type.lower(), parameters=params))


def is_media_type(value: str) -> bool:
    """Return whether *value* is a bare ``type/subtype`` name."""
    return isinstance(value, str) and _MEDIA_TYPE_RE.fullmatch(value) is not None
