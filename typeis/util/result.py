"""Lightweight result type for parse outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Result:
    """Outcome of a fallible step that must not raise past its caller.

    Evaluates as a boolean, unpacks as ``(success, message)`` and carries
    the produced object in *value*.

    Examples::

        r = parse_content_type("text/html; charset=utf-8")
        if r:
            print(r.value.type)

        ok, reason = parse_content_type("text/")
    """

    success: bool
    message: str = ""
    value: Any = field(default=None, repr=False)

    # -- constructors ------------------------------------------------------

    @classmethod
    def ok(cls, message: str = "", *, value: Any = None) -> Result:
        return cls(success=True, message=message, value=value)

    @classmethod
    def fail(cls, message: str = "") -> Result:
        return cls(success=False, message=message)

    # -- accessors ---------------------------------------------------------

    def unwrap_or(self, default: Any = None) -> Any:
        """Return *value* on success, *default* otherwise."""
        return self.value if self.success else default

    # -- protocols ---------------------------------------------------------

    def __bool__(self) -> bool:
        return self.success

    def __iter__(self):
        yield self.success
        yield self.message
