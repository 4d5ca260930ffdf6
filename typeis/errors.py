"""Exception hierarchy.

The classification path never raises; these cover configuration only.
"""

from __future__ import annotations


class TypeIsError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(TypeIsError):
    """An environment variable holds a value the settings cannot use."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"{name}={value!r}: {reason}")
        self.name = name
        self.value = value
