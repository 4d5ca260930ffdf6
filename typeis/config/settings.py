"""Runtime settings -- read from environment variables.

Cache capacities and locking are fixed for the lifetime of a classifier,
so changing them only affects classifiers built after ``cfg.reload()``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import ClassVar

from ..errors import ConfigError
from ..util.singletons import register_singleton

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})
_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class CacheConfig:
    normalize_size: int = 500
    match_size: int = 1000
    split_size: int = 200
    thread_safe: bool = True


class Settings:
    """Configuration sourced from ``TYPEIS_*`` environment variables."""

    _PREFIX: ClassVar[str] = "TYPEIS_"

    def __init__(self) -> None:
        self.reload()

    def reload(self) -> None:
        """Re-read the environment."""
        defaults = CacheConfig()
        self.cache = CacheConfig(
            normalize_size=self._int("NORMALIZE_CACHE_SIZE", defaults.normalize_size),
            match_size=self._int("MATCH_CACHE_SIZE", defaults.match_size),
            split_size=self._int("SPLIT_CACHE_SIZE", defaults.split_size),
            thread_safe=self._bool("THREAD_SAFE", defaults.thread_safe),
        )

        level = self._read("LOG_LEVEL").upper() or "WARNING"
        if level not in _LOG_LEVELS:
            raise ConfigError(self._PREFIX + "LOG_LEVEL", level, "unknown log level")
        self.log_level: str = level

    @property
    def thread_safe(self) -> bool:
        return self.cache.thread_safe

    # -- helpers -----------------------------------------------------------

    def _read(self, key: str) -> str:
        return os.getenv(self._PREFIX + key, "").strip()

    def _int(self, key: str, default: int) -> int:
        raw = self._read(key)
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigError(self._PREFIX + key, raw, "expected an integer") from None
        if value < 0:
            raise ConfigError(self._PREFIX + key, raw, "must not be negative")
        return value

    def _bool(self, key: str, default: bool) -> bool:
        raw = self._read(key)
        if not raw:
            return default
        return raw.lower() not in _FALSE_VALUES


# Module-level singleton
cfg = Settings()


def _reset_cfg() -> None:
    global cfg
    cfg = Settings()


register_singleton(_reset_cfg)
