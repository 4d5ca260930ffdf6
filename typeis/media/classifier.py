"""Content-type classification against caller-supplied patterns.

Patterns may be an extension (``"html"``), a shortcut (``"json"``,
``"urlencoded"``, ``"multipart"``), a ``+suffix`` (``"+json"``) or a full
media type with ``*`` wildcards (``"text/*"``, ``"*/*+json"``).

Typical use::

    kind = classify_request(request, ["urlencoded", "json", "multipart"])

``None`` means the request has no body; ``False`` means it has one whose
type is missing, invalid or matches none of the patterns.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Literal

from ..config import settings
from ..util.singletons import register_singleton
from . import registry
from .cache import MISSING, BoundedCache, CacheStats
from .headers import HasHeaders, get_header, has_body, headers_of
from .parser import is_media_type, parse_content_type

logger = logging.getLogger(__name__)

# Full types that never need the grammar parser
COMMON_TYPES: frozenset[str] = frozenset({
    "application/json",
    "application/x-www-form-urlencoded",
    "text/html",
    "text/plain",
    "multipart/form-data",
    "application/octet-stream",
    "image/png",
    "image/jpeg",
    "application/xml",
    "text/xml",
})

SHORTCUTS: dict[str, str] = {
    "json": "application/json",
    "html": "text/html",
    "xml": "application/xml",
    "text": "text/plain",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "urlencoded": "application/x-www-form-urlencoded",
    "multipart": "multipart/*",
}

# NUL never appears in a header value or media type
_KEY_SEP = "\x00"


def extract_type(value: Any) -> str | None:
    """Return the bare ``type/subtype`` of *value*, or ``None``.

    *value* is a Content-Type header value or a request-like object whose
    ``content-type`` header is used.  Parameters are dropped.
    """
    if not value:
        return None

    if isinstance(value, HasHeaders):
        value = get_header(value.headers, "content-type")
        if not value:
            return None

    if not isinstance(value, str):
        return None

    if value in COMMON_TYPES:
        return value

    if ";" not in value:
        lowered = value.lower()
        if lowered in COMMON_TYPES:
            return lowered

    parsed = parse_content_type(value)
    content_type = parsed.unwrap_or()
    if content_type is None:
        logger.debug("Unparseable content-type %r: %s", value, parsed.message)
        return None
    media_type = content_type.type
    return media_type if is_media_type(media_type) else None


def _flatten(patterns: tuple[Any, ...]) -> Sequence[Any]:
    if len(patterns) == 1 and (patterns[0] is None or isinstance(patterns[0], (list, tuple))):
        return patterns[0] or ()
    return patterns


class TypeClassifier:
    """Normalizer, matcher and classifier sharing three bounded caches.

    One instance per process is the norm (see :func:`get_classifier`);
    separate instances never share cache state.
    """

    def __init__(
        self,
        *,
        normalize_cache_size: int = 500,
        match_cache_size: int = 1000,
        split_cache_size: int = 200,
        thread_safe: bool = True,
    ) -> None:
        self.normalize_cache = BoundedCache("normalize", normalize_cache_size, thread_safe=thread_safe)
        self.match_cache = BoundedCache("match", match_cache_size, thread_safe=thread_safe)
        self.split_cache = BoundedCache("split", split_cache_size, thread_safe=thread_safe)

    @classmethod
    def from_settings(cls, cfg: settings.Settings) -> TypeClassifier:
        return cls(
            normalize_cache_size=cfg.cache.normalize_size,
            match_cache_size=cfg.cache.match_size,
            split_cache_size=cfg.cache.split_size,
            thread_safe=cfg.cache.thread_safe,
        )

    # -- primitives --------------------------------------------------------

    def split(self, media_type: str) -> tuple[str, ...]:
        """Split on ``/``; callers must check for exactly two parts."""
        parts = self.split_cache.get(media_type)
        if parts is MISSING:
            parts = tuple(media_type.split("/"))
            self.split_cache.put(media_type, parts)
        return parts

    def normalize(self, type_: Any) -> str | Literal[False]:
        """Expand a shortcut, suffix or extension into a media type pattern."""
        if not isinstance(type_, str):
            return False

        result = self.normalize_cache.get(type_)
        if result is not MISSING:
            return result

        if type_ in SHORTCUTS:
            result = SHORTCUTS[type_]
        elif type_.startswith("+"):
            # "+json" -> "*/*+json"
            result = "*/*" + type_
        elif "/" not in type_:
            result = registry.lookup(type_)
        else:
            result = type_

        self.normalize_cache.put(type_, result)
        return result

    def match(self, expected: Any, actual: str) -> bool:
        """Return whether pattern *expected* matches media type *actual*."""
        if expected is False or not isinstance(expected, str) or not isinstance(actual, str):
            return False

        # the first NUL in a key must be the separator
        key = expected + _KEY_SEP + actual if _KEY_SEP not in expected else None
        if key is not None:
            result = self.match_cache.get(key)
            if result is not MISSING:
                return result

        if expected == actual:
            result = True
        elif expected == "*/*":
            parts = self.split(actual)
            result = len(parts) == 2 and all(parts)
        else:
            result = self._match_parts(self.split(expected), self.split(actual))

        if key is not None:
            self.match_cache.put(key, result)
        return result

    @staticmethod
    def _match_parts(expected: tuple[str, ...], actual: tuple[str, ...]) -> bool:
        if len(expected) != 2 or len(actual) != 2:
            return False
        exp_type, exp_sub = expected
        act_type, act_sub = actual
        if not (exp_type and exp_sub and act_type and act_sub):
            return False

        if exp_type != "*" and exp_type != act_type:
            return False

        if exp_sub.startswith("*+"):
            # "*+json" matches any subtype ending in "+json", or "json" itself
            suffix = exp_sub[1:]
            if len(exp_sub) <= len(act_sub) + 1 and act_sub.endswith(suffix):
                return True
            return act_sub == suffix[1:]
        return exp_sub == "*" or exp_sub == act_sub

    # -- classification ----------------------------------------------------

    def classify(self, value: Any, *patterns: Any) -> str | Literal[False]:
        """Return the first pattern matching *value*'s type, or ``False``.

        Wildcard and ``+suffix`` patterns return the actual type instead of
        the pattern.  With no patterns the extracted type is returned.
        """
        actual = extract_type(value)
        if not actual:
            return False

        candidates = _flatten(patterns)
        if not candidates:
            return actual

        for pattern in candidates:
            if self.match(self.normalize(pattern), actual):
                if pattern.startswith("+") or "*" in pattern:
                    return actual
                return pattern
        return False

    def classify_request(self, request: HasHeaders, *patterns: Any) -> str | Literal[False] | None:
        """Like :meth:`classify` on the request's Content-Type; ``None`` without a body."""
        if not has_body(request):
            return None
        value = get_header(headers_of(request), "content-type")
        return self.classify(value, _flatten(patterns))

    def cache_stats(self) -> list[CacheStats]:
        return [c.stats() for c in (self.normalize_cache, self.match_cache, self.split_cache)]


# -- process-wide default ---------------------------------------------------

_classifier: TypeClassifier | None = None


def get_classifier() -> TypeClassifier:
    global _classifier
    if _classifier is None:
        _classifier = TypeClassifier.from_settings(settings.cfg)
        logger.debug("Default classifier created (thread_safe=%s)", settings.cfg.thread_safe)
    return _classifier


def _reset_classifier() -> None:
    global _classifier
    _classifier = None


register_singleton(_reset_classifier)


def classify(value: Any, *patterns: Any) -> str | Literal[False]:
    return get_classifier().classify(value, *patterns)


def classify_request(request: HasHeaders, *patterns: Any) -> str | Literal[False] | None:
    return get_classifier().classify_request(request, *patterns)


def normalize(type_: Any) -> str | Literal[False]:
    return get_classifier().normalize(type_)


def match(expected: Any, actual: str) -> bool:
    return get_classifier().match(expected, actual)


is_type = classify
