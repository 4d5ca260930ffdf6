"""aiohttp middleware rejecting request bodies of unexpected types."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from aiohttp import web

from ..media.classifier import TypeClassifier, get_classifier

logger = logging.getLogger(__name__)

_Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]

DEFAULT_METHODS: frozenset[str] = frozenset({"POST", "PUT", "PATCH"})


def content_type_middleware(
    *patterns: Any,
    methods: Iterable[str] = DEFAULT_METHODS,
    classifier: TypeClassifier | None = None,
) -> Callable[..., Awaitable[web.StreamResponse]]:
    """Build a middleware accepting only bodies matching *patterns*.

    Bodiless requests pass through.  On a match the classified type is
    stored as ``request["content_type"]``; otherwise a 415 is returned.
    """
    if len(patterns) == 1 and isinstance(patterns[0], (list, tuple)):
        patterns = tuple(patterns[0])
    checked = frozenset(m.upper() for m in methods)

    @web.middleware
    async def _content_type_middleware(request: web.Request, handler: _Handler) -> web.StreamResponse:
        if request.method not in checked:
            return await handler(request)

        result = (classifier or get_classifier()).classify_request(request, *patterns)
        if result is None:
            return await handler(request)
        if result is False:
            logger.warning(
                "Rejected %s %s: unsupported content-type %r",
                request.method,
                request.path,
                request.headers.get("Content-Type", ""),
            )
            return web.json_response(
                {
                    "status": "unsupported_media_type",
                    "message": f"Content-Type must match one of: {', '.join(map(str, patterns))}",
                },
                status=415,
            )

        request["content_type"] = result
        return await handler(request)

    return _content_type_middleware
