"""aiohttp integration."""

from .middleware import content_type_middleware

__all__ = ["content_type_middleware"]
