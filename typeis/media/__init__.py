"""Media type matching, normalization and body detection."""

from .classifier import (
    COMMON_TYPES,
    SHORTCUTS,
    TypeClassifier,
    classify,
    classify_request,
    extract_type,
    get_classifier,
    is_type,
    match,
    normalize,
)
from .headers import HasHeaders, has_body
from .parser import ContentType, is_media_type, parse_content_type
from .registry import lookup

__all__ = [
    "COMMON_TYPES",
    "SHORTCUTS",
    "ContentType",
    "HasHeaders",
    "TypeClassifier",
    "classify",
    "classify_request",
    "extract_type",
    "get_classifier",
    "has_body",
    "is_media_type",
    "is_type",
    "lookup",
    "match",
    "normalize",
    "parse_content_type",
]
