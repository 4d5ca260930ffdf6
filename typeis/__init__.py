"""typeis -- classify HTTP content types against type patterns."""

__version__ = "1.0.0"

from .errors import ConfigError, TypeIsError
from .media import (
    HasHeaders,
    TypeClassifier,
    classify,
    classify_request,
    extract_type,
    get_classifier,
    has_body,
    is_type,
    match,
    normalize,
)

__all__ = [
    "ConfigError",
    "HasHeaders",
    "TypeClassifier",
    "TypeIsError",
    "__version__",
    "classify",
    "classify_request",
    "extract_type",
    "get_classifier",
    "has_body",
    "is_type",
    "match",
    "normalize",
]
