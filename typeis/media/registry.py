"""Extension to MIME-type lookup.

Backed by the platform :mod:`mimetypes` registry, with a small override
table for extensions it lacks or maps to legacy types.
"""

from __future__ import annotations

import mimetypes
from typing import Literal

EXTENSION_OVERRIDES: dict[str, str] = {
    # IANA / mime-db (jshttp mime-types 2.1) types
    ".json": "application/json",
    ".xml": "application/xml",
    ".md": "text/markdown",
    ".markdown": "text/markdown",
    ".mjs": "application/javascript",
    ".webmanifest": "application/manifest+json",
    ".woff2": "font/woff2",
    ".webp": "image/webp",
    ".m4a": "audio/mp4",
    # mime-db only lists audio/x-flac; IANA registered audio/flac
    ".flac": "audio/flac",
    # mimetypes reports these as content encodings, not types
    ".gz": "application/gzip",
    ".bz2": "application/x-bzip2",
    ".xz": "application/x-xz",
}


def lookup(extension: str) -> str | Literal[False]:
    """Return the media type for *extension*, or ``False`` if unknown.

    Accepts ``"html"``, ``".html"`` or a file name such as ``"page.HTML"``.
    """
    if not isinstance(extension, str) or not extension:
        return False

    ext = "." + extension.rsplit(".", 1)[-1].lower()
    if ext == ".":
        return False
    if ext in EXTENSION_OVERRIDES:
        return EXTENSION_OVERRIDES[ext]

    mime, _ = mimetypes.guess_type("file" + ext, strict=False)
    return mime.lower() if mime else False
