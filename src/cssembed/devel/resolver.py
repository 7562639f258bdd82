"""Serve the files referenced by rewritten development stylesheets."""

from __future__ import annotations

import base64
import logging
import mimetypes
import posixpath
import re
from pathlib import Path
from typing import Callable, Sequence

__all__ = [
    "encode_resource_token",
    "decode_resource_token",
    "guess_mime_type",
    "devel_extra_files",
]

logger = logging.getLogger(__name__)

_NON_ALPHABET = re.compile(rb"[^A-Za-z0-9+/]")

ReadBytes = Callable[[str], bytes]


def read_file(path: str) -> bytes:
    return Path(path).read_bytes()


def encode_resource_token(directory: str, url: bytes) -> str:
    """Base64-encode a stylesheet directory followed directly by a url payload."""
    return base64.b64encode(directory.encode("utf-8") + url).decode("ascii")


def _decode_lenient(token: str) -> bytes:
    data = _NON_ALPHABET.sub(b"", token.encode("utf-8"))
    if len(data) % 4 == 1:
        # A lone trailing character carries no complete byte.
        data = data[:-1]
    return base64.b64decode(data + b"=" * (-len(data) % 4))


def decode_resource_token(segment: str) -> str:
    """Recover the file path encoded in the last segment of a request.

    A trailing extension is dropped before decoding. Characters outside the
    base64 alphabet are ignored and missing padding is supplied.
    """
    token, _ = posixpath.splitext(segment)
    return _decode_lenient(token).decode("utf-8")


def guess_mime_type(path: str) -> str:
    """Guess the MIME type for a file path, defaulting to ``application/octet-stream``."""
    mime, _ = mimetypes.guess_type(path)
    return mime or "application/octet-stream"


def devel_extra_files(
    location: str,
    parts: Sequence[str],
    read_bytes: ReadBytes = read_file,
) -> tuple[str, bytes] | None:
    """Resolve a request below *location* to ``(mime_type, content)``.

    Returns ``None`` when the request's leading segments do not spell out
    *location*. Decode and read errors propagate.
    """
    if not parts or "/".join(parts[:-1]) != location:
        return None
    path = decode_resource_token(parts[-1])
    logger.debug("Serving development resource %s for %s", path, location)
    return guess_mime_type(path), read_bytes(path)
