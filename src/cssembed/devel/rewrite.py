"""Format-preserving rewrite of ``background-image`` urls for development.

During development a stylesheet is served on every request, so it is not
parsed and re-rendered. Instead a single pass over the raw bytes finds each
``background-image: url('...')`` declaration and replaces only its url by
``<stylesheet name>/<base64 of directory + url>``. Every other byte is copied
through unchanged. The encoded path is served back by
:func:`cssembed.devel.resolver.devel_extra_files`.
"""

from __future__ import annotations

import logging
import posixpath

from cssembed.devel.resolver import ReadBytes, encode_resource_token, read_file
from cssembed.errors import RewriteError

__all__ = [
    "rewrite_background_images",
    "devel_pass_through",
    "devel_bg_img_b64",
    "source_directory",
]

logger = logging.getLogger(__name__)

_PROPERTY = b"background-image"
_URL_OPEN = b"url('"
_URL_CLOSE = b"')"
_BLANK = b" \t"


def source_directory(source_file: str) -> str:
    """Return the directory of *source_file* with a trailing separator.

    A bare file name lives in ``./``.
    """
    directory = posixpath.dirname(source_file)
    if not directory:
        return "./"
    return directory if directory.endswith("/") else directory + "/"


class _Scanner:
    """Cursor over an immutable byte buffer."""

    def __init__(self, data: bytes, source_file: str) -> None:
        self.data = data
        self.pos = 0
        self.source_file = source_file

    def take_blanks(self) -> bytes:
        start = self.pos
        while self.pos < len(self.data) and self.data[self.pos] in _BLANK:
            self.pos += 1
        return self.data[start:self.pos]

    def expect(self, literal: bytes) -> None:
        if not self.data.startswith(literal, self.pos):
            raise RewriteError(
                f"expected {literal.decode('ascii')!r} in background-image declaration",
                source_file=self.source_file,
                offset=self.pos,
            )
        self.pos += len(literal)

    def take_until(self, stop: bytes) -> bytes:
        end = self.data.find(stop, self.pos)
        if end < 0:
            end = len(self.data)
        chunk = self.data[self.pos:end]
        self.pos = end
        return chunk


def rewrite_background_images(location: str, source_file: str, data: bytes) -> bytes:
    """Rewrite every ``background-image`` url in *data*, preserving all other bytes.

    Raises :class:`RewriteError` when a ``background-image`` is not followed by
    optional blanks, a colon, optional blanks, ``url('``, a path and ``')``.
    """
    prefix = posixpath.basename(location).encode("utf-8") + b"/"
    directory = source_directory(source_file)
    scanner = _Scanner(data, source_file)
    out: list[bytes] = []
    count = 0

    while True:
        start = data.find(_PROPERTY, scanner.pos)
        if start < 0:
            out.append(data[scanner.pos:])
            break
        out.append(data[scanner.pos:start])
        scanner.pos = start + len(_PROPERTY)

        s1 = scanner.take_blanks()
        scanner.expect(b":")
        s2 = scanner.take_blanks()
        scanner.expect(_URL_OPEN)
        url = scanner.take_until(b"'")
        scanner.expect(_URL_CLOSE)

        token = encode_resource_token(directory, url).encode("ascii")
        out.extend(
            [_PROPERTY, s1, b":", s2, _URL_OPEN, prefix, token, _URL_CLOSE]
        )
        count += 1

    logger.debug("Rewrote %d background-image url(s) in %s", count, source_file)
    return b"".join(out)


def devel_pass_through(
    location: str, source_file: str, read_bytes: ReadBytes = read_file
) -> bytes:
    """Serve a stylesheet unchanged during development."""
    return read_bytes(source_file)


def devel_bg_img_b64(
    location: str, source_file: str, read_bytes: ReadBytes = read_file
) -> bytes:
    """Read a stylesheet and rewrite its background-image urls for development."""
    return rewrite_background_images(location, source_file, read_bytes(source_file))
