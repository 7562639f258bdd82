"""Production filters built on the structural parse/render path."""

from __future__ import annotations

import base64
import logging
import posixpath
from pathlib import Path
from typing import Callable

from cssembed.devel.resolver import guess_mime_type
from cssembed.model.css import Reference
from cssembed.parser.classifier import UrlMode
from cssembed.parser.transformer import parse_css_file
from cssembed.render import original_literal, render_css
from cssembed.resources import load_resources

__all__ = [
    "read_file_if_exists",
    "make_data_uri",
    "absolute_url_filter",
    "inline_images_filter",
    "canonical_filter",
]

logger = logging.getLogger(__name__)


def read_file_if_exists(path: str) -> bytes | None:
    """Return the bytes at *path*, or ``None`` if there is no such file."""
    p = Path(path)
    if not p.is_file():
        return None
    return p.read_bytes()


def make_data_uri(data: bytes, media_type: str) -> str:
    """Inline an image's bytes as the target of a ``url('data:...')`` literal."""
    return f"data:{media_type};base64,{base64.b64encode(data).decode('ascii')}"


def absolute_url_filter(
    static_root: str, url_prefix: str = "/static"
) -> Callable[[str], bytes]:
    """Make every local ``url('...')`` absolute under *url_prefix*.

    References are relative to the stylesheet's own directory, which is
    located relative to *static_root*.
    """

    def run(source_file: str) -> bytes:
        document = parse_css_file(source_file, UrlMode.URLS)
        css_dir = posixpath.relpath(posixpath.dirname(source_file) or ".", static_root)

        def render(ref: Reference) -> str:
            path = posixpath.normpath(posixpath.join(css_dir, ref.path))
            return f"url('{url_prefix.rstrip('/')}/{path}')"

        return render_css(document, render).encode("utf-8")

    return run


def inline_images_filter(
    loader: Callable[[str], bytes | None] = read_file_if_exists,
    max_workers: int | None = None,
) -> Callable[[str], bytes]:
    """Replace each local background image by a ``data:`` URI.

    Images are looked up relative to the stylesheet's directory. An image the
    loader cannot find keeps its original ``url('...')`` literal.
    """

    def run(source_file: str) -> bytes:
        document = parse_css_file(source_file, UrlMode.IMAGES)
        images = load_resources(
            document, posixpath.dirname(source_file), loader, max_workers=max_workers
        )

        def render(ref: Reference) -> str:
            data = images.get(ref)
            if data is None:
                logger.warning("Image %s not found for %s", ref.path, source_file)
                return original_literal(ref)
            return f"url('{make_data_uri(data, guess_mime_type(ref.path))}')"

        return render_css(document, render).encode("utf-8")

    return run


def canonical_filter(source_file: str) -> bytes:
    """Re-render a stylesheet in canonical form, keeping every url as written."""
    document = parse_css_file(source_file, UrlMode.URLS)
    return render_css(document, original_literal).encode("utf-8")
