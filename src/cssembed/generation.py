"""Records handed to an asset-embedding framework when registering stylesheets."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import Callable, Sequence

from cssembed.config import CssEmbedConfig
from cssembed.devel.resolver import devel_extra_files
from cssembed.devel.rewrite import devel_bg_img_b64, devel_pass_through
from cssembed.filters import absolute_url_filter, inline_images_filter
from cssembed.parser.classifier import UrlMode

__all__ = [
    "CSS_MIME_TYPE",
    "GenerationRequest",
    "make_css_generation",
    "Entry",
    "css_production_filter",
    "css_production_image_filter",
    "entry_for",
]

CSS_MIME_TYPE = "text/css"

ProductionFilter = Callable[[str], bytes]
ExtraFiles = Callable[[Sequence[str]], tuple[str, bytes] | None]


@dataclass(frozen=True)
class GenerationRequest:
    """A processed stylesheet together with where it is mounted and came from.

    Post-processing filters receive this as their argument.
    """

    content: bytes
    location: str
    source_file: str


def make_css_generation(location: str, source_file: str, content: bytes) -> GenerationRequest:
    return GenerationRequest(content=content, location=location, source_file=source_file)


@dataclass(frozen=True)
class Entry:
    """A stylesheet registered under a location in the static mount.

    ``production_content`` builds the packaged bytes. ``devel_reload`` is
    called on every development request. ``devel_extra_files`` answers
    requests for other paths below the mount, returning ``None`` for paths
    it does not own.
    """

    location: str
    source_file: str
    production_content: Callable[[], bytes] = field(repr=False)
    devel_reload: Callable[[], bytes] = field(repr=False)
    devel_extra_files: ExtraFiles | None = field(default=None, repr=False)
    mime_type: str = CSS_MIME_TYPE

    def generate(self) -> GenerationRequest:
        """Run the production filter and wrap its output."""
        return make_css_generation(self.location, self.source_file, self.production_content())


def css_production_filter(
    prod_filter: ProductionFilter, location: str, source_file: str | Path
) -> Entry:
    """Register a stylesheet whose production bytes come from *prod_filter*.

    During development the file is served unchanged.
    """
    source_file = str(source_file)
    return Entry(
        location=location,
        source_file=source_file,
        production_content=partial(prod_filter, source_file),
        devel_reload=partial(devel_pass_through, location, source_file),
    )


def css_production_image_filter(
    prod_filter: ProductionFilter, location: str, source_file: str | Path
) -> Entry:
    """Like :func:`css_production_filter`, but rewrite background images in development.

    The rewritten urls point below *location* and are served by the entry's
    extra files resolver.
    """
    source_file = str(source_file)
    return Entry(
        location=location,
        source_file=source_file,
        production_content=partial(prod_filter, source_file),
        devel_reload=partial(devel_bg_img_b64, location, source_file),
        devel_extra_files=partial(devel_extra_files, location),
    )


def entry_for(config: CssEmbedConfig, source_file: str | Path) -> Entry:
    """Register *source_file* at its path relative to the configured static root.

    In image mode, background images are inlined in production and rewritten
    in development. In url mode, local urls are made absolute in production
    and the file is passed through in development.
    """
    source_file = Path(source_file).as_posix()
    location = posixpath.relpath(source_file, config.static_root)
    if config.mode is UrlMode.IMAGES:
        return css_production_image_filter(inline_images_filter(), location, source_file)
    return css_production_filter(
        absolute_url_filter(config.static_root, config.url_prefix), location, source_file
    )
