"""cssembed: embed stylesheet resources for packaging and live development."""

from cssembed.config import CssEmbedConfig
from cssembed.errors import CssEmbedError, ParseError, RewriteError
from cssembed.generation import (
    Entry,
    GenerationRequest,
    css_production_filter,
    css_production_image_filter,
)
from cssembed.parser import UrlMode, classify, parse_css
from cssembed.render import render_css
from cssembed.resources import load_resources

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CssEmbedConfig",
    "CssEmbedError",
    "ParseError",
    "RewriteError",
    "Entry",
    "GenerationRequest",
    "css_production_filter",
    "css_production_image_filter",
    "UrlMode",
    "classify",
    "parse_css",
    "render_css",
    "load_resources",
]
