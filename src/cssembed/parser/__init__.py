from cssembed.errors import ParseError
from cssembed.parser.classifier import UrlMode, classify, is_local_path, parse_url
from cssembed.parser.transformer import (
    parse_blocks,
    parse_css,
    parse_css_file,
    parse_css_urls_file,
)

__all__ = [
    "ParseError",
    "UrlMode",
    "classify",
    "is_local_path",
    "parse_url",
    "parse_blocks",
    "parse_css",
    "parse_css_file",
    "parse_css_urls_file",
]
