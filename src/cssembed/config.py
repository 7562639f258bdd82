from __future__ import annotations

from dataclasses import dataclass

from cssembed.parser.classifier import UrlMode


@dataclass(frozen=True)
class CssEmbedConfig:
    static_root: str = "static"
    mount: str = "static"
    url_prefix: str = "/static"
    development: bool = True
    mode: UrlMode = UrlMode.IMAGES
    host: str = "127.0.0.1"
    port: int = 5000
