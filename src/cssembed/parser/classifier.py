"""Classify declaration values that carry a single-quoted ``url('...')`` literal."""

from __future__ import annotations

from enum import StrEnum

from cssembed.model.css import PlainText, Reference, ResourceRef, Value

__all__ = ["UrlMode", "parse_url", "is_local_path", "classify"]

_URL_OPEN = "url('"


class UrlMode(StrEnum):
    """Which attribute names may carry a resource reference."""

    URLS = "urls"  # background-image and src
    IMAGES = "images"  # background-image only


_ATTRIBUTES: dict[UrlMode, frozenset[str]] = {
    UrlMode.URLS: frozenset({"background-image", "src"}),
    UrlMode.IMAGES: frozenset({"background-image"}),
}


def parse_url(value: str) -> str | None:
    """Extract the path from ``url('path')`` at the start of *value*.

    Leading whitespace is skipped. The path runs up to the next single quote,
    or to the end of the value when there is none. Returns ``None`` when the
    value does not start with ``url('``.
    """
    rest = value.lstrip()
    if not rest.startswith(_URL_OPEN):
        return None
    rest = rest[len(_URL_OPEN):]
    path, _, _ = rest.partition("'")
    return path


def is_local_path(path: str) -> bool:
    """Return ``True`` unless *path* starts with ``http`` or ``/``."""
    return not path.startswith(("http", "/"))


def classify(name: str, value: str, mode: UrlMode = UrlMode.IMAGES) -> Value:
    """Classify a declaration value as plain text or a local resource reference."""
    if name not in _ATTRIBUTES[mode]:
        return PlainText(value)
    path = parse_url(value)
    if path is None or not is_local_path(path):
        return PlainText(value)
    return ResourceRef(Reference(path))
