"""Render blocks back to stylesheet text in canonical form."""

from __future__ import annotations

from typing import Callable, Iterable

from cssembed.model.css import Document, PlainText, Reference, ResourceRef, Value

__all__ = ["render_blocks", "render_css", "original_literal"]

UrlRenderer = Callable[[Reference], str]


def render_blocks(blocks: Iterable[tuple[str, Iterable[tuple[str, str]]]]) -> str:
    """Serialize raw blocks as ``selector{name:value;name:value}``, one per line."""
    return "\n".join(
        selector + "{" + ";".join(f"{name}:{value}" for name, value in decls) + "}"
        for selector, decls in blocks
    )


def _render_value(value: Value, url_renderer: UrlRenderer) -> str:
    if isinstance(value, PlainText):
        return value.text
    if isinstance(value, ResourceRef):
        return url_renderer(value.reference)
    raise TypeError(f"Unknown value type: {type(value).__name__}")


def render_css(document: Document, url_renderer: UrlRenderer) -> str:
    """Render a document, replacing each reference by ``url_renderer(reference)``.

    Block and declaration order are preserved; formatting is not.
    """
    return render_blocks(
        (
            block.selector,
            [(d.name, _render_value(d.value, url_renderer)) for d in block.declarations],
        )
        for block in document.blocks
    )


def original_literal(reference: Reference) -> str:
    """Re-emit a reference as the ``url('...')`` literal it was parsed from."""
    return f"url('{reference.path}')"
