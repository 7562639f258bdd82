"""cssembed model layer -- public type re-exports."""

from cssembed.model.css import (
    Block,
    Declaration,
    Document,
    PlainText,
    Reference,
    ResourceRef,
    Value,
)

__all__ = [
    "Reference",
    "PlainText",
    "ResourceRef",
    "Value",
    "Declaration",
    "Block",
    "Document",
]
