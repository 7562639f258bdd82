"""Stylesheet model: references, classified values, declarations and blocks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Reference:
    """A local resource path extracted from a ``url('...')`` literal.

    Always relative: never starts with ``http`` or ``/``.
    """

    path: str

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True)
class PlainText:
    """A declaration value passed through verbatim."""

    text: str


@dataclass(frozen=True)
class ResourceRef:
    """A declaration value that refers to a local resource."""

    reference: Reference


Value = PlainText | ResourceRef


@dataclass(frozen=True)
class Declaration:
    """A single ``name: value`` pair inside a block."""

    name: str
    value: Value


@dataclass(frozen=True)
class Block:
    """A selector with its declarations in source order."""

    selector: str
    declarations: tuple[Declaration, ...] = ()

    def references(self) -> list[Reference]:
        """Return the references of this block in declaration order (with repeats)."""
        return [
            decl.value.reference
            for decl in self.declarations
            if isinstance(decl.value, ResourceRef)
        ]


@dataclass(frozen=True)
class Document:
    """A parsed stylesheet: blocks in source order.

    Repeated selectors stay separate blocks.
    """

    blocks: tuple[Block, ...] = ()

    def references(self) -> list[Reference]:
        """Return every reference in the document, in order, with repeats."""
        refs: list[Reference] = []
        for block in self.blocks:
            refs.extend(block.references())
        return refs

    def distinct_references(self) -> list[Reference]:
        """Return each reference once, in order of first appearance."""
        return list(dict.fromkeys(self.references()))
