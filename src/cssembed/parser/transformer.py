"""Lark Transformer that converts a stylesheet parse tree into blocks."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer

from cssembed.errors import ParseError
from cssembed.model.css import Block, Declaration, Document
from cssembed.parser.classifier import UrlMode, classify

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "css.lark"

RawBlock = tuple[str, list[tuple[str, str]]]

# Quoted strings are matched first so comment markers inside them survive.
_COMMENT_RE = re.compile(r"""("[^"]*"|'[^']*')|/\*.*?\*/""", re.DOTALL)


def _strip_comments(text: str) -> str:
    """Drop ``/* ... */`` comments outside quoted strings and trim whitespace."""
    return _COMMENT_RE.sub(lambda m: m.group(1) or "", text).strip()


class BlockTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into raw ``(selector, [(name, value)])`` blocks."""

    def declaration(self, items: list[Token | None]) -> tuple[str, str]:
        value = items[1]
        return (str(items[0]), _strip_comments(str(value)) if value is not None else "")

    def block(self, items: list[object]) -> RawBlock:
        selector = _strip_comments(str(items[0]))
        declarations = [item for item in items[1:] if isinstance(item, tuple)]
        return (selector, declarations)  # type: ignore[return-value]

    def start(self, items: list[RawBlock]) -> list[RawBlock]:
        return list(items)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def parse_blocks(source: str, *, label: str | None = None) -> list[RawBlock]:
    """Split stylesheet text into raw blocks of unclassified declarations.

    Raises :class:`ParseError` labelled with *label* when the text cannot be
    tokenized.
    """
    try:
        tree = _parser().parse(source)
    except Exception as e:
        # Lark exceptions carry line/column when the failure has a position.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(
            str(e), source=label, line=line, column=column, cause=e
        ) from e
    return BlockTransformer().transform(tree)


def parse_css(
    source: str, mode: UrlMode = UrlMode.IMAGES, *, label: str | None = None
) -> Document:
    """Parse stylesheet text and classify every declaration value."""
    raw = parse_blocks(source, label=label)
    blocks = tuple(
        Block(
            selector=selector,
            declarations=tuple(
                Declaration(name, classify(name, value, mode))
                for name, value in declarations
            ),
        )
        for selector, declarations in raw
    )
    logger.debug("Parsed %d block(s) from %s", len(blocks), label or "<string>")
    return Document(blocks=blocks)


def parse_css_file(path: str | Path, mode: UrlMode = UrlMode.IMAGES) -> Document:
    """Read a UTF-8 stylesheet and parse it, labelling errors with the file name."""
    path = Path(path)
    return parse_css(path.read_text(encoding="utf-8"), mode, label=str(path))


def parse_css_urls_file(path: str | Path) -> Document:
    """Parse a stylesheet recognising both ``background-image`` and ``src`` urls."""
    return parse_css_file(path, UrlMode.URLS)
