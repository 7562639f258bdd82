"""Error hierarchy for cssembed."""
from __future__ import annotations


class CssEmbedError(Exception):
    """Base error for all cssembed errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ParseError(CssEmbedError):
    """Raised when the block grammar cannot tokenize a stylesheet."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        line: int | None = None,
        column: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.source = source
        self.line = line
        self.column = column
        label = source if source is not None else "<string>"
        super().__init__(f"Unable to parse {label}: {message}", cause=cause)


class RewriteError(CssEmbedError):
    """Raised when a ``background-image`` declaration cannot be rewritten.

    The scanner commits once it has matched the property name; a missing
    colon, ``url('`` or closing ``')`` after that point aborts the rewrite.
    """

    def __init__(
        self,
        message: str,
        *,
        source_file: str | None = None,
        offset: int | None = None,
    ) -> None:
        self.source_file = source_file
        self.offset = offset
        where = source_file if source_file is not None else "<bytes>"
        if offset is not None:
            where = f"{where} at byte {offset}"
        super().__init__(f"Unable to rewrite {where}: {message}")
