"""
Token and line type definitions for command notation.

This module contains the tagged token type produced by the tokenizer and
the grouped line/block structures produced by the splitter.
"""

from dataclasses import dataclass, field
from enum import Enum

# All ASCII chars on an ANSI keyboard, less the three quotes '"`, braces {} and backslash
NONQUOTED_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890"
    "~!@#$%^&*()-_=+[]|;:,<.>/?"
)
QUOTE_CHARS = "\"'`"


class TokenKind(Enum):
    """Kind tag of a token."""

    LINE_BREAK = "line_break"
    AND_AND = "and_and"
    AND = "and"  # transient, cancelled against a preceding LINE_BREAK
    BACKSLASH = "backslash"  # transient, cancelled against a following LINE_BREAK
    OPEN_BRACE = "open_brace"
    CLOSE_BRACE = "close_brace"
    QUOTED = "quoted"
    UNQUOTED = "unquoted"


CONTENT_KINDS = frozenset({TokenKind.QUOTED, TokenKind.UNQUOTED})


@dataclass(frozen=True)
class Token:
    """
    One lexical unit of command notation.

    Control tokens carry no value; QUOTED and UNQUOTED tokens carry their
    decoded text. Position is kept for error reporting only and does not
    take part in equality.

    Params:
        kind: Token kind tag
        value: Decoded text for content tokens, None otherwise
        position: Source offset where the token started
    """

    kind: TokenKind
    value: str | None = None
    position: int = field(default=-1, compare=False)

    @property
    def is_content(self) -> bool:
        """Check if this token carries a string value."""
        return self.kind in CONTENT_KINDS

    def __str__(self) -> str:
        """Return a debug representation of the token."""
        if self.is_content:
            return f"{self.kind.name}({self.value!r})"
        return self.kind.name


@dataclass(frozen=True)
class Block:
    """
    A brace-delimited group of lines nested inside a command line.

    Params:
        lines: Non-empty lines collected between the braces
        position: Source offset of the opening brace
    """

    lines: tuple["Line", ...]
    position: int = field(default=-1, compare=False)


Line = tuple[Token | Block, ...]
