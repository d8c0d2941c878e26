"""
Core command notation components.

This package provides the token, block and command value types shared by
the parsing and encoding packages.
"""

from cmdnotation.core.command import Command, Option
from cmdnotation.core.types import (
    CONTENT_KINDS,
    NONQUOTED_CHARS,
    QUOTE_CHARS,
    Block,
    Line,
    Token,
    TokenKind,
)

__all__ = [
    "Block",
    "Command",
    "CONTENT_KINDS",
    "Line",
    "NONQUOTED_CHARS",
    "Option",
    "QUOTE_CHARS",
    "Token",
    "TokenKind",
]
