"""
Command notation exception classes.

This package provides all exception types raised by the tokenizer, splitter,
builder and parser for consistent error handling and reporting.
"""

from cmdnotation.exceptions.core import (
    ArityError,
    CommandNotationError,
    ErrorContext,
    LexError,
    NestingDepthError,
    StructuralError,
)

__all__ = [
    "CommandNotationError",
    "ErrorContext",
    "LexError",
    "StructuralError",
    "NestingDepthError",
    "ArityError",
]
