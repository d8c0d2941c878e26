"""
Command notation parsing components.

This package provides the tokenizer, the line/block splitter, the command
builder and the CommandParser facade that chains them.
"""

from cmdnotation.parsing.builder import build
from cmdnotation.parsing.parser import (
    CommandParser,
    decode_value,
    parse,
    parse_one,
)
from cmdnotation.parsing.splitter import split
from cmdnotation.parsing.tokenizer import tokenize

__all__ = [
    "CommandParser",
    "build",
    "decode_value",
    "parse",
    "parse_one",
    "split",
    "tokenize",
]
