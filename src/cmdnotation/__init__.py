"""
cmdnotation - parse and re-serialize a small shell-like command notation

Text holds one or more commands, each with a name, positional arguments,
options and an optional brace-delimited block of sub-commands. Parsing turns
text into immutable Command trees; encoding renders them back with minimal
but safe quoting.
"""

from importlib.metadata import version

from cmdnotation.config import EncoderConfig, ParserConfig
from cmdnotation.core.command import Command
from cmdnotation.encoding.encoder import (
    encode,
    encode_many,
    encode_option,
    encode_value,
    escape_template,
    escape_template_rn,
)
from cmdnotation.encoding.quoting import encode_string
from cmdnotation.exceptions.core import (
    ArityError,
    CommandNotationError,
    LexError,
    NestingDepthError,
    StructuralError,
)
from cmdnotation.parsing.parser import CommandParser, decode_value, parse, parse_one

__version__ = version("cmdnotation")

__all__ = [
    "__version__",
    "ArityError",
    "Command",
    "CommandNotationError",
    "CommandParser",
    "EncoderConfig",
    "LexError",
    "NestingDepthError",
    "ParserConfig",
    "StructuralError",
    "decode_value",
    "encode",
    "encode_many",
    "encode_option",
    "encode_string",
    "encode_value",
    "escape_template",
    "escape_template_rn",
    "parse",
    "parse_one",
]
