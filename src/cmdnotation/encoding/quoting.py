"""
Quoting helpers shared by the encoder.

Decides whether a value can be written as a bare term and, when it cannot,
picks the narrowest quote delimiter that does not collide with the value.
"""

from cmdnotation.core.types import NONQUOTED_CHARS
from cmdnotation.parsing.builder import POSITIONAL_SEPARATOR

MAX_UNQUOTED_VALUE_LENGTH = 50
MAX_UNQUOTED_OPTION_LENGTH = 100

# Leading characters that would be read as an option or an `&`/`&&` separator
RESERVED_VALUE_PREFIXES = ("-", "&")

# Fused terms with these values still lex as separators
SEPARATOR_TERMS = frozenset({"&", "&&"})

# Tried in order; the first glyph absent from the value wins
SINGLE_DELIMITERS = ("`", '"', "'")


def is_unquoted_safe(text: str) -> bool:
    """Check if every character of text may appear in a bare term."""
    return all(char in NONQUOTED_CHARS for char in text)


def value_needs_quoting(value: str) -> bool:
    """
    Check if a value must be quoted to read back as the same positional.

    Params:
        value: Raw argument or option value

    Returns:
        True unless the value is a short, non-empty run of nonquoted
        characters that does not start like an option or separator
    """
    if not value or len(value) > MAX_UNQUOTED_VALUE_LENGTH:
        return True
    if value.startswith(RESERVED_VALUE_PREFIXES):
        return True
    return not is_unquoted_safe(value)


def option_needs_quoting(key: str) -> bool:
    """Check if an option key must have its name part quoted."""
    return len(key) > MAX_UNQUOTED_OPTION_LENGTH or not is_unquoted_safe(key)


def _pick_triple_delimiter(escaped: str) -> str:
    first, last = escaped[0], escaped[-1]
    for glyph in ('"', "'"):
        if first != glyph and last != glyph:
            return glyph * 3
    return "```"


def encode_string(value: str, encode_rn: bool = True) -> str:
    """
    Quote a value unconditionally.

    Backslashes are always escaped; carriage returns and newlines only when
    encode_rn is set. A single backtick, double or single quote is used when
    the value lacks that glyph, otherwise a triple delimiter is chosen that
    does not touch either end of the value, and inner occurrences of it are
    broken up with a backslash before their last glyph.

    Params:
        value: Raw value
        encode_rn: Escape \\r and \\n as two-character sequences

    Returns:
        Quoted text that the tokenizer decodes back to value
    """
    escaped = value.replace("\\", "\\\\")
    if encode_rn:
        escaped = escaped.replace("\r", "\\r").replace("\n", "\\n")

    for delim in SINGLE_DELIMITERS:
        if delim not in escaped:
            return f"{delim}{escaped}{delim}"

    # All three glyphs occur, so escaped is never empty here
    delim = _pick_triple_delimiter(escaped)
    glyph = delim[0]
    escaped = escaped.replace(delim, f"{glyph}{glyph}\\{glyph}")
    return f"{delim}{escaped}{delim}"


def autoencode(value: str, encode_rn: bool = True) -> str:
    """Write a value bare when that is safe, quoted otherwise."""
    if value_needs_quoting(value):
        return encode_string(value, encode_rn)
    return value


def autoencode_name(name: str, encode_rn: bool = True) -> str:
    """
    Write a command name so that it reads back as one unquoted term.

    A name with characters outside the bare charset keeps its leading
    nonquoted run bare and quotes the remainder; the tokenizer fuses the
    two back into a single term.

    Params:
        name: Command name
        encode_rn: Escape \\r and \\n as two-character sequences

    Returns:
        Bare or fused text for the name

    Raises:
        ValueError: If the name is `&` or `&&`, or does not start with a
            nonquoted character (quote glyphs, braces, whitespace and the
            like)
    """
    if name in SEPARATOR_TERMS:
        raise ValueError(
            f"Command name {name!r} cannot be written, it reads back as a separator"
        )
    if is_unquoted_safe(name):
        return name
    if name[0] not in NONQUOTED_CHARS:
        raise ValueError(
            f"Command name {name!r} cannot be written, it must start with a "
            "nonquoted character"
        )

    end = 1
    while name[end] in NONQUOTED_CHARS:
        end += 1
    return name[:end] + encode_string(name[end:], encode_rn)


def autoencode_option(key: str, encode_rn: bool = True) -> str:
    """
    Write an option key, quoting only the part after its leading dashes.

    Examples:
        "--add-port" -> --add-port
        "--a b"      -> --`a b`
        "-'"         -> -`'`

    Raises:
        ValueError: For the key "--", which any spelling turns back into
            the positional separator
    """
    if key == POSITIONAL_SEPARATOR:
        raise ValueError(
            "Option key '--' cannot be written, it reads back as the "
            "positional separator"
        )
    if not option_needs_quoting(key):
        return key
    if key.startswith("--"):
        return "--" + encode_string(key[2:], encode_rn)
    if key.startswith("-"):
        return "-" + encode_string(key[1:], encode_rn)
    return encode_string(key, encode_rn)
