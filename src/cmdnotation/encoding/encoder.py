"""
Encoder that renders Command trees back into command notation text.

The output is deterministic: positionals first, then options, then a
trailing block of sub-commands. Values are written bare when safe and
quoted otherwise, so parse_one(encode(command)) reproduces the command.
"""

from collections.abc import Iterable, Sequence

from cmdnotation.config import MAX_ALLOWED_DEPTH, EncoderConfig
from cmdnotation.core.command import Command
from cmdnotation.encoding.quoting import (
    autoencode,
    autoencode_name,
    autoencode_option,
)
from cmdnotation.exceptions.core import NestingDepthError

_DEFAULT_CONFIG = EncoderConfig()


def _resolve_config(
    encode_rn: bool | None, fancy: bool | None, config: EncoderConfig | None
) -> EncoderConfig:
    config = config or _DEFAULT_CONFIG
    overrides = {}
    if encode_rn is not None:
        overrides["encode_rn"] = encode_rn
    if fancy is not None:
        overrides["fancy"] = fancy
    if overrides:
        return config.model_copy(update=overrides)
    return config


def _render_block(subs: list[str], fancy: bool) -> str:
    if not fancy:
        return " { " + " && ".join(subs) + " }"
    indented = [sub.replace("\n", "\n\t") for sub in subs]
    return " {\n\t" + "\n\t".join(indented) + "\n}"


def _encode(command: Command, encode_rn: bool, fancy: bool, depth: int = 0) -> str:
    parts = [autoencode_name(command.name, encode_rn)]
    parts.extend(autoencode(arg, encode_rn) for arg in command.args)
    for key, value in command.options:
        parts.append(autoencode_option(key, encode_rn))
        if value is not None:
            parts.append(autoencode(value, encode_rn))

    text = " ".join(parts)
    if command.subs:
        # Same cap the parser accepts for brace nesting
        if depth + 1 > MAX_ALLOWED_DEPTH:
            raise NestingDepthError(MAX_ALLOWED_DEPTH)
        subs = [_encode(sub, encode_rn, fancy, depth + 1) for sub in command.subs]
        text += _render_block(subs, fancy)
    return text


def encode(
    command: Command,
    encode_rn: bool | None = None,
    fancy: bool | None = None,
    *,
    config: EncoderConfig | None = None,
) -> str:
    """
    Render a command tree as command notation text.

    Params:
        command: Command to render (not modified)
        encode_rn: Escape \\r and \\n inside quoted values; overrides config
        fancy: Indent nested blocks over several lines; overrides config
        config: Base settings, EncoderConfig() when omitted

    Returns:
        Canonical text for the command

    Raises:
        ValueError: If a name or option key has no spelling that reads back
            unchanged: the names `&` and `&&`, names starting with a quote
            glyph, brace or whitespace, and the option key `--`
        NestingDepthError: If sub-commands nest deeper than MAX_ALLOWED_DEPTH
    """
    settings = _resolve_config(encode_rn, fancy, config)
    return _encode(command, settings.encode_rn, settings.fancy)


def encode_many(
    commands: Iterable[Command],
    encode_rn: bool | None = None,
    fancy: bool | None = None,
    *,
    config: EncoderConfig | None = None,
) -> str:
    """Render several commands, one per line, as parse() would read them back."""
    settings = _resolve_config(encode_rn, fancy, config)
    return "\n".join(
        _encode(command, settings.encode_rn, settings.fancy) for command in commands
    )


def encode_value(value: str, encode_rn: bool = True) -> str:
    """Encode a single value as it would appear as a positional or option value."""
    return autoencode(value, encode_rn)


def encode_option(key: str, encode_rn: bool = True) -> str:
    """Encode a single option key, keeping its leading dashes outside any quotes."""
    return autoencode_option(key, encode_rn)


def _interpolate(segments: Sequence[str], values: tuple, encode_rn: bool) -> str:
    if len(segments) != len(values) + 1:
        raise ValueError(
            f"Expected {len(values) + 1} template segments for {len(values)} values, "
            f"got {len(segments)}"
        )
    pieces = []
    for segment, value in zip(segments, values):
        pieces.append(segment)
        pieces.append(autoencode(str(value), encode_rn))
    pieces.append(segments[-1])
    return "".join(pieces)


def escape_template(segments: Sequence[str], *values: object) -> str:
    """
    Interpolate runtime values into literal notation text.

    Each value is converted with str() and encoded so it reads back as one
    term. Carriage returns and newlines in values are kept raw inside the
    quotes.

    Params:
        segments: Literal notation fragments, one more than there are values
        *values: Values placed between consecutive segments

    Returns:
        The assembled notation text

    Raises:
        ValueError: If the segment count does not match the value count

    Examples:
        escape_template(["cp ", " ", ""], "a b", "c") -> "cp `a b` c"
    """
    return _interpolate(segments, values, encode_rn=False)


def escape_template_rn(segments: Sequence[str], *values: object) -> str:
    """Same as escape_template() but escapes \\r and \\n inside values."""
    return _interpolate(segments, values, encode_rn=True)
