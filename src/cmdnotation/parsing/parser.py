"""
Parser for command notation.

This module ties the tokenizer, splitter and builder together. Parsing is a
pure function of the input text: any error at any stage aborts the whole
parse and nothing partial is returned.
"""

import logging

from cmdnotation.config import ParserConfig
from cmdnotation.core.command import Command
from cmdnotation.exceptions.core import ArityError, CommandNotationError, StructuralError
from cmdnotation.parsing.builder import build
from cmdnotation.parsing.splitter import split
from cmdnotation.parsing.tokenizer import tokenize

logger = logging.getLogger(__name__)


class CommandParser:
    """Parser for command notation text."""

    def __init__(self, config: ParserConfig | None = None):
        self.config = config or ParserConfig()

    def parse(self, text: str) -> list[Command]:
        """
        Parse text into the commands it contains.

        Params:
            text: Command notation text, possibly holding several lines

        Returns:
            Commands in source order; empty lines produce nothing

        Raises:
            LexError: If the text cannot be tokenized
            StructuralError: If tokens cannot be grouped into commands
        """
        try:
            tokens = tokenize(text)
            lines = split(tokens, max_depth=self.config.max_depth)
            commands = []
            for line in lines:
                command = build(line)
                if command is not None:
                    commands.append(command)
        except CommandNotationError as e:
            logger.debug("Failed to parse command notation: %s", e.args[0])
            raise

        logger.debug(
            "Parsed %d tokens into %d commands", len(tokens), len(commands)
        )
        return commands

    def parse_one(self, text: str) -> Command:
        """
        Parse text that must contain exactly one command.

        Raises:
            ArityError: If zero or more than one command was found
        """
        commands = self.parse(text)
        if len(commands) != 1:
            raise ArityError(1, len(commands))
        return commands[0]

    def decode_value(self, text: str) -> str:
        """
        Decode one value as written by encode_value().

        Params:
            text: Text holding a single quoted or unquoted term

        Returns:
            The decoded string

        Raises:
            LexError: If the text cannot be tokenized
            ArityError: If the text holds no token or more than one
            StructuralError: If the single token is not a value
        """
        tokens = tokenize(text)
        if len(tokens) != 1:
            raise ArityError(1, len(tokens), "value")
        token = tokens[0]
        if not token.is_content:
            raise StructuralError(
                f"Expected a value, got {token.kind.name}", token.position
            )
        return token.value


_default_parser = CommandParser()


def parse(text: str) -> list[Command]:
    """
    Convenience function to parse command notation text.

    Params:
        text: Command notation text

    Returns:
        Parsed commands in source order

    Raises:
        CommandNotationError: If the text is malformed
    """
    return _default_parser.parse(text)


def parse_one(text: str) -> Command:
    """Convenience function to parse text holding exactly one command."""
    return _default_parser.parse_one(text)


def decode_value(text: str) -> str:
    """Convenience function to decode a single encoded value."""
    return _default_parser.decode_value(text)
