"""
Exception classes for command notation processing.

This module defines specific exception types for the error conditions that
can occur while tokenizing, splitting and building command notation text.
Every error aborts the whole parse; no partial result is ever returned.
"""

from dataclasses import dataclass


@dataclass
class ErrorContext:
    """
    Context information for error messages.

    Captures where an error occurred in the source text, both as a raw
    offset and as a human friendly line/column pair.

    Params:
        position: Zero-based offset into the source text
        line: One-based line number
        column: One-based column number
        source_line: Text of the physical line containing the error
    """

    position: int
    line: int
    column: int
    source_line: str = ""

    @classmethod
    def from_source(cls, text: str, position: int) -> "ErrorContext":
        """
        Build a context by locating an offset in the source text.

        Params:
            text: Full source text
            position: Zero-based offset (clamped to the text bounds)

        Returns:
            ErrorContext with line, column and the surrounding source line
        """
        position = max(0, min(position, len(text)))
        line_start = text.rfind("\n", 0, position) + 1
        line_end = text.find("\n", position)
        if line_end == -1:
            line_end = len(text)
        return cls(
            position=position,
            line=text.count("\n", 0, position) + 1,
            column=position - line_start + 1,
            source_line=text[line_start:line_end].rstrip("\r"),
        )

    def format_location(self) -> str:
        """
        Format location information for display under an error message.

        Returns:
            Formatted location string
        """
        lines = [f"  at line {self.line}, column {self.column}"]
        if self.source_line:
            lines.append(f"  source: {self.source_line}")
            lines.append("          " + " " * (self.column - 1) + "^")
        return "\n".join(lines)


class CommandNotationError(Exception):
    """Base exception for all command notation errors."""

    pass


class LexError(CommandNotationError):
    """Raised when the tokenizer meets text it cannot scan."""

    def __init__(
        self, message: str, position: int, context: ErrorContext | None = None
    ):
        """
        Initialize the exception.

        Params:
            message: Short description of the lexical problem
            position: Offset into the source where scanning failed
            context: Optional ErrorContext with line/column information
        """
        self.reason = message
        self.position = position
        self.context = context

        primary_error = f"{message} at({position})"
        if context:
            super().__init__(f"{primary_error}\n{context.format_location()}")
        else:
            super().__init__(primary_error)


class StructuralError(CommandNotationError):
    """Raised when tokens cannot be grouped into commands and blocks."""

    def __init__(self, message: str, position: int | None = None):
        """
        Initialize the exception.

        Params:
            message: Description of the structural problem
            position: Source offset of the offending token, if known
        """
        self.reason = message
        self.position = position
        if position is None:
            super().__init__(message)
        else:
            super().__init__(f"{message} at({position})")


class NestingDepthError(StructuralError):
    """Raised when brace blocks or sub-command trees nest deeper than allowed."""

    def __init__(self, max_depth: int, position: int | None = None):
        """
        Initialize the exception.

        Params:
            max_depth: The configured nesting limit that was exceeded
            position: Source offset of the brace that crossed the limit
        """
        self.max_depth = max_depth
        super().__init__(f"Nesting depth exceeds maximum of {max_depth}", position)


class ArityError(CommandNotationError):
    """Raised when a single result was required but a different count was produced."""

    def __init__(self, expected: int, actual: int, what: str = "command"):
        """
        Initialize the exception.

        Params:
            expected: Number of results required
            actual: Number of results produced
            what: Noun describing the counted results
        """
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} {what}, got {actual}")
