"""
Splitter that groups a flat token list into command lines and brace blocks.

LINE_BREAK and AND_AND start a new line. An OPEN_BRACE starts a nested
block whose lines are collected recursively and attached to the current
line as a single Block element.
"""

from collections.abc import Sequence

from cmdnotation.config import DEFAULT_MAX_DEPTH
from cmdnotation.core.types import Block, Line, Token, TokenKind
from cmdnotation.exceptions.core import NestingDepthError, StructuralError

LINE_SEPARATORS = frozenset({TokenKind.LINE_BREAK, TokenKind.AND_AND})


def _finish(lines: list[list[Token | Block]]) -> tuple[Line, ...]:
    return tuple(tuple(line) for line in lines if line)


def _split_level(
    tokens: Sequence[Token],
    start: int,
    depth: int,
    max_depth: int,
    opened_at: int | None,
) -> tuple[tuple[Line, ...], int]:
    """
    Collect lines until the matching close brace or the end of input.

    Returns:
        Tuple of (non-empty lines, index of the closing brace or len(tokens))
    """
    lines: list[list[Token | Block]] = [[]]
    i = start

    while True:
        if i >= len(tokens):
            if depth > 0:
                raise StructuralError("Unclosed OpenBrace", opened_at)
            return _finish(lines), i

        token = tokens[i]
        kind = token.kind

        if kind in LINE_SEPARATORS:
            lines.append([])
        elif kind is TokenKind.BACKSLASH:
            # Failed to cancel a following line break while lexing
            raise StructuralError("Unexpected standalone token Backslash", token.position)
        elif kind is TokenKind.AND:
            # Failed to cancel a preceding line break while lexing
            raise StructuralError("Unexpected standalone token And", token.position)
        elif kind is TokenKind.OPEN_BRACE:
            if depth + 1 > max_depth:
                raise NestingDepthError(max_depth, token.position)
            block_lines, i = _split_level(
                tokens, i + 1, depth + 1, max_depth, token.position
            )
            lines[-1].append(Block(block_lines, position=token.position))
        elif kind is TokenKind.CLOSE_BRACE:
            if depth == 0:
                raise StructuralError("Unmatched CloseBrace", token.position)
            return _finish(lines), i
        else:
            lines[-1].append(token)

        i += 1


def split(
    tokens: Sequence[Token], max_depth: int = DEFAULT_MAX_DEPTH
) -> tuple[Line, ...]:
    """
    Partition tokens into top-level lines, grouping brace blocks.

    Params:
        tokens: Tokens produced by tokenize()
        max_depth: Maximum brace nesting depth

    Returns:
        Tuple of non-empty lines; each line holds tokens and at most the
        Block elements that braces produced

    Raises:
        StructuralError: On a dangling Backslash/And token, an unmatched
            close brace or an unclosed open brace
        NestingDepthError: If braces nest deeper than max_depth
    """
    lines, _ = _split_level(tokens, 0, 0, max_depth, None)
    return lines
