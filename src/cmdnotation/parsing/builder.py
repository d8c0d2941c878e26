"""
Builder that turns one split line into a Command.

The first term is the command name. Remaining terms are classified as
positionals or options: a dashed unquoted term is an option and absorbs a
following term as its value unless that term is itself dashed and unquoted.
Quoted terms are always positional, and `--` makes everything after it
positional.
"""

from cmdnotation.core.command import Command, Option
from cmdnotation.core.types import Block, Line, Token, TokenKind
from cmdnotation.exceptions.core import StructuralError

POSITIONAL_SEPARATOR = "--"


def _is_option(token: Token) -> bool:
    return token.kind is TokenKind.UNQUOTED and token.value.startswith("-")


def _can_absorb(token: Token | Block | None) -> bool:
    """Check if a term may be taken as the value of a preceding option."""
    if token is None or isinstance(token, Block):
        return False
    return token.kind is TokenKind.QUOTED or not token.value.startswith("-")


def build(line: Line) -> Command | None:
    """
    Build a Command from one line.

    Params:
        line: Tokens of one line, optionally ending with a Block

    Returns:
        The Command, or None for an empty line

    Raises:
        StructuralError: If the line starts with a block or a quoted term,
            or if anything follows a block on the same line
    """
    if not line:
        return None

    head = line[0]
    if isinstance(head, Block):
        raise StructuralError(
            "Found subcommand block without outer command", head.position
        )
    if head.kind is not TokenKind.UNQUOTED:
        raise StructuralError("Command name must be an unquoted term", head.position)

    args: list[str] = []
    options: list[Option] = []
    subs: list[Command] = []
    positional_mode = False

    i = 1
    while i < len(line):
        current = line[i]
        following = line[i + 1] if i + 1 < len(line) else None

        if isinstance(current, Block):
            for block_line in current.lines:
                sub = build(block_line)
                if sub is not None:
                    subs.append(sub)
            if following is not None:
                raise StructuralError(
                    "Extra tokens after subcommand block without linebreak or AndAnd",
                    following.position,
                )
        elif positional_mode or current.kind is TokenKind.QUOTED:
            args.append(current.value)
        elif current.value == POSITIONAL_SEPARATOR:
            positional_mode = True
        elif _is_option(current) and _can_absorb(following):
            options.append((current.value, following.value))
            i += 1
        elif _is_option(current):
            options.append((current.value, None))
        else:
            args.append(current.value)
        i += 1

    return Command(name=head.value, args=args, options=options, subs=subs)
