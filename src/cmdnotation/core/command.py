"""
Structured command value produced by the parser and consumed by the encoder.
"""

from collections.abc import Iterable
from typing import Any

from attrs import field, frozen

from cmdnotation.config import MAX_ALLOWED_DEPTH
from cmdnotation.exceptions.core import NestingDepthError

Option = tuple[str, str | None]


def _to_options(options: Iterable[Iterable[str | None]]) -> tuple[Option, ...]:
    result = []
    for option in options:
        key, value = option
        result.append((key, value))
    return tuple(result)


def _validate_name(instance: "Command", attribute: Any, value: str) -> None:
    if not value:
        raise ValueError("Command name must be a non-empty string")


@frozen
class Command:
    """
    One parsed command line.

    All sequences are stored as tuples, so a Command tree is immutable
    once built. Options keep their source order and may repeat keys; a
    value of None marks a flag option.

    Params:
        name: Command name (first term of the line)
        args: Positional arguments in order
        options: (key, value) pairs in order, duplicates allowed
        subs: Commands from a trailing brace block
    """

    name: str = field(validator=_validate_name)
    args: tuple[str, ...] = field(default=(), converter=tuple)
    options: tuple[Option, ...] = field(default=(), converter=_to_options)
    subs: tuple["Command", ...] = field(default=(), converter=tuple)

    def has_option(self, key: str) -> bool:
        """Check if an option with the given key is present."""
        return any(k == key for k, _ in self.options)

    def get_option(self, key: str) -> str | None:
        """
        Return the value of the first option with the given key.

        Params:
            key: Option key including its leading dashes

        Returns:
            The option value, or None if absent or a flag
        """
        for k, v in self.options:
            if k == key:
                return v
        return None

    def option_values(self, key: str) -> list[str | None]:
        """Return the values of every option with the given key, in order."""
        return [v for k, v in self.options if k == key]

    def to_dict(self) -> dict[str, Any]:
        """
        Convert this command tree to plain dicts and lists.

        Returns:
            Dictionary with name, args, options (as [key, value] lists) and subs

        Raises:
            NestingDepthError: If sub-commands nest deeper than MAX_ALLOWED_DEPTH
        """
        return self._to_dict(0)

    def _to_dict(self, depth: int) -> dict[str, Any]:
        if self.subs and depth + 1 > MAX_ALLOWED_DEPTH:
            raise NestingDepthError(MAX_ALLOWED_DEPTH)
        return {
            "name": self.name,
            "args": list(self.args),
            "options": [[k, v] for k, v in self.options],
            "subs": [sub._to_dict(depth + 1) for sub in self.subs],
        }
