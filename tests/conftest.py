"""
Shared test fixtures and utilities for the cmdnotation test suite.
"""

import pytest

from cmdnotation.config import ParserConfig
from cmdnotation.core.command import Command
from cmdnotation.parsing.parser import CommandParser


@pytest.fixture
def parser():
    """Parser with default configuration."""
    return CommandParser()


@pytest.fixture
def shallow_parser():
    """Parser that rejects brace blocks nested more than two deep."""
    return CommandParser(ParserConfig(max_depth=2))


@pytest.fixture
def firewall_command():
    """Command with an absorbed option value and a two-line block."""
    return Command(
        name="firewall-cmd",
        options=[("--add-port", "443/tcp")],
        subs=[
            Command(name="subcommand", args=["a"]),
            Command(name="subcommand", args=["b"]),
        ],
    )
