"""
Tests for grouping tokens into command lines and brace blocks.
"""

import pytest

from cmdnotation.core.types import Block, Token, TokenKind
from cmdnotation.exceptions.core import NestingDepthError, StructuralError
from cmdnotation.parsing.splitter import split
from cmdnotation.parsing.tokenizer import tokenize


def u(value: str) -> Token:
    return Token(TokenKind.UNQUOTED, value)


def q(value: str) -> Token:
    return Token(TokenKind.QUOTED, value)


class TestLineSeparation:
    """Tests for splitting on line breaks and &&."""

    def test_single_line(self):
        """Test a line without separators stays one line."""
        assert split(tokenize('a b "c"')) == ((u("a"), u("b"), q("c")),)

    def test_newline_starts_new_line(self):
        """Test a line break separates commands."""
        assert split(tokenize("a b\nc")) == ((u("a"), u("b")), (u("c"),))

    def test_and_and_starts_new_line(self):
        """Test && separates commands like a line break."""
        assert split(tokenize("a && b")) == ((u("a"),), (u("b"),))

    def test_empty_lines_are_dropped(self):
        """Test blank lines and doubled separators produce no lines."""
        assert split(tokenize("\n\na\n\n&& &&\nb\n")) == ((u("a"),), (u("b"),))

    def test_empty_input(self):
        """Test empty input yields no lines."""
        assert split([]) == ()


class TestBlocks:
    """Tests for brace-delimited blocks."""

    def test_block_is_attached_to_current_line(self):
        """Test a block becomes one element at the end of its owning line."""
        lines = split(tokenize("a { b\n c }"))
        assert lines == ((u("a"), Block(((u("b"),), (u("c"),)))),)

    def test_block_lines_drop_empties(self):
        """Test blank lines inside a block are dropped."""
        lines = split(tokenize("a {\n\n b \n\n}"))
        assert lines == ((u("a"), Block(((u("b"),),))),)

    def test_empty_block(self):
        """Test an empty block is kept as a block with no lines."""
        assert split(tokenize("a {}")) == ((u("a"), Block(())),)

    def test_nested_blocks(self):
        """Test blocks nest recursively."""
        lines = split(tokenize("a { b { c } }"))
        inner = Block(((u("c"),),))
        assert lines == ((u("a"), Block(((u("b"), inner),))),)

    def test_scanning_resumes_after_block(self):
        """Test tokens after a closing brace continue the outer line."""
        lines = split(tokenize("a { b } c\nd"))
        assert lines == ((u("a"), Block(((u("b"),),)), u("c")), (u("d"),))

    def test_block_records_opening_position(self):
        """Test a block remembers the offset of its opening brace."""
        lines = split(tokenize("ab {c}"))
        assert lines[0][1].position == 3


class TestStructuralErrors:
    """Tests for malformed token structures."""

    def test_unmatched_close_brace(self):
        """Test a close brace at the top level is rejected."""
        with pytest.raises(StructuralError, match="Unmatched CloseBrace") as exc_info:
            split(tokenize("a }"))
        assert exc_info.value.position == 2

    def test_unclosed_open_brace(self):
        """Test running out of tokens inside a block is rejected."""
        with pytest.raises(StructuralError, match="Unclosed OpenBrace") as exc_info:
            split(tokenize("a { b { c }"))
        assert exc_info.value.position == 2

    def test_standalone_backslash(self):
        """Test a backslash that did not cancel a line break is rejected."""
        with pytest.raises(StructuralError, match="Unexpected standalone token Backslash"):
            split(tokenize("a \\ b"))

    def test_standalone_and(self):
        """Test an ampersand that did not cancel a line break is rejected."""
        with pytest.raises(StructuralError, match="Unexpected standalone token And"):
            split(tokenize("a & b"))

    def test_trailing_backslash(self):
        """Test a backslash at the end of input is rejected."""
        with pytest.raises(StructuralError):
            split(tokenize("a \\"))


class TestNestingDepth:
    """Tests for the nesting depth limit."""

    def test_depth_within_limit(self):
        """Test nesting up to the limit is accepted."""
        assert split(tokenize("a { b { c } }"), max_depth=2)

    def test_depth_over_limit(self):
        """Test nesting past the limit raises NestingDepthError."""
        with pytest.raises(NestingDepthError) as exc_info:
            split(tokenize("a { b { c } }"), max_depth=1)
        assert exc_info.value.max_depth == 1
        assert exc_info.value.position == 6

    def test_depth_error_is_structural(self):
        """Test NestingDepthError is caught as a StructuralError."""
        with pytest.raises(StructuralError):
            split(tokenize("{{{}}}"), max_depth=2)
