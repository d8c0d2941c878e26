"""
Tests for the quoting rules used by the encoder.
"""

from typing import NamedTuple

import pytest

from cmdnotation.encoding.quoting import (
    autoencode,
    autoencode_name,
    autoencode_option,
    encode_string,
    is_unquoted_safe,
    option_needs_quoting,
    value_needs_quoting,
)


class TestCharset:
    """Tests for the bare-term character check."""

    def test_keyboard_punctuation_is_safe(self):
        """Test printable punctuation other than quotes, braces and backslash is safe."""
        assert is_unquoted_safe("~!@#$%^&*()-_=+[]|;:,<.>/?")

    @pytest.mark.parametrize("char", [" ", "\t", "\n", '"', "'", "`", "{", "}", "\\", "é"])
    def test_unsafe_characters(self, char):
        """Test whitespace, quotes, braces, backslash and non-ASCII are unsafe."""
        assert not is_unquoted_safe(f"a{char}b")

    def test_empty_is_safe(self):
        """Test the empty string passes the character check."""
        assert is_unquoted_safe("")


class TestValueNeedsQuoting:
    """Tests for deciding whether a value may be written bare."""

    @pytest.mark.parametrize("value", ["a", "443/tcp", "a" * 50, "x-&"])
    def test_bare_values(self, value):
        """Test short nonquoted values are written bare."""
        assert not value_needs_quoting(value)

    @pytest.mark.parametrize("value", ["", "a" * 51, "-x", "--", "&", "&&", "a b"])
    def test_quoted_values(self, value):
        """Test empty, long, dash/ampersand-led and unsafe values need quotes."""
        assert value_needs_quoting(value)

    def test_option_length_limit(self):
        """Test option keys may be twice as long as values before quoting."""
        assert not option_needs_quoting("--" + "a" * 98)
        assert option_needs_quoting("--" + "a" * 99)

    def test_option_may_start_with_dash(self):
        """Test a dash-led option key is not quoted for its dashes."""
        assert not option_needs_quoting("--add-port=443/tcp")


class EncodeCase(NamedTuple):
    """Test case for quoting a value."""

    name: str
    value: str
    expected: str


ENCODE_CASES = [
    EncodeCase("backtick_first", "a b", "`a b`"),
    EncodeCase("empty", "", "``"),
    EncodeCase("double_when_backtick_present", "a`b", '"a`b"'),
    EncodeCase("single_when_backtick_and_double", 'a`"b', "'a`\"b'"),
    EncodeCase("backslash_escaped", "a\\b", "`a\\\\b`"),
    EncodeCase("tab_kept_raw", "a\tb", "`a\tb`"),
    EncodeCase("triple_double", "x`\"'y", "\"\"\"x`\"'y\"\"\""),
    EncodeCase("triple_single_when_double_at_edge", "\"x`'y", "'''\"x`'y'''"),
    EncodeCase("triple_backtick_when_both_at_edges", "\"x`y'", "```\"x`y'```"),
    EncodeCase(
        "inner_triple_broken_up", 'a"""b`\'c', '"""a""\\"b`\'c"""'
    ),
]


class TestEncodeString:
    """Tests for unconditional quoting."""

    @pytest.mark.parametrize("case", ENCODE_CASES, ids=lambda c: c.name)
    def test_encode_string(self, case):
        """Test each value picks the expected delimiter and escapes."""
        assert encode_string(case.value) == case.expected

    def test_newlines_escaped_by_default(self):
        """Test carriage returns and newlines are escaped when encode_rn is set."""
        assert encode_string("a\r\nb") == "`a\\r\\nb`"

    def test_newlines_raw_without_encode_rn(self):
        """Test carriage returns and newlines stay raw when encode_rn is off."""
        assert encode_string("a\r\nb", encode_rn=False) == "`a\r\nb`"


class TestAutoencode:
    """Tests for choosing between bare and quoted output."""

    def test_bare(self):
        """Test safe values are returned unchanged."""
        assert autoencode("443/tcp") == "443/tcp"

    def test_quoted(self):
        """Test unsafe values are quoted."""
        assert autoencode("-n") == "`-n`"

    @pytest.mark.parametrize(
        "key,expected",
        [
            ("--add-port", "--add-port"),
            ("-v", "-v"),
            ("--a b", "--`a b`"),
            ("-a b", "-`a b`"),
            ("-'", "-`'`"),
            ("--" + "x" * 99, "--`" + "x" * 99 + "`"),
            ("a b", "`a b`"),
        ],
    )
    def test_autoencode_option(self, key, expected):
        """Test option keys keep their dashes outside the quotes."""
        assert autoencode_option(key) == expected

    def test_positional_separator_key_rejected(self):
        """Test the key `--` is refused since it would read back as the separator."""
        with pytest.raises(ValueError, match="positional separator"):
            autoencode_option("--")


class TestAutoencodeName:
    """Tests for writing command names."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("firewall-cmd", "firewall-cmd"),
            ("-x", "-x"),
            ("&x", "&x"),
            ("ab c", "ab` c`"),
            ('say"hi', 'say`"hi`'),
            ("a\nb", "a`\\nb`"),
        ],
    )
    def test_autoencode_name(self, name, expected):
        """Test unsafe names keep their leading bare run and quote the rest."""
        assert autoencode_name(name) == expected

    def test_raw_newline_without_encode_rn(self):
        """Test newlines stay raw inside the quoted part when not escaped."""
        assert autoencode_name("a\nb", encode_rn=False) == "a`\nb`"

    @pytest.mark.parametrize("name", ["&", "&&"])
    def test_separator_names_rejected(self, name):
        """Test names that always lex as separators are refused."""
        with pytest.raises(ValueError, match="separator"):
            autoencode_name(name)

    @pytest.mark.parametrize("name", ['"x', "`x", "{x", "}", " x", "\tx"])
    def test_names_without_bare_start_rejected(self, name):
        """Test names that cannot begin an unquoted term are refused."""
        with pytest.raises(ValueError, match="must start with a nonquoted character"):
            autoencode_name(name)
