"""
Tokenizer for command notation.

Converts raw text into a flat list of tokens. All quote balancing, escape
decoding and line-continuation handling happens here, so later stages only
ever see LINE_BREAK, AND_AND, braces and content tokens (plus any transient
BACKSLASH/AND that failed to cancel, which the splitter rejects).

Quoted strings are delimited by a run of identical quote glyphs of any
width except two: 'a', '''a''' and ''''a'''' are all fine, while '' is
always the empty string. Inside the string a shorter run of the delimiter
glyph is literal text.
"""

from cmdnotation.core.types import NONQUOTED_CHARS, QUOTE_CHARS, Token, TokenKind
from cmdnotation.exceptions.core import ErrorContext, LexError

WHITESPACE = frozenset(" \t")

ESCAPE_SEQUENCES = {
    "t": "\t",
    "n": "\n",
    "r": "\r",
    "`": "`",
    "'": "'",
    '"': '"',
    "\\": "\\",
}


def _lex_error(text: str, message: str, position: int) -> LexError:
    return LexError(message, position, ErrorContext.from_source(text, position))


def _cancel_line_continuations(tokens: list[Token]) -> None:
    """
    Drop a trailing BACKSLASH+LINE_BREAK or LINE_BREAK+AND pair.

    Called right after a LINE_BREAK, BACKSLASH or AND is appended. Whitespace
    is never tokenized, so a backslash followed by spaces and then a newline
    still cancels.
    """
    if len(tokens) < 2:
        return
    pair = (tokens[-2].kind, tokens[-1].kind)
    if pair in (
        (TokenKind.BACKSLASH, TokenKind.LINE_BREAK),
        (TokenKind.LINE_BREAK, TokenKind.AND),
    ):
        del tokens[-2:]


def consume_quoted(text: str, position: int) -> tuple[str, int]:
    """
    Scan one quoted string starting at a quote glyph.

    Params:
        text: Source text
        position: Offset of the first delimiter glyph

    Returns:
        Tuple of (decoded value, offset just past the closing delimiter)

    Raises:
        LexError: On an unknown escape sequence or end of input before the
            closing delimiter
    """
    delim = text[position]
    i = position + 1
    width = 1
    while i < len(text) and text[i] == delim:
        i += 1
        width += 1

    # Exactly two glyphs is the empty string, never an opening delimiter
    if width == 2:
        return "", i

    parts: list[str] = []
    while True:
        if i >= len(text):
            raise _lex_error(text, "Unexpected EOF", i)

        char = text[i]
        if char == delim:
            run = 0
            while run < width and i + run < len(text) and text[i + run] == delim:
                run += 1
            if run == width:
                return "".join(parts), i + width
            parts.append(delim * run)
            i += run
        elif char == "\\":
            escaped = text[i + 1] if i + 1 < len(text) else None
            if escaped not in ESCAPE_SEQUENCES:
                raise _lex_error(text, "Unexpected escape sequence", i + 1)
            parts.append(ESCAPE_SEQUENCES[escaped])
            i += 2
        else:
            parts.append(char)
            i += 1


def consume_unquoted(text: str, position: int) -> tuple[str, int]:
    """
    Scan a run of nonquoted characters, fusing one directly following quoted string.

    Params:
        text: Source text
        position: Offset of the first nonquoted character

    Returns:
        Tuple of (decoded value, offset just past the token)
    """
    i = position + 1
    while i < len(text) and text[i] in NONQUOTED_CHARS:
        i += 1
    value = text[position:i]

    if i < len(text) and text[i] in QUOTE_CHARS:
        quoted, i = consume_quoted(text, i)
        value += quoted

    return value, i


def tokenize(text: str) -> list[Token]:
    """
    Convert command notation text into tokens.

    Params:
        text: Source text

    Returns:
        List of tokens in source order

    Raises:
        LexError: If the text contains an illegal character, a standalone
            carriage return, an unterminated or malformed quoted string, or
            quoted strings that touch a following term
    """
    tokens: list[Token] = []
    # Offset right after the last quoted or fused term; nothing may start there
    term_cannot_start_at = -1
    i = 0

    while i < len(text):
        char = text[i]

        if char == "\n" or (char == "\r" and text[i + 1 : i + 2] == "\n"):
            tokens.append(Token(TokenKind.LINE_BREAK, position=i))
            _cancel_line_continuations(tokens)
            i += 1 if char == "\n" else 2
        elif char == "\\":
            tokens.append(Token(TokenKind.BACKSLASH, position=i))
            _cancel_line_continuations(tokens)
            i += 1
        elif char == "\r":
            raise _lex_error(text, "Unexpected standalone \\r", i)
        elif char in WHITESPACE:
            i += 1
        elif char == "{":
            tokens.append(Token(TokenKind.OPEN_BRACE, position=i))
            i += 1
        elif char == "}":
            tokens.append(Token(TokenKind.CLOSE_BRACE, position=i))
            i += 1
        elif char in QUOTE_CHARS:
            if i == term_cannot_start_at:
                raise _lex_error(text, "Back-to-back quoted strings", i)
            value, end = consume_quoted(text, i)
            tokens.append(Token(TokenKind.QUOTED, value, position=i))
            term_cannot_start_at = i = end
        elif char in NONQUOTED_CHARS:
            if i == term_cannot_start_at:
                raise _lex_error(
                    text, "Back-to-back quoted string then unquoted term", i
                )
            value, end = consume_unquoted(text, i)
            if value == "&&":
                tokens.append(Token(TokenKind.AND_AND, position=i))
            elif value == "&":
                tokens.append(Token(TokenKind.AND, position=i))
                _cancel_line_continuations(tokens)
            else:
                tokens.append(Token(TokenKind.UNQUOTED, value, position=i))
            term_cannot_start_at = i = end
        else:
            raise _lex_error(text, "Unexpected char", i)

    return tokens
