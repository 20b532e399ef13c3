"""Indentation aware lexer for Mython source.

Source is consumed one physical line at a time. Leading spaces decide the
block depth and turn into synthetic `Indent` and `Dedent` tokens, the rest
of the line goes through a lark lexer built from `lark/line.lark`.
"""

__all__ = ["Lexer", "INDENT_WIDTH", "KEYWORDS", "OPERATORS"]

import ast as python_ast
import io
import logging
import pathlib
import warnings

import lark

import mython
from mython import token


logger = logging.getLogger(__name__)

# Grammar file location
GRAMMAR_PATH = pathlib.Path(__file__).parent / "lark" / "line.lark"

# Number of spaces making up one indentation level
INDENT_WIDTH = 2

KEYWORDS = {
    "class": token.Class,
    "return": token.Return,
    "if": token.If,
    "else": token.Else,
    "def": token.Def,
    "print": token.Print,
    "and": token.And,
    "or": token.Or,
    "not": token.Not,
    "None": token.None_,
    "True": token.True_,
    "False": token.False_,
}

OPERATORS = {
    "==": token.Eq,
    "!=": token.NotEq,
    "<=": token.LessOrEq,
    ">=": token.GreaterOrEq,
}


_parser = None


def _lark_parser():
    """Get globally shared lark parser for line contents.

    Returns:
        (lark.Lark) Parser instance
    """
    global _parser
    if _parser is None:
        _parser = lark.Lark.open(GRAMMAR_PATH, parser="lalr", lexer="basic")
    return _parser


def _source_lines(source):
    """Iterate the physical lines of a string or line iterable."""
    if isinstance(source, str):
        # Split like a file opened in text mode, only on real line breaks
        source = io.StringIO(source, newline=None)
    return (line.rstrip("\r\n") for line in source)


class Lexer:
    """Pull based tokenizer for Mython.

    The first token is read during construction, so `current_token` is
    valid right away. Each call to `next_token` moves one token forward.

    Args:
        source: (str | Iterable[str]) Source text or an iterable of lines,
            such as an open text file
    """

    def __init__(self, source):
        self._lines = _source_lines(source)
        self._line_number = 0
        self._indent = 0
        # Positive for queued Indent tokens, negative for queued Dedents
        self._pending = 0
        self._cursor = None
        self._column_offset = 0
        self._finished = False
        self._current = None
        self.next_token()

    def __repr__(self):
        return f"Lexer<line {self._line_number} {self._current!r}>"

    def current_token(self):
        """Get the most recently produced token.

        Returns:
            (token.Token) Current token
        """
        return self._current

    def next_token(self):
        """Advance to and return the next token.

        Returns:
            (token.Token) The new current token

        Raises:
            mython.LexerError: On bad indentation or unreadable text
        """
        self._current = self._advance()
        return self._current

    def expect(self, token_type, value=None):
        """Check the current token's type and optionally its value.

        Args:
            token_type: (type) Expected token class, like `token.Id`
            value: Optional payload the token must carry

        Returns:
            (token.Token) The current token

        Raises:
            mython.LexerError: If the token does not match
        """
        current = self._current
        if type(current) is not token_type:
            raise mython.LexerError(
                f"Expected {token_type.__name__} token, got {current!r}",
                self._line_number,
            )
        if value is not None and current.value != value:
            raise mython.LexerError(
                f"Expected {token_type.__name__}{{{value}}}, got {current!r}",
                self._line_number,
            )
        return current

    def expect_next(self, token_type, value=None):
        """Advance one token, then `expect` it."""
        self.next_token()
        return self.expect(token_type, value)

    def _advance(self):
        while True:
            if self._pending > 0:
                self._pending -= 1
                return token.Indent()
            if self._pending < 0:
                self._pending += 1
                return token.Dedent()

            if self._cursor is not None:
                found = self._next_from_cursor()
                if found is not None:
                    return found
                self._cursor = None
                return token.Newline()

            if self._finished:
                return token.Eof()

            line = next(self._lines, None)
            if line is None:
                logger.debug("End of input, closing %d open blocks", self._indent)
                self._finished = True
                self._pending = -self._indent
                self._indent = 0
                continue
            self._line_number += 1
            self._start_line(line)

    def _start_line(self, line):
        """Measure indentation and queue the line contents."""
        content = line.lstrip(" ")
        if not content.strip() or content.startswith("#"):
            return

        spaces = len(line) - len(content)
        if content[0] == "\t":
            raise mython.LexerError(
                "Tabs are not allowed in indentation", self._line_number, spaces + 1
            )
        if spaces % INDENT_WIDTH:
            raise mython.LexerError(
                f"Indentation of {spaces} spaces is not a multiple of {INDENT_WIDTH}",
                self._line_number,
                1,
            )

        depth = spaces // INDENT_WIDTH
        if depth != self._indent:
            logger.debug(
                "Line %d indentation %d -> %d", self._line_number, self._indent, depth
            )
        self._pending = depth - self._indent
        self._indent = depth
        self._column_offset = spaces
        self._cursor = _lark_parser().lex(content)

    def _next_from_cursor(self):
        """Get the next content token of the current line, or None at its end."""
        try:
            found = next(self._cursor, None)
        except lark.exceptions.UnexpectedCharacters as e:
            column = self._column_offset + e.column
            if e.char in "\"'":
                raise mython.LexerError(
                    "Unterminated string literal", self._line_number, column
                ) from e
            raise mython.LexerError(
                f"Unrecognized character {e.char!r}", self._line_number, column
            ) from e
        if found is None:
            return None
        return self._convert(found)

    def _convert(self, found):
        """Turn a lark token into a Mython token."""
        kind = found.type
        text = found.value
        if kind == "NUMBER":
            return token.Number(int(text))
        if kind == "NAME":
            keyword = KEYWORDS.get(text)
            return keyword() if keyword is not None else token.Id(text)
        if kind == "STRING":
            try:
                with warnings.catch_warnings():
                    warnings.simplefilter("error", SyntaxWarning)
                    warnings.simplefilter("error", DeprecationWarning)
                    decoded = python_ast.literal_eval(text)
            except (SyntaxError, SyntaxWarning, DeprecationWarning, ValueError) as e:
                raise mython.LexerError(
                    f"Invalid escape sequence in string: {e}",
                    self._line_number,
                    self._column_offset + found.column,
                ) from e
            return token.String(decoded)
        if kind == "OPERATOR":
            return OPERATORS[text]()
        return token.Char(text)
