"""Expression lexer: converts source text into a flat token stream."""

from __future__ import annotations

import math

from mathlex.errors import (
    ErrorKind,
    ExpressionError,
    InvalidNumber,
    UnexpectedCharacter,
    UnknownCommand,
)
from mathlex.tokens import (
    SYMBOLS,
    Span,
    Token,
    TokenType,
    is_alphabetic,
    is_digit,
    is_name_char,
    is_whitespace,
    lookup_command,
)


class Lexer:
    """Tokenize expression source text into a stream of Token objects.

    Scanning walks the source one code point at a time while tracking the
    matching UTF-8 byte offset, which is what spans report.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0  # code point index
        self._offset = 0  # UTF-8 byte offset of _pos
        self._tokens: list[Token] = []

    @property
    def source(self) -> str:
        return self._source

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list, ending in END.

        Raises ExpressionError on the first lexical error.
        """
        while True:
            self._skip_whitespace()
            if self._pos >= len(self._source):
                self._emit(TokenType.END, None, self._offset)
                return self._tokens
            self._lex_token()

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        self._offset += len(ch.encode("utf-8"))
        return ch

    def _emit(self, tt: TokenType, value: float | str | None, start: int, raw: str = "") -> Token:
        tok = Token(tt, value, raw, Span(start, self._offset))
        self._tokens.append(tok)
        return tok

    def _error(self, kind: ErrorKind, start: int) -> ExpressionError:
        return ExpressionError(kind, Span(start, self._offset))

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._source) and is_whitespace(self._peek()):
            self._advance()

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _lex_token(self) -> None:
        ch = self._peek()

        if is_digit(ch) or ch == ".":
            self._lex_number()
            return

        if ch == "\\":
            self._lex_command()
            return

        if is_alphabetic(ch):
            self._lex_identifier()
            return

        start = self._offset
        self._advance()
        tt = SYMBOLS.get(ch)
        if tt is None:
            raise self._error(UnexpectedCharacter(ch), start)
        self._emit(tt, None, start, ch)

    def _lex_number(self) -> None:
        start = self._offset
        begin = self._pos
        seen_dot = False
        while self._pos < len(self._source):
            ch = self._peek()
            if ch == "." and not seen_dot:
                seen_dot = True
            elif not is_digit(ch):
                break
            self._advance()

        text = self._source[begin : self._pos]
        if text == ".":
            raise self._error(InvalidNumber(), start)
        try:
            value = float(text)
        except ValueError:
            raise self._error(InvalidNumber(), start) from None
        if math.isinf(value):
            raise self._error(InvalidNumber(), start)
        self._emit(TokenType.NUMBER, value, start, text)

    def _lex_command(self) -> None:
        start = self._offset
        begin = self._pos
        self._advance()  # consume backslash
        name = self._scan_name()
        tt = lookup_command(name)
        if tt is None:
            raise self._error(UnknownCommand(name), start)
        self._emit(tt, None, start, self._source[begin : self._pos])

    def _lex_identifier(self) -> None:
        start = self._offset
        name = self._scan_name()
        self._emit(TokenType.IDENTIFIER, name, start, name)

    def _scan_name(self) -> str:
        begin = self._pos
        while self._pos < len(self._source) and is_name_char(self._peek()):
            self._advance()
        return self._source[begin : self._pos]


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source).tokenize()
