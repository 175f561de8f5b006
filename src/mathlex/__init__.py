"""Lexical front end for math expressions: tokens, diagnostics, expression trees."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mathlex.tokens import Token

__version__ = "0.1.0"


def lex(source: str) -> list[Token]:
    """Tokenize expression source, raising ExpressionError on the first error."""
    from mathlex.lexer import tokenize

    return tokenize(source)
