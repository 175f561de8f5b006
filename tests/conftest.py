"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from mathlex.ast import BinaryOperation, Expr, Function, Number, Operator, Symbol
from mathlex.errors import ExpressionError
from mathlex.lexer import tokenize
from mathlex.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding END)."""

    def _lex(source: str) -> list[Token]:
        tokens = tokenize(source)
        # Strip trailing END for convenience
        return [t for t in tokens if t.type != TokenType.END]

    return _lex


@pytest.fixture
def lex_error():
    """Return a helper that tokenizes source and returns the raised error."""

    def _lex_error(source: str) -> ExpressionError:
        with pytest.raises(ExpressionError) as exc_info:
            tokenize(source)
        return exc_info.value

    return _lex_error


@pytest.fixture
def sample_tree() -> Expr:
    """(3 + sin(x)) * (y - 0.5)"""
    return BinaryOperation(
        BinaryOperation(Number(3.0), Operator.ADD, Function("sin", Symbol("x"))),
        Operator.MUL,
        BinaryOperation(Symbol("y"), Operator.SUB, Number(0.5)),
    )


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[float | str | None]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def spans(tokens: list[Token]) -> list[tuple[int, int]]:
    """Return (start, end) pairs for every token."""
    return [(t.span.start, t.span.end) for t in tokens]
