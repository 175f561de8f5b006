"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

import unicodedata
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType


class TokenType(Enum):
    END = auto()

    # Valued
    NUMBER = auto()  # value: float
    IDENTIFIER = auto()  # value: name
    COMMAND = auto()  # value: name (reserved, never produced by the lexer)

    # Operators
    PLUS = auto()  # +
    MINUS = auto()  # -
    MUL = auto()  # * or \times
    DIV = auto()  # / or \div
    POW = auto()  # ^
    EQUAL = auto()  # =

    # Grouping
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }

    @property
    def description(self) -> str:
        """Human-readable description, used in parser diagnostics."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    TokenType.END: "end of input",
    TokenType.NUMBER: "number (numeric literal, e.g. 3.14, 42)",
    TokenType.IDENTIFIER: "identifier (variable or symbol)",
    TokenType.COMMAND: "command (e.g. \\sqrt, \\sin)",
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.MUL: "*",
    TokenType.DIV: "/",
    TokenType.POW: "^",
    TokenType.EQUAL: "=",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.LBRACE: "{",
    TokenType.RBRACE: "}",
}


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open range of UTF-8 byte offsets into the source."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end:
            raise ValueError(f"invalid span {self.start}..{self.end}")

    @property
    def width(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token with resolved value and original source text."""

    type: TokenType
    value: float | str | None
    raw: str
    span: Span


# Single-character operator and grouping symbols
SYMBOLS: Mapping[str, TokenType] = MappingProxyType(
    {
        "+": TokenType.PLUS,
        "-": TokenType.MINUS,
        "*": TokenType.MUL,
        "/": TokenType.DIV,
        "^": TokenType.POW,
        "(": TokenType.LPAREN,
        ")": TokenType.RPAREN,
        "{": TokenType.LBRACE,
        "}": TokenType.RBRACE,
        "=": TokenType.EQUAL,
    }
)

# Backslash commands that resolve directly to an operator token.
# Append new entries here; the table is read-only at runtime.
COMMAND_OPERATORS: Mapping[str, TokenType] = MappingProxyType(
    {
        "times": TokenType.MUL,
        "div": TokenType.DIV,
    }
)


def lookup_command(name: str) -> TokenType | None:
    """Return the operator token type a command name maps to, or None."""
    return COMMAND_OPERATORS.get(name)


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return len(ch) == 1 and ch in "0123456789"


# Letter numbers and spacing/nonspacing marks (e.g. Devanagari vowel signs)
# belong to Unicode Alphabetic even though str.isalpha() rejects them.
_ALPHABETIC_CATEGORIES = frozenset({"Nl", "Mc", "Mn"})

# str.isspace() also accepts these separators; Unicode White_Space does not.
_NON_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def is_alphabetic(ch: str) -> bool:
    """Return True if ch is a letter, letter number, or combining mark."""
    if len(ch) != 1:
        return False
    return ch.isalpha() or unicodedata.category(ch) in _ALPHABETIC_CATEGORIES


def is_name_char(ch: str) -> bool:
    """Return True if ch may appear in an identifier or command name."""
    return is_alphabetic(ch) or ch == "_"


def is_whitespace(ch: str) -> bool:
    """Return True if ch is Unicode White_Space."""
    return ch.isspace() and ch not in _NON_WHITESPACE
