"""Error kinds and the exception that carries them."""

from __future__ import annotations

from dataclasses import dataclass

from mathlex.tokens import Span


@dataclass(frozen=True, slots=True)
class UnexpectedCharacter:
    """A character that starts no token."""

    char: str

    @property
    def message(self) -> str:
        return f"unexpected character '{self.char}'"


@dataclass(frozen=True, slots=True)
class InvalidNumber:
    """A malformed or out-of-range numeric literal."""

    @property
    def message(self) -> str:
        return "invalid number literal"


@dataclass(frozen=True, slots=True)
class UnknownCommand:
    """A backslash command missing from the command table."""

    name: str

    @property
    def message(self) -> str:
        return f"unknown command \\{self.name}"


@dataclass(frozen=True, slots=True)
class UnexpectedToken:
    """Grammar violation, raised by parsers built on the token stream."""

    expected: str
    found: str

    @property
    def message(self) -> str:
        return f"expected {self.expected}, found {self.found}"


ErrorKind = UnexpectedCharacter | InvalidNumber | UnknownCommand | UnexpectedToken


class ExpressionError(Exception):
    """Raised on the first error in expression source, with its span."""

    def __init__(self, kind: ErrorKind, span: Span) -> None:
        self.kind = kind
        self.span = span
        super().__init__(f"{kind.message} at position {span.start}")

    @property
    def message(self) -> str:
        return self.kind.message

    def format(self, source: str) -> str:
        """Render a caret-annotated diagnostic against *source*."""
        from mathlex.pretty import render_error

        return render_error(source, self)
