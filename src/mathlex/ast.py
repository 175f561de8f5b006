"""Expression tree node types and the visitor interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from mathlex.strings import format_number
from mathlex.tokens import TokenType

T = TypeVar("T")


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, tt: TokenType) -> Operator:
        """Map an operator token type to its binary operator."""
        try:
            return _TOKEN_OPERATORS[tt]
        except KeyError:
            raise ValueError(f"{tt.name} is not a binary operator token") from None


_TOKEN_OPERATORS = {
    TokenType.PLUS: Operator.ADD,
    TokenType.MINUS: Operator.SUB,
    TokenType.MUL: Operator.MUL,
    TokenType.DIV: Operator.DIV,
}


class Expr(ABC):
    """Base class for expression tree nodes.

    Every node exclusively owns its children; trees are acyclic and
    finite. New operations over the tree are written as ExprVisitor
    subclasses rather than methods here.
    """

    __slots__ = ()

    @abstractmethod
    def accept(self, visitor: ExprVisitor[T]) -> T:
        """Dispatch to the visitor method for this node type."""

    @abstractmethod
    def render(self) -> str:
        """Return the canonical, fully parenthesized text form."""

    @abstractmethod
    def deep_clone(self) -> Expr:
        """Return a structurally equal copy sharing no nodes with this one."""

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True, slots=True)
class Number(Expr):
    """Numeric literal."""

    value: float

    def accept(self, visitor: ExprVisitor[T]) -> T:
        return visitor.visit_number(self)

    def render(self) -> str:
        return format_number(self.value)

    def deep_clone(self) -> Number:
        return Number(self.value)


@dataclass(frozen=True, slots=True)
class Symbol(Expr):
    """Named variable or constant."""

    name: str

    def accept(self, visitor: ExprVisitor[T]) -> T:
        return visitor.visit_symbol(self)

    def render(self) -> str:
        return self.name

    def deep_clone(self) -> Symbol:
        return Symbol(self.name)


@dataclass(frozen=True, slots=True)
class BinaryOperation(Expr):
    """Binary arithmetic: left op right."""

    left: Expr
    operator: Operator
    right: Expr

    def accept(self, visitor: ExprVisitor[T]) -> T:
        return visitor.visit_binary_operation(self)

    def render(self) -> str:
        return f"({self.left.render()} {self.operator.symbol} {self.right.render()})"

    def deep_clone(self) -> BinaryOperation:
        return BinaryOperation(self.left.deep_clone(), self.operator, self.right.deep_clone())


@dataclass(frozen=True, slots=True)
class Function(Expr):
    """Single-argument function application, e.g. sin(x)."""

    name: str
    argument: Expr

    def accept(self, visitor: ExprVisitor[T]) -> T:
        return visitor.visit_function(self)

    def render(self) -> str:
        return f"{self.name}({self.argument.render()})"

    def deep_clone(self) -> Function:
        return Function(self.name, self.argument.deep_clone())


class ExprVisitor(ABC, Generic[T]):
    """One method per node type; Expr.accept picks the right one."""

    @abstractmethod
    def visit_binary_operation(self, node: BinaryOperation) -> T: ...

    @abstractmethod
    def visit_function(self, node: Function) -> T: ...

    @abstractmethod
    def visit_number(self, node: Number) -> T: ...

    @abstractmethod
    def visit_symbol(self, node: Symbol) -> T: ...
