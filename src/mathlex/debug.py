"""Human-readable token and expression tree dumps."""

from __future__ import annotations

import sys
from typing import TextIO

from mathlex.ast import BinaryOperation, Expr, ExprVisitor, Function, Number, Symbol
from mathlex.strings import format_number
from mathlex.tokens import Token


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stdout, spans: bool = False) -> None:
    """Print one line per token to *file*: type, value, and optionally span."""
    for tok in tokens:
        line = tok.type.name
        if isinstance(tok.value, float):
            line += f" {format_number(tok.value)}"
        elif tok.value is not None:
            line += f" {tok.value}"
        if spans:
            line += f" {tok.span.start}..{tok.span.end}"
        file.write(line + "\n")


def dump_expr(expr: Expr, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable expression tree to *file*."""
    expr.accept(_TreeDumper(file))


def _indent(depth: int) -> str:
    return "  " * depth


class _TreeDumper(ExprVisitor[None]):
    def __init__(self, f: TextIO) -> None:
        self._f = f
        self._depth = 0

    def _line(self, text: str) -> None:
        self._f.write(f"{_indent(self._depth)}{text}\n")

    def visit_binary_operation(self, node: BinaryOperation) -> None:
        self._line(f"BinaryOperation {node.operator.symbol}")
        self._depth += 1
        node.left.accept(self)
        node.right.accept(self)
        self._depth -= 1

    def visit_function(self, node: Function) -> None:
        self._line(f"Function {node.name}")
        self._depth += 1
        node.argument.accept(self)
        self._depth -= 1

    def visit_number(self, node: Number) -> None:
        self._line(f"Number {format_number(node.value)}")

    def visit_symbol(self, node: Symbol) -> None:
        self._line(f"Symbol {node.name}")
