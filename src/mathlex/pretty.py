"""Caret-annotated diagnostics for expression errors."""

from __future__ import annotations

from mathlex.errors import ExpressionError


def line_col_at(source: str, offset: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of a UTF-8 byte offset in source.

    Columns count code points. Offsets past the end of source resolve to
    the position just after the last character.
    """
    line = 1
    col = 1
    pos = 0
    for ch in source:
        if pos >= offset:
            break
        if ch == "\n":
            line += 1
            col = 1
        else:
            col += 1
        pos += len(ch.encode("utf-8"))
    return line, col


def _source_line(source: str, line: int) -> str:
    lines = source.split("\n")
    if not 1 <= line <= len(lines):
        return ""
    text = lines[line - 1]
    if text.endswith("\r"):
        text = text[:-1]
    return text


def render_error(source: str, error: ExpressionError) -> str:
    """Render *error* against *source* as a multi-line diagnostic.

    Layout::

        error: unexpected character '@'
         --> 1:5
          |
         1 | x + @
          |     ^

    Never raises; a span outside the source renders an empty source line.
    """
    line, col = line_col_at(source, error.span.start)
    pad = " " * (col - 1)
    carets = "^" * max(1, error.span.width)

    return (
        f"error: {error.kind.message}\n"
        f" --> {line}:{col}\n"
        f"  |\n"
        f"{line:>2} | {_source_line(source, line)}\n"
        f"  | {pad}{carets}"
    )
