"""Minimal LSP server for math expressions: diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from mathlex import __version__
from mathlex.errors import ExpressionError
from mathlex.lexer import tokenize
from mathlex.pretty import line_col_at

server = LanguageServer("mathlex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _position(source: str, offset: int) -> Position:
    """Convert a UTF-8 byte offset to a 0-based LSP position.

    LSP characters are UTF-16 code units, so astral characters count twice.
    """
    line, col = line_col_at(source, offset)
    prefix = source.split("\n")[line - 1][: col - 1]
    return Position(line=line - 1, character=len(prefix.encode("utf-16-le")) // 2)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Lex the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    diagnostics: list[Diagnostic] = []

    try:
        tokenize(source)
    except ExpressionError as exc:
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=_position(source, exc.span.start),
                    end=_position(source, exc.span.end),
                ),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="mathlex",
            )
        )

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
