"""Minimal LSP server for flatlex: unknown-character diagnostics."""

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

from flatlex import __version__
from flatlex.lexer import Lexer
from flatlex.tokens import TokenKind

server = LanguageServer("flatlex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Tokenize the document and publish one warning per unknown character."""
    doc = ls.workspace.get_text_document(uri)
    lexer = Lexer(doc.source)
    diagnostics: list[Diagnostic] = []

    for tok in lexer:
        if tok.kind is not TokenKind.UNKNOWN:
            continue
        pos = lexer.position(tok.offset)
        line = pos.line - 1
        col = pos.column - 1
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=Position(line=line, character=col),
                    end=Position(line=line, character=col + 1),
                ),
                message=f"unknown character {tok.text!r}",
                severity=DiagnosticSeverity.Warning,
                source="flatlex",
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
