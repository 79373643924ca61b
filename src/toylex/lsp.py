"""Minimal LSP server for Toy sources: diagnostics only."""

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

from toylex import __version__
from toylex.lexer import tokenize
from toylex.lint import check_tokens

server = LanguageServer("toylex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _utf16_offset(text: str, index: int) -> int:
    """Convert a code point index into text to a UTF-16 code unit offset."""
    prefix = text[:index]
    return index + sum(1 for ch in prefix if ord(ch) > 0xFFFF)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Tokenize the document and publish a warning per lint finding."""
    doc = ls.workspace.get_text_document(uri)
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri
    diagnostics: list[Diagnostic] = []
    # The lexer counts lines at "\n" only.
    lines = doc.source.split("\n")

    for finding in check_tokens(tokenize(doc.source, filename)):
        # Lexer locations are 1-based code points, LSP positions 0-based UTF-16.
        line = finding.location.line - 1
        text = lines[line] if line < len(lines) else ""
        col = _utf16_offset(text, finding.location.column - 1)
        end = _utf16_offset(text, finding.location.column - 1 + finding.length)
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=Position(line=line, character=col),
                    end=Position(line=line, character=end),
                ),
                message=finding.message,
                severity=DiagnosticSeverity.Warning,
                source="toylex",
                code=finding.code,
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
