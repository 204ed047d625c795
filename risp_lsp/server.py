from __future__ import annotations

"""
A minimal pygls-based Language Server for risp.

Features:
- Text synchronization and document store
- Diagnostics: the first lexer/parser error, at its source span
- Hover: builtin signatures and names bound with (set ...)
- Completion: builtins and document-local names
- Document Symbols: from indexer

Note: We never evaluate the buffer. We build a static index per document.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from risp import __version__
from risp_lsp.indexer import BUILTIN_SIGNATURES, DocumentIndex, build_index, word_at


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class RispLanguageServer(LanguageServer):
    CMD_NAME = "risp-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, __version__)
        self.documents: Dict[str, DocumentState] = {}


ls = RispLanguageServer()


# --- Diagnostics ---
def diagnostics_for(idx: DocumentIndex) -> List[Diagnostic]:
    return [
        Diagnostic(
            range=Range(
                start=Position(line=err.start[0], character=err.start[1]),
                end=Position(line=err.end[0], character=err.end[1]),
            ),
            message=err.message,
            severity=DiagnosticSeverity.Error,
            source=RispLanguageServer.CMD_NAME,
        )
        for err in idx.errors
    ]


def _update(uri: str, text: str) -> None:
    idx = build_index(text)
    ls.documents[uri] = DocumentState(text=text, index=idx)
    ls.publish_diagnostics(uri, diagnostics_for(idx))


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    _update(params.text_document.uri, params.text_document.text or "")


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    # pygls applies the incremental edits to its workspace copy before calling us
    document = ls.workspace.get_text_document(uri)
    _update(uri, document.source)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


# --- Hover ---
def hover_text(state: DocumentState, line: int, character: int) -> Optional[str]:
    word = word_at(state.text, line, character)
    if not word:
        return None
    if word in BUILTIN_SIGNATURES:
        return BUILTIN_SIGNATURES[word]
    sdef = state.index.symbols.get(word)
    if sdef is not None:
        return f"{word} (set at {sdef.line + 1}:{sdef.col + 1})"
    return None


@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    contents = hover_text(state, params.position.line, params.position.character)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION)
def on_completion(params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    items: List[CompletionItem] = [
        CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig)
        for name, sig in BUILTIN_SIGNATURES.items()
    ]
    if state:
        items.extend(
            CompletionItem(label=name, kind=CompletionItemKind.Variable)
            for name in state.index.symbols
        )
    return CompletionList(is_incomplete=False, items=items)


# --- Document Symbols ---
@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    symbols: List[DocumentSymbol] = []
    for name, sdef in state.index.symbols.items():
        rng = Range(
            start=Position(line=sdef.line, character=sdef.col),
            end=Position(line=sdef.line, character=sdef.col + len(name)),
        )
        symbols.append(DocumentSymbol(name=name, kind=SymbolKind.Variable, range=rng, selection_range=rng))
    return symbols


def main() -> None:
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
