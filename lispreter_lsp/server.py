from __future__ import annotations

"""
A minimal pygls-based Language Server for Lispreter.

Features:
- Text synchronization and document store
- Diagnostics: reader errors, unbalanced parens, malformed DEFUN formals
- Hover: primitive signatures, special forms and locally defined functions
- Completion: primitives, special forms and local functions
- Document Symbols: from indexer

Note: We avoid evaluating the buffer. We build a static index per document.
"""

from typing import Dict, Optional, List
from dataclasses import dataclass

from pygls.server import LanguageServer
from lsprotocol.types import (
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    Diagnostic,
    DiagnosticSeverity,
    Position,
    Range,
    Hover,
    MarkupContent,
    MarkupKind,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    HoverParams,
    DocumentSymbolParams,
    DocumentSymbol,
    SymbolKind,
)

from lispreter import __version__
from lispreter.builtins import PRIMITIVE_SIGNATURES
from lispreter_lsp.indexer import build_index, DocumentIndex

SOURCE = "lispreter-ls"

SPECIAL_FORM_SIGNATURES: Dict[str, str] = {
    "QUOTE": "(QUOTE x)",
    "COND": "(COND (p1 e1) (p2 e2) ...)",
    "DEFUN": "(DEFUN name (formals) body)",
    "LAMBDA": "(LAMBDA (formals) body)",
    "LET": "(LET ((name expr) ...) body)",
}


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class LispreterLanguageServer(LanguageServer):
    CMD_NAME = "lispreter-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, __version__)
        self.documents: Dict[str, DocumentState] = {}


ls = LispreterLanguageServer()


# --- Text sync ---
@ls.feature("textDocument/didOpen")
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    _update(uri, params.text_document.text or "")


@ls.feature("textDocument/didChange")
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    _update(uri, text)


@ls.feature("textDocument/didClose")
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    if uri in ls.documents:
        del ls.documents[uri]
    ls.publish_diagnostics(uri, [])


def _update(uri: str, text: str):
    idx = build_index(text)
    ls.documents[uri] = DocumentState(text=text, index=idx)
    ls.publish_diagnostics(uri, collect_diagnostics(idx))


# --- Diagnostics ---
def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def collect_diagnostics(idx: DocumentIndex) -> List[Diagnostic]:
    diags: List[Diagnostic] = []

    if idx.paren_balance != 0:
        diags.append(
            Diagnostic(
                range=_mk_range(0, 0),
                message="Unbalanced parentheses detected",
                severity=DiagnosticSeverity.Warning,
                source=SOURCE,
            )
        )
    elif idx.reader_error:
        diags.append(
            Diagnostic(
                range=_mk_range(0, 0),
                message=idx.reader_error,
                severity=DiagnosticSeverity.Error,
                source=SOURCE,
            )
        )

    for problem in idx.problems:
        diags.append(
            Diagnostic(
                range=_mk_range(problem.line, problem.col),
                message=problem.message,
                severity=DiagnosticSeverity.Error,
                source=SOURCE,
            )
        )
    return diags


# --- Hover ---
def describe(word: str, idx: DocumentIndex) -> Optional[str]:
    upper = word.upper()
    if upper in PRIMITIVE_SIGNATURES:
        return PRIMITIVE_SIGNATURES[upper]
    if upper in SPECIAL_FORM_SIGNATURES:
        return SPECIAL_FORM_SIGNATURES[upper]
    if word in idx.functions:
        fdef = idx.functions[word]
        return f"({word} {' '.join(fdef.params)}) - function (defined at {fdef.line+1}:{fdef.col+1})"
    return None


@ls.feature("textDocument/hover")
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    word = _extract_word_at(state.text, params.position.line, params.position.character)
    if not word:
        return None
    contents = describe(word, state.index)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature("textDocument/completion", CompletionOptions(trigger_characters=["("]))
def on_completion(params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    items: List[CompletionItem] = []
    for name, sig in SPECIAL_FORM_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Keyword, detail=sig))
    for name, sig in PRIMITIVE_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig))
    if state:
        for name in state.index.functions:
            items.append(CompletionItem(label=name, kind=CompletionItemKind.Function))
    return CompletionList(is_incomplete=False, items=items)


# --- Document Symbols ---
@ls.feature("textDocument/documentSymbol")
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    symbols: List[DocumentSymbol] = []
    for name, fdef in state.index.functions.items():
        rng = _mk_range(fdef.line, fdef.col, len(name))
        symbols.append(
            DocumentSymbol(
                name=name,
                detail=f"({' '.join(fdef.params)})",
                kind=SymbolKind.Function,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


# --- Helpers ---
def _extract_word_at(text: str, line_no: int, character: int) -> Optional[str]:
    lines = text.splitlines(True)
    if line_no >= len(lines):
        return None
    line = lines[line_no]
    start = character
    while start > 0 and line[start - 1] not in " \t()'\n\r":
        start -= 1
    end = character
    while end < len(line) and line[end] not in " \t()'\n\r":
        end += 1
    word = line[start:end]
    return word or None


def main():
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
