from __future__ import annotations

"""
Lightweight indexer for risp documents, built without evaluating code.

We use the risp lexer and parser to find:
- definitions made with (set name ...), with their positions
- the first syntax error, with its span converted to a line/column range

Lexing stops at the first bad character; whatever was indexed before that point
is kept so that a half-typed buffer still yields document symbols.
"""

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from risp.errors import RispSyntaxError
from risp.reader.lexer import Lexer
from risp.reader.parser import parse
from risp.reader.token import Span, TokenKind

BUILTIN_SIGNATURES: Dict[str, str] = {
    "print": "(print value...) -- write values separated by spaces",
    "println": "(println value...) -- like print, followed by a newline",
    "input": "(input prompt...) -- print the prompt and read one line",
    "set": "(set name expr) -- bind name to the value of expr",
    "list": "(list expr...) -- evaluate each expr into a list",
    "block": "(block expr...) -- evaluate in order, return the last value",
    "if": "(if cond then [else]) -- cond must be a bool",
    "while": "(while cond body...) -- loop while cond is true",
    "true": "true -- the boolean constant",
    "false": "false -- the boolean constant",
}


@dataclass
class SymbolDef:
    name: str
    line: int
    col: int


@dataclass
class SyntaxProblem:
    message: str
    start: Tuple[int, int]  # (line, col)
    end: Tuple[int, int]


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    errors: List[SyntaxProblem] = field(default_factory=list)


class LineMap:
    """Converts source offsets to zero-based (line, column) pairs."""

    def __init__(self, text: str):
        self.line_starts = [0]
        for i, ch in enumerate(text):
            if ch == "\n":
                self.line_starts.append(i + 1)

    def position(self, offset: int) -> Tuple[int, int]:
        line = bisect_right(self.line_starts, offset) - 1
        return line, offset - self.line_starts[line]


def _collect_definitions(text: str, lines: LineMap) -> Dict[str, SymbolDef]:
    symbols: Dict[str, SymbolDef] = {}
    window: List[Tuple[TokenKind, str, Span]] = []
    try:
        for token in Lexer(text):
            window = (window + [(token.kind, token.text(text), token.span)])[-3:]
            if len(window) < 3:
                continue
            (k0, _, _), (k1, t1, _), (k2, t2, span) = window
            if k0 is TokenKind.OPEN_PAREN and k1 is TokenKind.NAME and t1 == "set" and k2 is TokenKind.NAME:
                if t2 not in symbols:
                    line, col = lines.position(span.start)
                    symbols[t2] = SymbolDef(name=t2, line=line, col=col)
    except RispSyntaxError:
        pass  # reported by the parse pass
    return symbols


def build_index(text: str) -> DocumentIndex:
    lines = LineMap(text)
    idx = DocumentIndex(symbols=_collect_definitions(text, lines))
    try:
        parse(text)
    except RispSyntaxError as err:
        span = err.span or Span(len(text), len(text))
        idx.errors.append(
            SyntaxProblem(
                message=err.message,
                start=lines.position(span.start),
                end=lines.position(min(max(span.end, span.start + 1), len(text))),
            )
        )
    return idx


def word_at(text: str, line: int, character: int) -> Optional[str]:
    """The name (letters, digits, '_') under a cursor position, if any."""
    lines = text.splitlines()
    if line >= len(lines):
        return None
    row = lines[line]
    start = end = min(character, len(row))
    while start > 0 and (row[start - 1].isalnum() or row[start - 1] == "_"):
        start -= 1
    while end < len(row) and (row[end].isalnum() or row[end] == "_"):
        end += 1
    return row[start:end] or None
