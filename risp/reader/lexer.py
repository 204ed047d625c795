"""
  risp Lexer

- Pulls characters one at a time from the source string
- Emits one Token per call to ``next_token``; a synthetic EOF token at the end
- Tokens hold spans, never text: content is recovered by slicing the source

    - digits            -> Int, or Float when followed by '.'
    - letters, '_'      -> Name
    - '+', '-'          -> Operator, or folded into a following number (-5)
    - '"..."'           -> String (span excludes the quotes, no escapes)
    - '(' ')'           -> OpenParen / CloseParen
    - '*' '/' '>' '<' '=' -> Operator
    - "'"               -> Quote
"""

from __future__ import annotations

import logging
import string
from typing import Callable, Iterator

from risp.errors import RispSyntaxError
from risp.reader.token import Span, Token, TokenKind

logger = logging.getLogger(__name__)

DIGITS = frozenset(string.digits)
NAME_START = frozenset(string.ascii_letters + "_")
NAME_CHARS = NAME_START | DIGITS
SIGNS = frozenset("+-")

SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSE_PAREN,
    "*": TokenKind.OPERATOR,
    "/": TokenKind.OPERATOR,
    ">": TokenKind.OPERATOR,
    "<": TokenKind.OPERATOR,
    "=": TokenKind.OPERATOR,
    "'": TokenKind.QUOTE,
}


class Lexer:
    """Splits a source string into Tokens."""

    __slots__ = ("source", "pos")

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    @property
    def eof(self) -> bool:
        """True once every character of the source has been consumed."""
        return self.pos >= len(self.source)

    def current_char(self) -> str:
        """The character under the cursor, or '' at end of input."""
        return self.source[self.pos] if self.pos < len(self.source) else ""

    def advance(self) -> None:
        if self.pos < len(self.source):
            self.pos += 1

    def take_while(self, predicate: Callable[[str], bool]) -> Span:
        """Advance while the current character satisfies `predicate`; return the span covered."""
        start = self.pos
        n = len(self.source)
        while self.pos < n and predicate(self.source[self.pos]):
            self.pos += 1
        return Span(start, self.pos)

    def next_token(self) -> Token:
        """Return the next Token, raising RispSyntaxError on characters the lexer can't handle."""
        start = self.pos
        c = self.current_char()

        if c == "":
            return Token(TokenKind.EOF, Span(start, start))

        # Skip the whitespace run, then lex whatever follows it
        if c.isspace():
            self.take_while(str.isspace)
            return self.next_token()

        if c in DIGITS:
            token = self._number(start)
        elif c in NAME_START:
            self.take_while(NAME_CHARS.__contains__)
            token = Token(TokenKind.NAME, Span(start, self.pos))
        elif c in SIGNS:
            self.advance()
            if self.current_char() in DIGITS:
                # Fold the sign into the number so `-5` is a single Int token
                number = self.next_token()
                token = Token(number.kind, number.span.widen(start))
            else:
                token = Token(TokenKind.OPERATOR, Span(start, self.pos))
        elif c == '"':
            token = self._string(start)
        elif c in SINGLE_CHAR_TOKENS:
            self.advance()
            token = Token(SINGLE_CHAR_TOKENS[c], Span(start, self.pos))
        else:
            raise RispSyntaxError(f"did not expect character {c!r}", Span(start, start + 1))

        logger.debug("token %s %r", token.kind, token.text(self.source))
        return token

    def _number(self, start: int) -> Token:
        self.take_while(DIGITS.__contains__)
        if self.current_char() == ".":
            self.advance()
            self.take_while(DIGITS.__contains__)
            return Token(TokenKind.FLOAT, Span(start, self.pos))
        return Token(TokenKind.INT, Span(start, self.pos))

    def _string(self, start: int) -> Token:
        self.advance()  # opening quote
        span = self.take_while(lambda ch: ch != '"')
        if self.eof:
            raise RispSyntaxError("unterminated string literal", Span(start, self.pos))
        self.advance()  # closing quote
        return Token(TokenKind.STRING, span)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.EOF:
                return


def lex(source: str) -> list[Token]:
    """Tokenize a whole source string, EOF token included."""
    return list(Lexer(source))
