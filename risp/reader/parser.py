"""
  risp Parser

Recursive-descent parser over the Lexer's token stream with one token of
lookahead. Any malformed input aborts with RispSyntaxError; there is no
error recovery and no partial AST.

    expr  := '(' expr* ')'        -> ExprNode
           | atom
    atom  := Int | Float | String | Name | Operator
           | "'" expr             -> ListNode ('(...)) or SymbolNode ('name)
"""

from __future__ import annotations

import logging

from risp.errors import RispSyntaxError
from risp.reader.lexer import Lexer
from risp.reader.nodes import (
    Node,
    IntNode,
    FloatNode,
    NameNode,
    StrNode,
    SymbolNode,
    OperatorNode,
    ExprNode,
    ListNode,
)
from risp.reader.token import Token, TokenKind
from risp.types.operator import Op

logger = logging.getLogger(__name__)


class Parser:
    def __init__(self, lexer: Lexer, source: str):
        # `source` must be the string the lexer was built from
        self.lexer = lexer
        self.source = source
        self.current_token: Token = lexer.next_token()

    def advance(self) -> None:
        self.current_token = self.lexer.next_token()

    def expect(self, kind: TokenKind) -> None:
        """Consume the current token if it is of `kind`, else raise."""
        if self.current_token.kind is not kind:
            raise RispSyntaxError(
                f"expected {kind}, found {self.current_token.kind}", self.current_token.span
            )
        self.advance()

    def parse_atom(self) -> Node:
        token = self.current_token
        kind = token.kind

        if kind is TokenKind.OPEN_PAREN:
            return ExprNode(self.parse_list())
        if kind in (TokenKind.EOF, TokenKind.CLOSE_PAREN):
            raise RispSyntaxError(f"unexpected {kind} while parsing atom", token.span)

        content = token.text(self.source)
        self.advance()

        match kind:
            case TokenKind.INT:
                return IntNode(int(content))
            case TokenKind.FLOAT:
                return FloatNode(float(content))
            case TokenKind.STRING:
                return StrNode(content)
            case TokenKind.NAME:
                return NameNode(content)
            case TokenKind.OPERATOR:
                # The lexer only emits operator tokens for the Op characters
                return OperatorNode(Op.from_text(content))
            case TokenKind.QUOTE:
                return self._quoted(token)
        raise RispSyntaxError(f"unexpected {kind} while parsing atom", token.span)

    def _quoted(self, quote: Token) -> Node:
        quoted = self.parse_expr()
        if isinstance(quoted, ExprNode):
            return ListNode(quoted.items)
        if isinstance(quoted, NameNode):
            return SymbolNode(quoted.name)
        raise RispSyntaxError(f"{type(quoted).__name__} cannot be quoted", quote.span)

    def parse_list(self) -> list[Node]:
        """Parse '(' expr* ')' and return the enclosed expressions."""
        self.expect(TokenKind.OPEN_PAREN)
        elements: list[Node] = []
        # The EOF check stops runaway input from looping forever
        while self.current_token.kind not in (TokenKind.CLOSE_PAREN, TokenKind.EOF):
            elements.append(self.parse_expr())
        self.expect(TokenKind.CLOSE_PAREN)
        return elements

    def parse_expr(self) -> Node:
        kind = self.current_token.kind
        if kind is TokenKind.OPEN_PAREN:
            return ExprNode(self.parse_list())
        if kind is TokenKind.EOF:
            raise RispSyntaxError("unexpected EOF while parsing atom", self.current_token.span)
        return self.parse_atom()

    def parse_exprs(self) -> list[Node]:
        """Parse top-level expressions until the end of the input."""
        exprs: list[Node] = []
        while self.current_token.kind is not TokenKind.EOF:
            exprs.append(self.parse_expr())
        logger.debug("parsed %d top-level form(s)", len(exprs))
        return exprs


def parse(source: str) -> list[Node]:
    """Tokenize and parse every top-level form in `source`."""
    try:
        return Parser(Lexer(source), source).parse_exprs()
    except RecursionError as ex:
        raise RispSyntaxError("expression nested too deeply") from ex
