"""Reader: turns source text into AST nodes.

- ``lexer``  -- character stream to tokens (spans only, no copies of the text)
- ``parser`` -- recursive-descent parser producing ``nodes``
"""

from risp.reader.token import Span, Token, TokenKind
from risp.reader.lexer import Lexer, lex
from risp.reader.parser import Parser, parse

__all__ = ["Span", "Token", "TokenKind", "Lexer", "lex", "Parser", "parse"]
