"""
  Lispreter reader

Streaming, lazy parsing of tokens into Node trees:

    - () and nil -> NIL, t -> T (any case)
    - integers and symbols -> Atom
    - lists -> NIL-terminated SExpression chains
    - 'x -> (QUOTE x)
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from lispreter.errors import LispSyntaxError
from lispreter.reader.lexer import lex
from lispreter.types.node import NIL, T, Atom, Node, SExpression, from_iterable

QUOTE = Atom("QUOTE")


def read_atom(text: str) -> Atom:
    upper = text.upper()
    if upper == "NIL":
        return NIL
    if upper == "T":
        return T
    return Atom(text)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[Node]:
        """Read one form, or return None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "atom":
            self.advance()
            return read_atom(tok_val)

        if tok_type == "quote":
            self.advance()
            expr = self.parse_expr()
            if expr is None:
                raise LispSyntaxError("Expected an expression after quote")
            return SExpression(QUOTE, SExpression(expr, NIL))

        if tok_type == "lparen":
            self.advance()
            items: list[Node] = []
            while True:
                nxt = self.peek()[0]
                if nxt == "rparen":
                    self.advance()
                    break
                if nxt is None:
                    raise LispSyntaxError("Unmatched '('")
                items.append(self.parse_expr())
            return from_iterable(items)

        if tok_type == "rparen":
            raise LispSyntaxError("Unexpected ')'")

        raise LispSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[Node]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> Iterator[Node]:
    """Lazily read every top-level form in `source`."""
    return TokenStream(lex(source)).parse_all()


def read_one(source: str) -> Node:
    """Read exactly the first form in `source`."""
    expr = TokenStream(lex(source)).parse_expr()
    if expr is None:
        raise LispSyntaxError("Empty input")
    return expr
