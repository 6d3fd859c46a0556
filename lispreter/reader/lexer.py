"""
  Lispreter lexer

Splits source text into (token_type, token_value) tuples:

    - lparen / rparen -> ( )
    - quote           -> '
    - atom            -> any other run of non-blank characters

`;` starts a comment running to the end of the line. Atom text is not
validated here; the parser hands it to Atom, which rejects malformed literals.
"""

from __future__ import annotations

import re
from typing import Iterator

TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # '
    r"|(?P<atom>[^\s();']+)"  # symbols and integers
    r")"
)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace is left
            break
        pos = m.end()
        if m.group("comment"):
            continue
        for name in ("lparen", "rparen", "quote", "atom"):
            if m.group(name):
                yield name, m.group(name)
                break
