from __future__ import annotations

"""
Lightweight indexer for Lispreter files without evaluating code.

We scan for (DEFUN name (formals) body) forms and record the name, the
formals and the position. The scan is tolerant so partial buffers never
crash it; reader errors are collected separately by running the real reader
over the text.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Tuple
import re

from lispreter.errors import LispreterError
from lispreter.reader.parser import read
from lispreter.types.patterns import is_symbol_literal

# Simple token patterns for scanning
TOKEN_REGEX = re.compile(r"\s+|;.*$|\(|\)|'|[^\s()';]+", re.MULTILINE)


@dataclass
class FunctionDef:
    name: str
    params: List[str]
    line: int
    col: int


@dataclass
class Problem:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    functions: Dict[str, FunctionDef] = field(default_factory=dict)
    problems: List[Problem] = field(default_factory=list)
    paren_balance: int = 0
    reader_error: Optional[str] = None


def _iter_tokens(text: str):
    for m in TOKEN_REGEX.finditer(text):
        tok = m.group(0)
        if not tok or tok.isspace() or tok.startswith(';'):
            continue
        yield tok, m.start(), m.end()


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _read_formals(tokens, j: int) -> Tuple[Optional[List[str]], int]:
    # tokens[j] should open the formals list; NIL stands for no formals
    if j >= len(tokens):
        return None, j
    tok = tokens[j][0]
    if tok.upper() == 'NIL':
        return [], j + 1
    if tok != '(':
        return None, j
    params: List[str] = []
    j += 1
    while j < len(tokens) and tokens[j][0] != ')':
        params.append(tokens[j][0])
        j += 1
    return params, j + 1


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(_iter_tokens(text))

    i = 0
    while i < len(tokens):
        tok, start, end = tokens[i]
        if tok == '(':
            idx.paren_balance += 1
            head_pos = i + 1
            if head_pos < len(tokens) and tokens[head_pos][0].upper() == 'DEFUN' and head_pos + 1 < len(tokens):
                name, s, _ = tokens[head_pos + 1]
                if name not in ('(', ')'):
                    line, col = _position_from_offset(text, s)
                    params, _ = _read_formals(tokens, head_pos + 2)
                    idx.functions[name] = FunctionDef(name=name, params=params or [], line=line, col=col)
                    for problem in _check_params(params or []):
                        idx.problems.append(Problem(message=f"{name}: {problem}", line=line, col=col))
        elif tok == ')':
            idx.paren_balance -= 1
        i += 1

    try:
        for _ in read(text):
            pass
    except LispreterError as ex:
        idx.reader_error = str(ex)

    return idx


def _check_params(params: List[str]) -> List[str]:
    problems = []
    seen = set()
    for p in params:
        if p == '(':
            problems.append("Parameter names must be alphanumeric literals")
        elif not is_symbol_literal(p):
            problems.append(f"Parameter names must be alphanumeric literals : {p}")
        elif p in seen:
            problems.append(f"Formal param names cannot be duplicates : {p}")
        seen.add(p)
    return problems
