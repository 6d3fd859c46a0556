from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from lispreter.errors import PrimitiveError, UndefinedFunctionError
from lispreter.types.node import NIL, Atom, Node, SExpression, from_iterable, is_list_or_nil, iter_list

logger = logging.getLogger(__name__)

PrimitiveFn = Callable[["PrimitiveHandler", list[Node]], Node]


def _int_arg(name: str, node: Node) -> int:
    if not (isinstance(node, Atom) and node.is_int()):
        raise PrimitiveError(f"{name} expects integer arguments, got {node}")
    return node.value


def _list_arg(name: str, node: Node) -> SExpression:
    if not isinstance(node, SExpression):
        raise PrimitiveError(f"{name} expects a non-empty list, got {node}")
    return node


# -------------------------------
# List operations
# -------------------------------
def car(_, args: list[Node]) -> Node:
    return _list_arg("CAR", args[0]).head

def cdr(_, args: list[Node]) -> Node:
    return _list_arg("CDR", args[0]).tail

def cons(_, args: list[Node]) -> Node:
    head, tail = args
    if not is_list_or_nil(tail):
        raise PrimitiveError(f"Second argument to CONS must be a list or NIL, got {tail}")
    return SExpression(head, tail)

def list_builtin(_, args: list[Node]) -> Node:
    return from_iterable(args)

# -------------------------------
# Predicates
# -------------------------------
def is_atom(_, args: list[Node]) -> Node:
    return Atom(not args[0].is_list())

def is_int(_, args: list[Node]) -> Node:
    return Atom(isinstance(args[0], Atom) and args[0].is_int())

def is_null(_, args: list[Node]) -> Node:
    return Atom(args[0] == NIL)

def eq(_, args: list[Node]) -> Node:
    a, b = args
    if a.is_list() or b.is_list():
        raise PrimitiveError(f"EQ expects atoms, got {a} and {b}")
    return Atom(a == b)

# -------------------------------
# Arithmetic
# -------------------------------
def plus(_, args: list[Node]) -> Node:
    return Atom(_int_arg("PLUS", args[0]) + _int_arg("PLUS", args[1]))

def minus(_, args: list[Node]) -> Node:
    return Atom(_int_arg("MINUS", args[0]) - _int_arg("MINUS", args[1]))

def times(_, args: list[Node]) -> Node:
    return Atom(_int_arg("TIMES", args[0]) * _int_arg("TIMES", args[1]))

def _divisor(name: str, node: Node) -> int:
    d = _int_arg(name, node)
    if d == 0:
        raise PrimitiveError(f"{name}: division by zero")
    return d

def quotient(_, args: list[Node]) -> Node:
    n, d = _int_arg("QUOTIENT", args[0]), _divisor("QUOTIENT", args[1])
    q = abs(n) // abs(d)
    return Atom(q if (n < 0) == (d < 0) else -q)

def remainder(_, args: list[Node]) -> Node:
    n, d = _int_arg("REMAINDER", args[0]), _divisor("REMAINDER", args[1])
    r = abs(n) % abs(d)
    return Atom(-r if n < 0 else r)

# -------------------------------
# Comparison
# -------------------------------
def less(_, args: list[Node]) -> Node:
    return Atom(_int_arg("LESS", args[0]) < _int_arg("LESS", args[1]))

def greater(_, args: list[Node]) -> Node:
    return Atom(_int_arg("GREATER", args[0]) > _int_arg("GREATER", args[1]))

# -------------------------------
# Output
# -------------------------------
def print_builtin(handler: PrimitiveHandler, args: list[Node]) -> Node:
    handler.output.write(f"{args[0]}\n")
    return args[0]


# name -> (function, arity); arity None accepts any number of arguments
PRIMITIVES: dict[str, tuple[PrimitiveFn, Optional[int]]] = {
    "CAR": (car, 1),
    "CDR": (cdr, 1),
    "CONS": (cons, 2),
    "LIST": (list_builtin, None),
    "ATOM": (is_atom, 1),
    "INT": (is_int, 1),
    "NULL": (is_null, 1),
    "EQ": (eq, 2),
    "PLUS": (plus, 2),
    "MINUS": (minus, 2),
    "TIMES": (times, 2),
    "QUOTIENT": (quotient, 2),
    "REMAINDER": (remainder, 2),
    "LESS": (less, 2),
    "GREATER": (greater, 2),
    "PRINT": (print_builtin, 1),
}

# Signatures for documentation, hover and completion
PRIMITIVE_SIGNATURES: dict[str, str] = {
    "CAR": "(CAR list)",
    "CDR": "(CDR list)",
    "CONS": "(CONS x list)",
    "LIST": "(LIST &rest xs)",
    "ATOM": "(ATOM x)",
    "INT": "(INT x)",
    "NULL": "(NULL x)",
    "EQ": "(EQ a b)",
    "PLUS": "(PLUS a b)",
    "MINUS": "(MINUS a b)",
    "TIMES": "(TIMES a b)",
    "QUOTIENT": "(QUOTIENT a b)",
    "REMAINDER": "(REMAINDER a b)",
    "LESS": "(LESS a b)",
    "GREATER": "(GREATER a b)",
    "PRINT": "(PRINT x)",
}


class PrimitiveHandler:
    """Executes built-in operations by alias name.

    Names are matched case-insensitively. Arguments arrive as an evaluated
    list node, or None for a nilary call.
    """

    def __init__(self, output: Optional[TextIO] = None):
        self.output: TextIO = output if output is not None else sys.stdout

    def has_primitive(self, name: str) -> bool:
        return name.upper() in PRIMITIVES

    def call_func(self, name: str, args: Optional[Node] = None) -> Node:
        entry = PRIMITIVES.get(name.upper())
        if entry is None:
            raise UndefinedFunctionError(f"The primitive {name} is undefined.")
        fn, arity = entry
        values = [] if args is None else list(iter_list(args))
        if arity is not None and len(values) != arity:
            raise PrimitiveError(
                f"{name.upper()} requires exactly {arity} argument(s), got {len(values)}"
            )
        logger.debug("primitive %s %s", name.upper(), args)
        return fn(self, values)
