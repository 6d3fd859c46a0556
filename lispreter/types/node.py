"""S-expression data model for Lispreter.

Every value the interpreter reads, stores or returns is a `Node`: either an
`Atom` (symbol, integer, `T` or `NIL`) or an `SExpression` cell holding a
head node and a tail that is itself a list cell or the `NIL` atom.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator

from lispreter.errors import NodeInitError
from lispreter.types.patterns import is_integer_literal, is_symbol_literal


class Node:
    """Abstract symbolic value. Equality and hashing follow the rendering.

    Nodes are immutable: each slot can be assigned once, in __init__.
    """

    __slots__ = ()

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, name):
            raise AttributeError(f"{type(self).__name__} is immutable; cannot set {name!r}")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; cannot delete {name!r}")

    def is_list(self) -> bool:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Node) and str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class Atom(Node):
    """Literal leaf value.

    Built from literal text (validated against the symbol and integer
    patterns), from a bool (`T`/`NIL`) or from an int.
    """

    __slots__ = ("lit",)

    def __init__(self, lit: str | bool | int):
        # bool before int: bool is an int subclass
        if isinstance(lit, bool):
            text = "T" if lit else "NIL"
        elif isinstance(lit, int):
            text = str(lit)
        elif isinstance(lit, str) and (is_symbol_literal(lit) or is_integer_literal(lit)):
            text = lit
        else:
            raise NodeInitError(f"Invalid atom specified: {lit!r}")
        self.lit: str = text

    def is_list(self) -> bool:
        return False

    def is_int(self) -> bool:
        return is_integer_literal(self.lit)

    def is_symbol(self) -> bool:
        return not self.is_int()

    def is_nil(self) -> bool:
        return self.lit == "NIL"

    def is_true(self) -> bool:
        return self.lit == "T"

    @property
    def value(self) -> int:
        """Integer value of a numeric atom."""
        if not self.is_int():
            raise NodeInitError(f"Atom {self} is not an integer")
        return int(self.lit)

    def eval(self) -> Atom:
        # Literal atoms are self-evaluating; symbols resolve via the Environment.
        return self

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Atom) and str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    def __str__(self) -> str:
        if self.is_int() and self.lit.startswith("+"):
            return self.lit[1:]
        return self.lit


NIL = Atom(False)
T = Atom(True)


class SExpression(Node):
    """A list cell: `head` is the first element, `tail` the rest of the list."""

    __slots__ = ("head", "tail")

    def __init__(self, head: Node, tail: Node = NIL):
        if not isinstance(head, Node):
            raise NodeInitError(f"Invalid list element: {head!r}")
        if not (isinstance(tail, SExpression) or tail == NIL):
            raise NodeInitError(f"Invalid list tail: {tail}")
        self.head: Node = head
        self.tail: Node = tail

    def is_list(self) -> bool:
        return True

    def __iter__(self) -> Iterator[Node]:
        return iter_list(self)

    def __len__(self) -> int:
        return list_length(self)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(" ".join(str(n) for n in iter_list(self)))
            buffer.write(")")
            return buffer.getvalue()


def from_iterable(nodes: Iterable[Node]) -> Node:
    """Build a NIL-terminated chain from `nodes`; an empty iterable gives NIL."""
    items = list(nodes)
    result: Node = NIL
    for node in reversed(items):
        result = SExpression(node, result)
    return result


def iter_list(node: Node) -> Iterator[Node]:
    """Walk the elements of a list chain. NIL yields nothing."""
    while isinstance(node, SExpression):
        yield node.head
        node = node.tail


def list_length(node: Node) -> int:
    return sum(1 for _ in iter_list(node))


def is_list_or_nil(node: Node) -> bool:
    return node.is_list() or node == NIL
