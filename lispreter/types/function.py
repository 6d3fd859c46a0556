"""User-defined and anonymous function representations for Lispreter."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Dict, Tuple

from lispreter.errors import DuplicateParameterError, FuncDefError, InvalidParameterError
from lispreter.types.node import Atom, Node, iter_list, is_list_or_nil
from lispreter.types.patterns import is_symbol_literal

if TYPE_CHECKING:
    from lispreter.types.environment import Environment


def convert_params(formals: Node) -> Tuple[str, ...]:
    """Validate a formals list and return its names in order.

    Raises InvalidParameterError for a non-symbol formal and
    DuplicateParameterError for a repeated one.
    """
    names: list[str] = []
    for formal in iter_list(formals):
        word = str(formal)
        if not (isinstance(formal, Atom) and is_symbol_literal(word)):
            raise InvalidParameterError(f"Parameter names must be alphanumeric literals : {word}")
        if word in names:
            raise DuplicateParameterError(f"Formal param names cannot be duplicates : {word}")
        names.append(word)
    return tuple(names)


class Function:
    """A callable binding an ordered tuple of formal names to a body."""

    __slots__ = ("params", "formals", "body")

    def __init__(self, formals: Node, body: Node):
        if not is_list_or_nil(formals):
            raise FuncDefError("Invalid function parameters")
        if not is_list_or_nil(body):
            raise FuncDefError("Invalid function body")
        self.params: Tuple[str, ...] = convert_params(formals)
        self.formals: Node = formals
        self.body: Node = body

    @property
    def label(self) -> str:
        raise NotImplementedError

    @property
    def arity(self) -> int:
        return len(self.params)

    def bind(self, actuals: Node, env: Environment) -> Dict[str, Node]:
        """Bind `actuals` to the formals; see `lispreter.types.bind`."""
        from lispreter.types.bind import bind_arguments
        return bind_arguments(self, actuals, env)

    def eval(self, args: Node, env: Environment) -> Node:
        """
        Evaluate the body with each formal bound to its evaluated actual.

        The bindings are scoped to this call: the variable table is
        snapshotted before substitution and restored afterwards, even when
        the body raises.
        """
        bindings = self.bind(args, env)
        saved = env.get_variables()
        env.substitute(bindings)
        try:
            return env.evaluate(self.body)
        finally:
            env.set_variables(saved)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(self.label)
            buffer.write(" (")
            buffer.write(" ".join(self.params))
            buffer.write(") ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


class UserDef(Function):
    """A named function registered with DEFUN."""

    __slots__ = ("name",)

    def __init__(self, name: str, formals: Node, body: Node):
        super().__init__(formals, body)
        self.name: str = name

    @property
    def label(self) -> str:
        return self.name


class LambdaFn(Function):
    """An anonymous function, looked up by its formals node."""

    __slots__ = ()

    @property
    def key(self) -> Node:
        return self.formals

    @property
    def label(self) -> str:
        return "lambda"
