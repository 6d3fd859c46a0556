from __future__ import annotations

from typing import TYPE_CHECKING, Dict

from lispreter.errors import InvalidActualsError, TooFewArgumentsError, TooManyArgumentsError
from lispreter.types.node import NIL, Node, SExpression

if TYPE_CHECKING:
    from lispreter.types.environment import Environment
    from lispreter.types.function import Function


def bind_arguments(fn: Function, actuals: Node, env: Environment) -> Dict[str, Node]:
    """
    Single source of truth for formal/actual binding in Lispreter.

    Walks `actuals` in lock-step with the formals of `fn`, evaluating each
    actual in the caller's scope (`env`). Arity is strict: no optional or
    rest parameters.

    Returns a table mapping formal names to evaluated actuals.
    """
    table: Dict[str, Node] = {}

    if not actuals.is_list():
        if actuals != NIL:
            if not fn.params:
                return table
            raise InvalidActualsError(
                f"Invalid parameters passed in bind operation for function : {fn.label}"
            )
        if fn.params:
            raise TooFewArgumentsError(f"Too few args for function : {fn.label}")
        return table

    cell: Node = actuals
    for formal in fn.params:
        if not isinstance(cell, SExpression):
            raise TooFewArgumentsError(f"Too few args for function : {fn.label}")
        table[formal] = env.evaluate(cell.head)
        cell = cell.tail

    if str(cell) != "NIL":
        raise TooManyArgumentsError(f"Too many args for function : {fn.label}")
    return table
