from lispreter.types.node import Node, Atom, SExpression, NIL, T
from lispreter.types.function import Function, UserDef, LambdaFn
from lispreter.types.closure_state import ClosureState
from lispreter.types.environment import Environment

__all__ = [
    "Node",
    "Atom",
    "SExpression",
    "NIL",
    "T",
    "Function",
    "UserDef",
    "LambdaFn",
    "ClosureState",
    "Environment",
]
