from lispreter import EvaluatorFn
from lispreter.errors import EvaluationError
from lispreter.types.environment import Environment
from lispreter.types.node import Node, iter_list


def quote_form(tail: Node, env: Environment, evaluate_fn: EvaluatorFn) -> Node:
    """(QUOTE x) returns x unevaluated."""
    args = list(iter_list(tail))
    if len(args) != 1:
        raise EvaluationError("QUOTE expects exactly 1 argument")
    return args[0]
