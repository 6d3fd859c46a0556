from lispreter import EvaluatorFn
from lispreter.errors import FuncDefError
from lispreter.types.environment import Environment
from lispreter.types.node import Atom, Node, SExpression, iter_list, list_length
from lispreter.types.patterns import is_lambda_name


def is_lambda_form(node: Node) -> bool:
    """True for a list shaped (LAMBDA formals body) or (λ formals body)."""
    return (
        isinstance(node, SExpression)
        and isinstance(node.head, Atom)
        and is_lambda_name(str(node.head))
        and list_length(node) == 3
    )


def lambda_form(tail: Node, env: Environment, evaluate_fn: EvaluatorFn) -> Node:
    """
    (LAMBDA formals body)
    Registers an anonymous function keyed by its formals. The form itself is
    the first-class value of the function.
    """
    args = list(iter_list(tail))
    if len(args) != 2:
        raise FuncDefError("LAMBDA requires a formals list and a body")

    formals, body = args
    env.register_anon(formals, body)
    return SExpression(Atom("LAMBDA"), tail)
