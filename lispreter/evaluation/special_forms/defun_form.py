from lispreter import EvaluatorFn
from lispreter.errors import FuncDefError
from lispreter.types.environment import Environment
from lispreter.types.node import Atom, Node, iter_list


def defun_form(tail: Node, env: Environment, evaluate_fn: EvaluatorFn) -> Node:
    """
    (DEFUN name formals body)
    Registers a named function and returns its name. Nothing is evaluated.
    """
    args = list(iter_list(tail))
    if len(args) != 3:
        raise FuncDefError("DEFUN requires a name, a formals list and a body")

    name, formals, body = args
    if not (isinstance(name, Atom) and name.is_symbol()):
        raise FuncDefError(f"Invalid function name: {name}")
    env.register_func(str(name), formals, body)
    return name
