from lispreter import EvaluatorFn
from lispreter.errors import EvaluationError
from lispreter.types.environment import Environment
from lispreter.types.node import Atom, Node, SExpression, iter_list, list_length


def let_form(tail: Node, env: Environment, evaluate_fn: EvaluatorFn) -> Node:
    """
    (LET ((name expr) ...) body)
    Values are evaluated in the enclosing scope, then bound for the body only.
    Afterwards shadowed names get their old values back and new names are
    unbound again.
    """
    args = list(iter_list(tail))
    if len(args) != 2:
        raise EvaluationError("LET requires a bindings list and a body")

    specs, body = args
    bindings: dict[str, Node] = {}
    for spec in iter_list(specs):
        if not isinstance(spec, SExpression) or list_length(spec) != 2:
            raise EvaluationError(f"Malformed LET binding: {spec}")
        name, expr = iter_list(spec)
        if not (isinstance(name, Atom) and name.is_symbol()):
            raise EvaluationError(f"LET binding name must be a symbol: {name}")
        bindings[str(name)] = evaluate_fn(expr, env)

    shadowed = {name: env.get_variable_value(name) for name in bindings if env.is_defined_v(name)}
    env.substitute(bindings)
    try:
        return evaluate_fn(body, env)
    finally:
        env.unbind_multi([name for name in bindings if name not in shadowed and env.is_defined_v(name)])
        env.substitute(shadowed)
