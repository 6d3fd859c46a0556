from lispreter import EvaluatorFn
from lispreter.errors import EvaluationError
from lispreter.types.environment import Environment
from lispreter.types.node import NIL, Node, SExpression, iter_list, list_length


def cond_form(tail: Node, env: Environment, evaluate_fn: EvaluatorFn) -> Node:
    """
    (COND (p1 e1) (p2 e2) ...)
    Evaluates predicates in order and returns the expression paired with the
    first one that is not NIL. Every clause must be a two-element list.
    """
    clauses = list(iter_list(tail))
    for clause in clauses:
        if not isinstance(clause, SExpression) or list_length(clause) != 2:
            raise EvaluationError(f"Malformed COND clause: {clause}")

    for clause in clauses:
        predicate, expr = iter_list(clause)
        if evaluate_fn(predicate, env) != NIL:
            return evaluate_fn(expr, env)
    raise EvaluationError("No COND clause was satisfied")
