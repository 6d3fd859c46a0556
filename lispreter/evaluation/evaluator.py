"""Core evaluator for the Lispreter interpreter.

Dispatches on the Atom/SExpression distinction: literal atoms evaluate to
themselves, symbols resolve through the Environment, and lists are special
forms, user function calls, primitive calls or lambda applications.
"""

from __future__ import annotations

from lispreter.errors import EvaluationError, UndefinedFunctionError
from lispreter.evaluation.special_forms import SPECIAL_FORMS, is_lambda_form
from lispreter.types.environment import Environment
from lispreter.types.node import Atom, Node, SExpression, from_iterable, iter_list


def evaluate(expr: Node, env: Environment) -> Node:
    """Evaluate `expr` against `env` and return the resulting Node."""
    match expr:
        case Atom():
            if expr.is_int() or expr.is_nil() or expr.is_true():
                return expr.eval()
            return env.get_variable_value(str(expr))

        case SExpression(head=Atom() as head, tail=args):
            if head.is_int() or head.is_nil() or head.is_true():
                raise EvaluationError(f"{head} is not a function")
            name = str(head)

            # --- Special forms handling ---
            form = SPECIAL_FORMS.get(name.upper())
            if form is not None:
                return form(args, env, evaluate)

            if env.is_defined_f(name):
                return env.exec_func(name, args)

            if env.is_primitive(name):
                values = from_iterable(evaluate(arg, env) for arg in iter_list(args))
                return env.invoke_prim(name, values)

            # A variable holding a lambda form is applied like a function.
            if env.is_defined_v(name) and is_lambda_form(env.get_variable_value(name)):
                return apply_lambda(env.get_variable_value(name), args, env)

            raise UndefinedFunctionError(f"The function {name} is undefined.")

        case SExpression(head=SExpression() as head, tail=args):
            fn = evaluate(head, env)
            if not is_lambda_form(fn):
                raise EvaluationError(f"{fn} is not a function")
            return apply_lambda(fn, args, env)

    raise EvaluationError(f"Cannot evaluate {expr!r}")


def apply_lambda(fn: SExpression, args: Node, env: Environment) -> Node:
    """Apply the lambda form `fn` to the unevaluated actuals `args`.

    The form is (re-)registered first, so the lambda table always holds this
    form's body under its formals when exec_lamb runs.
    """
    _, formals, body = iter_list(fn)
    registered = env.register_anon(formals, body)
    key = env.closure_state.resolve(registered.key)
    return env.exec_lamb(key, args)
