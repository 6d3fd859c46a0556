"""Runtime environment for Lispreter.

The Environment is the working 'd-list' of a program: it stores named
functions, anonymous functions (keyed by their formals node) and variable
bindings, and it routes primitive calls to a PrimitiveHandler. One instance
is one interpreter; nothing here is process-wide.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import TYPE_CHECKING, Callable, Dict, Iterable, Mapping, Optional

from lispreter.errors import (
    FuncDefError,
    UndefinedFunctionError,
    UndefinedLambdaError,
    UndefinedVariableError,
)
from lispreter.types.closure_state import ClosureState
from lispreter.types.function import Function, LambdaFn, UserDef
from lispreter.types.node import Node
from lispreter.types.patterns import is_lambda_name

if TYPE_CHECKING:
    from lispreter.builtins import PrimitiveHandler

logger = logging.getLogger(__name__)


class Environment:
    """Function, lambda and variable tables plus the primitive handler."""

    __slots__ = (
        "functions",
        "lambdas",
        "variables",
        "handler",
        "closure_state",
        "_evaluate_fn",
    )

    def __init__(
        self,
        handler: Optional[PrimitiveHandler] = None,
        evaluate_fn: Optional[Callable[[Node, Environment], Node]] = None,
    ):
        if handler is None:
            from lispreter.builtins import PrimitiveHandler
            handler = PrimitiveHandler()
        if evaluate_fn is None:
            from lispreter.evaluation.evaluator import evaluate
            evaluate_fn = evaluate
        self.functions: dict[str, Function] = {}
        self.lambdas: dict[Node, Function] = {}
        self.variables: dict[str, Node] = {}
        self.handler: PrimitiveHandler = handler
        self.closure_state: ClosureState = ClosureState()
        self._evaluate_fn = evaluate_fn

    def evaluate(self, node: Node) -> Node:
        """Evaluate `node` in this environment."""
        return self._evaluate_fn(node, self)

    # --- Functions ---
    def exec_func(self, name: str, args: Node) -> Node:
        """Call the user function `name` with the unevaluated actuals `args`.

        Raises UndefinedFunctionError if `name` has not been registered.
        """
        if not self.is_defined_f(name):
            raise UndefinedFunctionError(f"The function {name} is undefined.")
        return self.functions[name].eval(args, self)

    def exec_lamb(self, formals: Node, args: Node) -> Node:
        """Call the lambda registered under `formals` with the actuals `args`.

        Raises UndefinedLambdaError if no lambda is registered for `formals`.
        """
        fn = self.lambdas.get(formals)
        if fn is None:
            raise UndefinedLambdaError(f"No lambda is registered for the formals {formals}.")
        return fn.eval(args, self)

    def register_func(self, name: str, formals: Node, body: Node) -> UserDef:
        """Register (or overwrite) the named function `name`.

        The names 'lambda' and 'λ' are reserved for anonymous registration.
        """
        if is_lambda_name(name):
            raise FuncDefError(
                "Use the anonymous function registration to register a lambda expression."
            )
        fn = UserDef(name, formals, body)
        self.functions[name] = fn
        logger.debug("registered function %s %s", name, formals)
        return fn

    def register_anon(self, formals: Node, body: Node) -> LambdaFn:
        """Register an anonymous function keyed by its formals node."""
        fn = LambdaFn(formals, body)
        self.lambdas[formals] = fn
        self.closure_state.set_next_node(formals)
        logger.debug("registered lambda %s", fn)
        return fn

    def is_defined_f(self, name: str) -> bool:
        return name in self.functions

    def get_functions(self) -> Dict[str, Function]:
        return dict(self.functions)

    def get_lambdas(self) -> Dict[Node, Function]:
        return dict(self.lambdas)

    # --- Variables ---
    def substitute(self, table: Mapping[str, Node]) -> Dict[str, Node]:
        """Merge `table` into the variable bindings and return a copy of the result."""
        self.variables.update(table)
        return self.get_variables()

    def unbind(self, name: str) -> None:
        """Remove the binding of `name`.

        Raises UndefinedVariableError if `name` is not bound.
        """
        if not self.is_defined_v(name):
            raise UndefinedVariableError(f"The variable {name} is undefined.")
        del self.variables[name]
        logger.debug("unbound variable %s", name)

    def unbind_multi(self, names: Iterable[str]) -> None:
        """Remove every name in `names`, or none of them.

        Names are unbound in order; a name that is missing (or was already
        removed earlier in the same call) raises UndefinedVariableError and
        the table is restored to what it was before the call.
        """
        saved = self.get_variables()
        try:
            for name in names:
                self.unbind(name)
        except UndefinedVariableError:
            self.set_variables(saved)
            raise

    def is_defined_v(self, name: str) -> bool:
        return name in self.variables

    def get_variable_value(self, name: str) -> Node:
        if not self.is_defined_v(name):
            raise UndefinedVariableError(f"The variable {name} is undefined.")
        return self.variables[name]

    def get_variables(self) -> Dict[str, Node]:
        """A copy of the variable table; mutating it does not affect the environment."""
        return dict(self.variables)

    def set_variables(self, values: Mapping[str, Node]) -> None:
        """Replace the variable table with a copy of `values`."""
        self.variables = dict(values)

    # --- Primitives ---
    def invoke_prim(self, name: str, args: Optional[Node] = None) -> Node:
        """Invoke the primitive `name` through the handler; no validation here."""
        return self.handler.call_func(name, args)

    def is_primitive(self, name: str) -> bool:
        return self.handler.has_primitive(name)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v}" for k, v in self.variables.items()))
            buffer.write("}")
            if self.functions:
                buffer.write(" functions: ")
                buffer.write(", ".join(self.functions))
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
