# Core type aliases for Lispreter.
# Code and data share one representation: every form the reader produces and
# every value the evaluator returns is a lispreter.types.node.Node (an Atom or
# an SExpression cell). The aliases below keep signatures readable without
# importing the node module here.

from typing import Any, Callable

__version__ = "0.1.0"

# Evaluator function type: passed to special forms as (node, env) -> node
EvaluatorFn = Callable[..., Any]
