from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO

from lispreter.builtins import PrimitiveHandler
from lispreter.config import get_recursion_limit
from lispreter.evaluation.evaluator import evaluate
from lispreter.reader.parser import read
from lispreter.types.environment import Environment
from lispreter.types.node import NIL, Node


class Interpreter:
    """
    Reads Lispreter source and evaluates it form by form.
    Keeps one Environment across calls, so definitions persist.
    """

    def __init__(self, output: Optional[TextIO] = None):
        self.output: TextIO = output if output is not None else sys.stdout
        self.env = Environment(PrimitiveHandler(self.output), evaluate)

        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

    def eval_form(self, expr: Node) -> Node:
        """Evaluate one already-read top-level form."""
        return evaluate(expr, self.env)

    def print_result(self, result: Node) -> None:
        """Write the rendering of `result` to the output on its own line."""
        self.output.write(f"{result}\n")

    def iter_eval(self, code: str) -> Iterator[Node]:
        """Yield the result of each top-level form as it is evaluated."""
        for expr in read(code):
            yield self.eval_form(expr)

    def eval(self, code: str) -> Node:
        """Evaluate every form in `code` and return the last result (NIL if none)."""
        result: Node = NIL
        for result in self.iter_eval(code):
            pass
        return result
