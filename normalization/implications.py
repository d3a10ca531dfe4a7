# normalization/implications.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Implication and biconditional elimination

"""Rewrites implications and biconditionals into AND/OR/NOT.

    A -> B    becomes  (~A | B)
    A <-> B   becomes  (~A | B) & (~B | A)

Operands are rewritten first, so the trace lists inner rewrites before the
rewrites of the nodes that contain them.
"""

from __future__ import annotations
from typing import List
from syntax import ast_nodes as ast
from .trace import PassResult, TraceEntry
from utils.logger import get_logger


class ImplicationEliminator(ast.Visitor):
    """Removes every Implies and Iff node from a formula.

    Attributes:
        _steps: Trace of the transformation in progress
    """

    def __init__(self):
        self._steps: List[TraceEntry] = []

    def transform(self, root: ast.Formula) -> PassResult:
        """Rewrite root into an implication-free formula.

        Args:
            root: Formula to rewrite

        Returns:
            Implication-free formula and one trace equation per rewrite
        """
        logger = get_logger()
        logger.debug(f"Eliminating implications in {type(root).__name__}")

        self._steps = []
        result = root.accept(self)

        logger.debug(f"Implication elimination complete: {len(self._steps)} rewrite(s)")
        return PassResult(result, tuple(self._steps))

    def visit_atom(self, n: ast.Atom) -> ast.Formula:
        return n

    def visit_not(self, n: ast.Not) -> ast.Formula:
        return ast.Not(n.operand.accept(self))

    def visit_and(self, n: ast.And) -> ast.Formula:
        return ast.And(n.left.accept(self), n.right.accept(self))

    def visit_or(self, n: ast.Or) -> ast.Formula:
        return ast.Or(n.left.accept(self), n.right.accept(self))

    def visit_implies(self, n: ast.Implies) -> ast.Formula:
        """Rewrite A -> B as ~A | B."""
        left = n.left.accept(self)
        right = n.right.accept(self)

        result = ast.Or(ast.Not(left), right)
        self._record("Substituímos a implicação", n, result)
        return result

    def visit_iff(self, n: ast.Iff) -> ast.Formula:
        """Rewrite A <-> B as (~A | B) & (~B | A)."""
        left = n.left.accept(self)
        right = n.right.accept(self)

        result = ast.And(
            ast.Or(ast.Not(left), right),
            ast.Or(ast.Not(right), left),
        )
        self._record("Substituímos o bicondicional", n, result)
        return result

    def visit_forall(self, n: ast.ForAll) -> ast.Formula:
        return ast.ForAll(n.variable, n.body.accept(self))

    def visit_exists(self, n: ast.Exists) -> ast.Formula:
        return ast.Exists(n.variable, n.body.accept(self))

    def _record(self, text: str, before: ast.Formula, after: ast.Formula):
        get_logger().rewrite_applied(type(before).__name__, str(before), str(after))
        self._steps.append(TraceEntry.equivalence(text, before, after))


def eliminate_implications(formula: ast.Formula) -> PassResult:
    """Rewrite formula without implications or biconditionals."""
    return ImplicationEliminator().transform(formula)
