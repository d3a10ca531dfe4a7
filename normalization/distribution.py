# normalization/distribution.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Conjunctive Normal Form by distribution of OR over AND

"""Distributes disjunctions over conjunctions to reach CNF.

    A | (B & C)  =>  (A | B) & (A | C)
    (A & B) | C  =>  (A | C) & (B | C)

Operands are normalized before the disjunction that contains them, and every
disjunction built by a distribution step is examined again, since it may
have a conjunction operand of its own. The pass repeats until no Or node has
an And child anywhere in the tree.
"""

from __future__ import annotations
from typing import List
from syntax import ast_nodes as ast
from .trace import PassResult, TraceEntry
from utils.logger import get_logger


def has_and_under_or(formula: ast.Formula) -> bool:
    """True when some Or node of formula has an And child."""
    if isinstance(formula, ast.Or):
        if isinstance(formula.left, ast.And) or isinstance(formula.right, ast.And):
            return True
    if isinstance(formula, ast.BINARY_NODES):
        return has_and_under_or(formula.left) or has_and_under_or(formula.right)
    if isinstance(formula, ast.Not):
        return has_and_under_or(formula.operand)
    if isinstance(formula, ast.QUANTIFIER_NODES):
        return has_and_under_or(formula.body)
    return False


class CNFDistributor(ast.Visitor):
    """Rewrites a formula into Conjunctive Normal Form.

    Attributes:
        _steps: Trace of the transformation in progress
    """

    def __init__(self):
        self._steps: List[TraceEntry] = []

    def transform(self, root: ast.Formula) -> PassResult:
        """Distribute OR over AND in root until a fixpoint is reached.

        Args:
            root: Quantifier-prefixed formula in negation normal form

        Returns:
            Formula in CNF; the trace has one equation per distribution step
            followed by the final CNF
        """
        logger = get_logger()
        logger.debug(f"Distributing disjunctions in {type(root).__name__}")

        self._steps = []
        result = root
        rounds = 0
        while rounds == 0 or has_and_under_or(result):
            result = result.accept(self)
            rounds += 1

        logger.debug(f"CNF reached after {rounds} round(s), {len(self._steps)} step(s)")

        self._steps.append(TraceEntry.result("Forma Normal Conjuntiva final", result))
        return PassResult(result, tuple(self._steps))

    def visit_atom(self, n: ast.Atom) -> ast.Formula:
        return n

    def visit_not(self, n: ast.Not) -> ast.Formula:
        return ast.Not(n.operand.accept(self))

    def visit_and(self, n: ast.And) -> ast.Formula:
        return ast.And(n.left.accept(self), n.right.accept(self))

    def visit_or(self, n: ast.Or) -> ast.Formula:
        return self._distribute(ast.Or(n.left.accept(self), n.right.accept(self)))

    def visit_implies(self, n: ast.Implies) -> ast.Formula:
        return ast.Implies(n.left.accept(self), n.right.accept(self))

    def visit_iff(self, n: ast.Iff) -> ast.Formula:
        return ast.Iff(n.left.accept(self), n.right.accept(self))

    def visit_forall(self, n: ast.ForAll) -> ast.Formula:
        return ast.ForAll(n.variable, n.body.accept(self))

    def visit_exists(self, n: ast.Exists) -> ast.Formula:
        return ast.Exists(n.variable, n.body.accept(self))

    def _distribute(self, n: ast.Or) -> ast.Formula:
        """Distribute a disjunction whose operands are already in CNF."""
        if isinstance(n.left, ast.And):
            result = ast.And(
                self._distribute(ast.Or(n.left.left, n.right)),
                self._distribute(ast.Or(n.left.right, n.right)),
            )
        elif isinstance(n.right, ast.And):
            result = ast.And(
                self._distribute(ast.Or(n.left, n.right.left)),
                self._distribute(ast.Or(n.left, n.right.right)),
            )
        else:
            return n

        get_logger().rewrite_applied("distribute", str(n), str(result))
        self._steps.append(TraceEntry.equivalence("Distribuímos OR sobre AND", n, result))
        return result


def to_cnf(formula: ast.Formula) -> PassResult:
    """Rewrite a formula in negation normal form into CNF."""
    return CNFDistributor().transform(formula)
