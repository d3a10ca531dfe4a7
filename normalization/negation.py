# normalization/negation.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Negation Normal Form conversion

"""Pushes negations inward until they apply to atoms only.

Rules, applied top-down:

    ~~A          =>  A
    ~(A & B)     =>  ~A | ~B
    ~(A | B)     =>  ~A & ~B
    ~forall x A  =>  exists x ~A
    ~exists x A  =>  forall x ~A

The result of every rule is normalized again, so chains such as
~~~(A & B) end with negations over atoms. The input must be free of
implications and biconditionals; a negated Implies or Iff is left in place.
"""

from __future__ import annotations
from typing import List
from syntax import ast_nodes as ast
from .trace import PassResult, TraceEntry
from utils.logger import get_logger


class NegationNormalizer(ast.Visitor):
    """Converts an implication-free formula to Negation Normal Form.

    Attributes:
        _steps: Trace of the transformation in progress
    """

    def __init__(self):
        self._steps: List[TraceEntry] = []

    def transform(self, root: ast.Formula) -> PassResult:
        """Push every negation of root down to the atoms.

        Args:
            root: Implication-free formula

        Returns:
            Formula in Negation Normal Form and one trace equation per rule
        """
        logger = get_logger()
        logger.debug(f"Converting {type(root).__name__} to negation normal form")

        self._steps = []
        result = root.accept(self)

        logger.debug(f"Negation normal form complete: {len(self._steps)} rewrite(s)")
        return PassResult(result, tuple(self._steps))

    def visit_atom(self, n: ast.Atom) -> ast.Formula:
        return n

    def visit_not(self, n: ast.Not) -> ast.Formula:
        """Apply the rule matching the negated operand, if any."""
        inner = n.operand

        # Double negation: ~~A -> A
        if isinstance(inner, ast.Not):
            result = inner.operand.accept(self)
            self._record("Eliminamos a negação dupla", n, result)
            return result

        # De Morgan: ~(A & B) -> ~A | ~B
        if isinstance(inner, ast.And):
            result = ast.Or(
                ast.Not(inner.left).accept(self),
                ast.Not(inner.right).accept(self),
            )
            self._record("Aplicamos De Morgan", n, result)
            return result

        # De Morgan: ~(A | B) -> ~A & ~B
        if isinstance(inner, ast.Or):
            result = ast.And(
                ast.Not(inner.left).accept(self),
                ast.Not(inner.right).accept(self),
            )
            self._record("Aplicamos De Morgan", n, result)
            return result

        if isinstance(inner, ast.ForAll):
            result = ast.Exists(inner.variable, ast.Not(inner.body).accept(self))
            self._record("Negação de quantificador universal", n, result)
            return result

        if isinstance(inner, ast.Exists):
            result = ast.ForAll(inner.variable, ast.Not(inner.body).accept(self))
            self._record("Negação de quantificador existencial", n, result)
            return result

        return ast.Not(inner.accept(self))

    def visit_and(self, n: ast.And) -> ast.Formula:
        return ast.And(n.left.accept(self), n.right.accept(self))

    def visit_or(self, n: ast.Or) -> ast.Formula:
        return ast.Or(n.left.accept(self), n.right.accept(self))

    def visit_implies(self, n: ast.Implies) -> ast.Formula:
        return ast.Implies(n.left.accept(self), n.right.accept(self))

    def visit_iff(self, n: ast.Iff) -> ast.Formula:
        return ast.Iff(n.left.accept(self), n.right.accept(self))

    def visit_forall(self, n: ast.ForAll) -> ast.Formula:
        return ast.ForAll(n.variable, n.body.accept(self))

    def visit_exists(self, n: ast.Exists) -> ast.Formula:
        return ast.Exists(n.variable, n.body.accept(self))

    def _record(self, text: str, before: ast.Formula, after: ast.Formula):
        get_logger().rewrite_applied(text, str(before), str(after))
        self._steps.append(TraceEntry.equivalence(text, before, after))


def to_negation_normal_form(formula: ast.Formula) -> PassResult:
    """Push the negations of an implication-free formula down to its atoms."""
    return NegationNormalizer().transform(formula)
