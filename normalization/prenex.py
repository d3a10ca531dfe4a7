# normalization/prenex.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Prenex form extraction

"""Moves every quantifier to the front of the formula.

Quantifiers are collected in pre-order (left to right, outside in) while
walking And/Or/Not spines, and each is replaced by its body. The quantifier-
free matrix is then wrapped again, first collected quantifier outermost.

Hoisting is sound here because standardization already made every bound
variable distinct, and negation normal form left no quantifier under a
negation.
"""

from __future__ import annotations
from typing import List, Tuple
from syntax import ast_nodes as ast
from .trace import PassResult, TraceEntry
from utils.logger import get_logger

Prefix = List[Tuple[type, str]]


class PrenexExtractor(ast.Visitor):
    """Collects the quantifiers of a formula and rebuilds it in prenex form.

    Attributes:
        _prefix: Quantifier kind and variable, in collection order
    """

    def __init__(self):
        self._prefix: Prefix = []

    def transform(self, root: ast.Formula) -> PassResult:
        """Rebuild root with all of its quantifiers as a leading prefix.

        Args:
            root: Standardized formula in negation normal form

        Returns:
            Prenex formula; the trace shows it, unless there were no
            quantifiers to move
        """
        logger = get_logger()

        self._prefix = []
        matrix = root.accept(self)

        result = matrix
        for kind, variable in reversed(self._prefix):
            result = kind(variable, result)

        logger.debug(f"Prenex extraction moved {len(self._prefix)} quantifier(s)")

        steps = []
        if self._prefix:
            steps.append(TraceEntry.result("Movemos os quantificadores para frente", result))
        return PassResult(result, tuple(steps))

    def visit_atom(self, n: ast.Atom) -> ast.Formula:
        return n

    def visit_not(self, n: ast.Not) -> ast.Formula:
        return ast.Not(n.operand.accept(self))

    def visit_and(self, n: ast.And) -> ast.Formula:
        return ast.And(n.left.accept(self), n.right.accept(self))

    def visit_or(self, n: ast.Or) -> ast.Formula:
        return ast.Or(n.left.accept(self), n.right.accept(self))

    def visit_implies(self, n: ast.Implies) -> ast.Formula:
        return ast.Implies(n.left.accept(self), n.right.accept(self))

    def visit_iff(self, n: ast.Iff) -> ast.Formula:
        return ast.Iff(n.left.accept(self), n.right.accept(self))

    def visit_forall(self, n: ast.ForAll) -> ast.Formula:
        self._prefix.append((ast.ForAll, n.variable))
        return n.body.accept(self)

    def visit_exists(self, n: ast.Exists) -> ast.Formula:
        self._prefix.append((ast.Exists, n.variable))
        return n.body.accept(self)


def to_prenex_form(formula: ast.Formula) -> PassResult:
    """Move every quantifier of a standardized NNF formula to the front."""
    return PrenexExtractor().transform(formula)
