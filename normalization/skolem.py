# normalization/skolem.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Skolemization of existential quantifiers

"""Eliminates existential quantifiers by Skolemization.

Walking a prenex formula outside in, the pass keeps the universal variables
bound so far. An existential variable is replaced by a fresh Skolem term:

    f<n>(u1,...,uk)  when universals u1..uk enclose the quantifier
    c<n>             otherwise (a Skolem constant)

The counter n is threaded through the recursion and starts at 1, so the
generated names are unique across the whole formula and numbered in the order
the existentials are met. The result is equisatisfiable with the input, not
equivalent.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple
from syntax import ast_nodes as ast
from .substitution import substitute
from .trace import PassResult, TraceEntry
from utils.logger import get_logger

Visited = Tuple[ast.Formula, int]


def skolem_term(universals: Sequence[str], counter: int) -> str:
    """Build the Skolem term for the given enclosing universals."""
    if universals:
        return f"f{counter}({','.join(universals)})"
    return f"c{counter}"


class Skolemizer(ast.Visitor):
    """Replaces existential variables with Skolem functions and constants.

    Visit methods take the enclosing universal variables (outermost first)
    and the next free counter value, and return the rewritten node with the
    counter value after the subtree.

    Attributes:
        _steps: Trace of the transformation in progress
    """

    def __init__(self):
        self._steps: List[TraceEntry] = []

    def transform(self, root: ast.Formula, counter: int = 1) -> PassResult:
        """Remove every existential quantifier of root.

        Args:
            root: Formula in prenex form
            counter: Number of the first Skolem symbol

        Returns:
            Existential-free formula and one trace message per elimination
        """
        logger = get_logger()
        logger.debug(f"Skolemizing {type(root).__name__}")

        self._steps = []
        result, counter = root.accept(self, (), counter)

        logger.debug(f"Skolemization complete, next Skolem index {counter}")
        return PassResult(result, tuple(self._steps))

    def visit_atom(self, n: ast.Atom, universals: Tuple[str, ...], counter: int) -> Visited:
        return n, counter

    def visit_not(self, n: ast.Not, universals: Tuple[str, ...], counter: int) -> Visited:
        operand, counter = n.operand.accept(self, universals, counter)
        return ast.Not(operand), counter

    def _binary(self, n, universals: Tuple[str, ...], counter: int):
        left, counter = n.left.accept(self, universals, counter)
        right, counter = n.right.accept(self, universals, counter)
        return type(n)(left, right), counter

    def visit_and(self, n: ast.And, universals: Tuple[str, ...], counter: int) -> Visited:
        return self._binary(n, universals, counter)

    def visit_or(self, n: ast.Or, universals: Tuple[str, ...], counter: int) -> Visited:
        return self._binary(n, universals, counter)

    def visit_implies(self, n: ast.Implies, universals: Tuple[str, ...], counter: int) -> Visited:
        return self._binary(n, universals, counter)

    def visit_iff(self, n: ast.Iff, universals: Tuple[str, ...], counter: int) -> Visited:
        return self._binary(n, universals, counter)

    def visit_forall(self, n: ast.ForAll, universals: Tuple[str, ...], counter: int) -> Visited:
        body, counter = n.body.accept(self, universals + (n.variable,), counter)
        return ast.ForAll(n.variable, body), counter

    def visit_exists(self, n: ast.Exists, universals: Tuple[str, ...], counter: int) -> Visited:
        """Drop the quantifier, replacing its variable with a Skolem term."""
        term = skolem_term(universals, counter)

        get_logger().rewrite_applied("skolem", n.variable, term)
        self._steps.append(
            TraceEntry.note(rf"\exists {n.variable} substituído por {term}")
        )

        body = substitute(n.body, n.variable, term)
        return body.accept(self, universals, counter + 1)


def skolemize(formula: ast.Formula) -> PassResult:
    """Eliminate the existential quantifiers of a prenex formula."""
    return Skolemizer().transform(formula)
