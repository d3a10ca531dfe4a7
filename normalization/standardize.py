# normalization/standardize.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Variable standardization (alpha-renaming of bound variables)

"""Renames bound variables so that every quantifier binds a distinct name.

Prenex extraction hoists quantifiers out of their subformulas, which is only
sound when no two quantifiers bind the same name. This pass walks the tree
threading two pieces of state:

    used     names bound so far anywhere in the walk. It flows down into a
             subtree and back out of it, so the right operand of a binary
             node sees the names bound in the left operand.
    mapping  original name -> current name for the quantifiers enclosing the
             node. It is scoped: both operands of a binary node start from
             the mapping of their parent.

A quantifier whose name is already used is renamed to the name followed by
the smallest positive integer that is not used yet (x, x1, x2, ...). Atoms
get the mapping applied to their whole identifier tokens.
"""

from __future__ import annotations
from typing import AbstractSet, Dict, List, Mapping, Tuple
from syntax import ast_nodes as ast
from .substitution import substitute_text, mentions
from .trace import PassResult, TraceEntry
from utils.logger import get_logger

Used = AbstractSet[str]
Visited = Tuple[ast.Formula, Used]


def fresh_name(name: str, used: Used) -> str:
    """Return name suffixed with the smallest positive integer not in used."""
    i = 1
    while f"{name}{i}" in used:
        i += 1
    return f"{name}{i}"


class VariableStandardizer(ast.Visitor):
    """Gives every quantifier of a formula its own variable name.

    Visit methods take the current used set and mapping, and return the
    rewritten node together with the used set after the subtree.

    Attributes:
        _steps: Trace of the transformation in progress
    """

    def __init__(self):
        self._steps: List[TraceEntry] = []

    def transform(self, root: ast.Formula) -> PassResult:
        """Rename the bound variables of root apart.

        Args:
            root: Formula to standardize

        Returns:
            Formula with pairwise-distinct bound variables, with one trace
            message per rename and per atom rewritten
        """
        logger = get_logger()
        logger.debug(f"Standardizing bound variables of {type(root).__name__}")

        self._steps = []
        result, used = root.accept(self, frozenset(), {})

        logger.debug(f"Standardization complete, bound variables: {sorted(used)}")
        return PassResult(result, tuple(self._steps))

    def visit_atom(self, n: ast.Atom, used: Used, mapping: Mapping[str, str]) -> Visited:
        renames = {
            old: new
            for old, new in mapping.items()
            if old != new and mentions(n.text, old)
        }
        if not renames:
            return n, used

        for old, new in renames.items():
            self._steps.append(
                TraceEntry.note(f"Substituímos {old} por {new} em {n.text}")
            )
        return ast.Atom(substitute_text(n.text, renames)), used

    def visit_not(self, n: ast.Not, used: Used, mapping: Mapping[str, str]) -> Visited:
        operand, used = n.operand.accept(self, used, mapping)
        return ast.Not(operand), used

    def _binary(self, n, used: Used, mapping: Mapping[str, str]):
        left, used = n.left.accept(self, used, mapping)
        right, used = n.right.accept(self, used, mapping)
        return type(n)(left, right), used

    def visit_and(self, n: ast.And, used: Used, mapping: Mapping[str, str]) -> Visited:
        return self._binary(n, used, mapping)

    def visit_or(self, n: ast.Or, used: Used, mapping: Mapping[str, str]) -> Visited:
        return self._binary(n, used, mapping)

    def visit_implies(self, n: ast.Implies, used: Used, mapping: Mapping[str, str]) -> Visited:
        return self._binary(n, used, mapping)

    def visit_iff(self, n: ast.Iff, used: Used, mapping: Mapping[str, str]) -> Visited:
        return self._binary(n, used, mapping)

    def _quantifier(self, n, used: Used, mapping: Mapping[str, str]):
        variable = n.variable
        if variable in used:
            variable = fresh_name(n.variable, used)
            get_logger().rewrite_applied("rename", n.variable, variable)
            self._steps.append(
                TraceEntry.note(
                    f"Renomeamos a variável ligada {n.variable} para {variable}"
                )
            )

        scope: Dict[str, str] = dict(mapping)
        scope[n.variable] = variable

        body, used = n.body.accept(self, used | {variable}, scope)
        return type(n)(variable, body), used

    def visit_forall(self, n: ast.ForAll, used: Used, mapping: Mapping[str, str]) -> Visited:
        return self._quantifier(n, used, mapping)

    def visit_exists(self, n: ast.Exists, used: Used, mapping: Mapping[str, str]) -> Visited:
        return self._quantifier(n, used, mapping)


def standardize_variables(formula: ast.Formula) -> PassResult:
    """Rename the bound variables of formula so they are pairwise distinct."""
    return VariableStandardizer().transform(formula)
