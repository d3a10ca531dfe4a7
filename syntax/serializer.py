# syntax/serializer.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Renders formula trees back to LaTeX-flavored notation

"""Serializer from formula trees to the textual notation the parser accepts.

Binary connectives are always parenthesized, negation and quantifiers use
prefix notation:

    (\\neg p \\lor q)
    \\forall x (P(x) \\rightarrow \\exists y R(x,y))

A quantifier body extends as far right as its enclosing group, so a quantifier
that is followed by more text inside the same group (the left operand of a
binary connective, possibly under negations) is wrapped in parentheses:

    ((\\forall x P(x)) \\land q)

With that rule parse(serialize(f)) == f for every tree the parser produces.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ast_nodes import Formula

OPERATORS = {
    "and": r"\land",
    "or": r"\lor",
    "implies": r"\rightarrow",
    "iff": r"\leftrightarrow",
}


class _Serializer:
    """Visitor producing notation text.

    Every visit method takes a ``tail`` flag: True when nothing follows the
    node inside its enclosing group.
    """

    def visit_atom(self, n, tail: bool) -> str:
        return n.text

    def visit_not(self, n, tail: bool) -> str:
        return rf"\neg {n.operand.accept(self, tail)}"

    def _binary(self, n, operator: str) -> str:
        left = n.left.accept(self, False)
        right = n.right.accept(self, True)
        return f"({left} {OPERATORS[operator]} {right})"

    def visit_and(self, n, tail: bool) -> str:
        return self._binary(n, "and")

    def visit_or(self, n, tail: bool) -> str:
        return self._binary(n, "or")

    def visit_implies(self, n, tail: bool) -> str:
        return self._binary(n, "implies")

    def visit_iff(self, n, tail: bool) -> str:
        return self._binary(n, "iff")

    def _quantifier(self, keyword: str, n, tail: bool) -> str:
        text = f"{keyword} {n.variable} {n.body.accept(self, True)}"
        return text if tail else f"({text})"

    def visit_forall(self, n, tail: bool) -> str:
        return self._quantifier(r"\forall", n, tail)

    def visit_exists(self, n, tail: bool) -> str:
        return self._quantifier(r"\exists", n, tail)


_SERIALIZER = _Serializer()


def serialize(formula: Formula) -> str:
    """Render a formula tree in LaTeX-flavored notation.

    Args:
        formula: Root of the tree to render

    Returns:
        Notation text that parses back to an equal tree
    """
    return formula.accept(_SERIALIZER, True)
