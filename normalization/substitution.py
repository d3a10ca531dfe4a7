# normalization/substitution.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Whole-token variable substitution inside opaque atom text

"""Variable substitution on opaque atom text.

Atoms keep their arguments as text, so renaming a variable or replacing it
with a Skolem term is a textual operation. Only whole identifier tokens are
replaced: renaming ``x`` leaves ``x1`` and ``max`` untouched. All names of a
mapping are replaced in one scan, so a replacement is never itself rewritten.
"""

import re
from typing import Mapping
from syntax.ast_nodes import Formula, Atom, Not, And, Or, Implies, Iff, ForAll, Exists

IDENTIFIER = re.compile(r"[A-Za-z0-9_]+")


def substitute_text(text: str, mapping: Mapping[str, str]) -> str:
    """Replace every identifier token of text found in mapping.

    Args:
        text: Opaque atom text such as "P(x,f(y))"
        mapping: Identifier to replacement text

    Returns:
        Text with mapped identifiers replaced
    """
    if not mapping:
        return text
    return IDENTIFIER.sub(lambda m: mapping.get(m.group(), m.group()), text)


def mentions(text: str, name: str) -> bool:
    """True when name occurs in text as a whole identifier token."""
    return any(m.group() == name for m in IDENTIFIER.finditer(text))


class _Substitution:
    """Visitor replacing one free variable throughout a formula.

    Substitution stops at a quantifier that rebinds the variable, since
    occurrences below it refer to that quantifier.
    """

    def __init__(self, variable: str, term: str):
        self.mapping = {variable: term}
        self.variable = variable

    def visit_atom(self, n: Atom) -> Formula:
        return Atom(substitute_text(n.text, self.mapping))

    def visit_not(self, n: Not) -> Formula:
        return Not(n.operand.accept(self))

    def visit_and(self, n: And) -> Formula:
        return And(n.left.accept(self), n.right.accept(self))

    def visit_or(self, n: Or) -> Formula:
        return Or(n.left.accept(self), n.right.accept(self))

    def visit_implies(self, n: Implies) -> Formula:
        return Implies(n.left.accept(self), n.right.accept(self))

    def visit_iff(self, n: Iff) -> Formula:
        return Iff(n.left.accept(self), n.right.accept(self))

    def visit_forall(self, n: ForAll) -> Formula:
        if n.variable == self.variable:
            return n
        return ForAll(n.variable, n.body.accept(self))

    def visit_exists(self, n: Exists) -> Formula:
        if n.variable == self.variable:
            return n
        return Exists(n.variable, n.body.accept(self))


def substitute(formula: Formula, variable: str, term: str) -> Formula:
    """Replace free occurrences of variable in formula by term.

    Args:
        formula: Formula to rewrite
        variable: Variable name to replace
        term: Replacement text, e.g. a Skolem term "f1(x)"

    Returns:
        New formula with the substitution applied
    """
    return formula.accept(_Substitution(variable, term))
