# syntax/ast_nodes.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Abstract Syntax Tree node classes for first-order formula representation

"""AST node classes for representing parsed first-order formulas.

This module defines immutable and hashable node classes used to construct tree
representations of first-order logic formulas. Every rewrite pass of the CNF
derivation consumes one of these trees and builds a brand-new one; nodes are
never mutated after construction, so subtrees may be shared freely between
trees (for example the copied disjunct of a distributed disjunction).

Node Types:
    Atom: Atomic formula, an opaque text such as "p" or "P(x,f(y))"
    Not: Negation
    And, Or, Implies, Iff: Binary connectives
    ForAll, Exists: Quantifiers binding a single variable

All nodes support the visitor design pattern for traversal and transformation.
Visitor methods may take extra positional arguments, which lets passes thread
scoped state (variable mappings, enclosing universals) through the recursion.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol
from .serializer import serialize


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement a visit method for each of the eight
    node types; every rewrite pass is such a visitor.
    """

    def visit_atom(self, n: Atom, *args): ...

    def visit_not(self, n: Not, *args): ...

    def visit_and(self, n: And, *args): ...

    def visit_or(self, n: Or, *args): ...

    def visit_implies(self, n: Implies, *args): ...

    def visit_iff(self, n: Iff, *args): ...

    def visit_forall(self, n: ForAll, *args): ...

    def visit_exists(self, n: Exists, *args): ...


@dataclass(frozen=True, slots=True)
class Formula:
    """Base class for all AST nodes in first-order formulas.

    Provides the foundation for immutable expression trees with visitor pattern
    support. String conversion goes through the serializer, which renders the
    same LaTeX-flavored notation the parser accepts.
    """

    def accept(self, v: Visitor, *args):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node
            *args: Extra state forwarded to the visit method

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    @property
    def is_quantifier(self) -> bool:
        return isinstance(self, (ForAll, Exists))

    @property
    def is_literal(self) -> bool:
        """True for an atom or a negated atom."""
        return isinstance(self, Atom) or (
            isinstance(self, Not) and isinstance(self.operand, Atom)
        )

    def __str__(self) -> str:
        return serialize(self)


@dataclass(frozen=True, slots=True)
class Atom(Formula):
    """Atomic formula in a first-order formula.

    The text is opaque: a propositional letter ("p") or a predicate applied to
    terms ("P(x,f(y))"). Arguments are not parsed into sub-terms; variable
    substitution works on whole identifier tokens of the text.

    Attributes:
        text: The atom as written, with argument lists joined by commas
    """

    text: str

    def accept(self, v: Visitor, *args):
        return v.visit_atom(self, *args)


@dataclass(frozen=True, slots=True)
class Not(Formula):
    """Logical negation of a formula.

    Attributes:
        operand: The formula being negated
    """

    operand: Formula

    def accept(self, v: Visitor, *args):
        return v.visit_not(self, *args)


@dataclass(frozen=True, slots=True)
class And(Formula):
    """Logical conjunction of two formulas.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    left: Formula
    right: Formula

    def accept(self, v: Visitor, *args):
        return v.visit_and(self, *args)


@dataclass(frozen=True, slots=True)
class Or(Formula):
    """Logical disjunction of two formulas.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    left: Formula
    right: Formula

    def accept(self, v: Visitor, *args):
        return v.visit_or(self, *args)


@dataclass(frozen=True, slots=True)
class Implies(Formula):
    """Material implication, left -> right.

    Attributes:
        left: Antecedent
        right: Consequent
    """

    left: Formula
    right: Formula

    def accept(self, v: Visitor, *args):
        return v.visit_implies(self, *args)


@dataclass(frozen=True, slots=True)
class Iff(Formula):
    """Biconditional, left <-> right.

    Attributes:
        left: Left operand
        right: Right operand
    """

    left: Formula
    right: Formula

    def accept(self, v: Visitor, *args):
        return v.visit_iff(self, *args)


@dataclass(frozen=True, slots=True)
class ForAll(Formula):
    """Universal quantifier binding a single variable.

    Attributes:
        variable: Name of the bound variable
        body: Formula in the scope of the quantifier
    """

    variable: str
    body: Formula

    def accept(self, v: Visitor, *args):
        return v.visit_forall(self, *args)


@dataclass(frozen=True, slots=True)
class Exists(Formula):
    """Existential quantifier binding a single variable.

    Attributes:
        variable: Name of the bound variable
        body: Formula in the scope of the quantifier
    """

    variable: str
    body: Formula

    def accept(self, v: Visitor, *args):
        return v.visit_exists(self, *args)


BINARY_NODES = (And, Or, Implies, Iff)
QUANTIFIER_NODES = (ForAll, Exists)
