# normalization/__init__.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Rewrite passes from an arbitrary formula to Conjunctive Normal Form

"""Rewrite passes of the CNF derivation.

Each pass is a visitor over the immutable formula tree and returns a
PassResult: the new formula and the trace of rewrites that produced it.
The passes are meant to run in this order, each relying on the output of
the previous one:

    eliminate_implications   no ->, <->
    to_negation_normal_form  negations only over atoms
    standardize_variables    pairwise-distinct bound variables
    to_prenex_form           quantifiers as a leading prefix
    skolemize                no existential quantifiers
    to_cnf                   conjunction of disjunctions of literals
"""

from .trace import TraceEntry, PassResult
from .implications import ImplicationEliminator, eliminate_implications
from .negation import NegationNormalizer, to_negation_normal_form
from .standardize import VariableStandardizer, standardize_variables
from .prenex import PrenexExtractor, to_prenex_form
from .skolem import Skolemizer, skolemize
from .distribution import CNFDistributor, to_cnf
from .substitution import substitute

__all__ = [
    "TraceEntry",
    "PassResult",
    "ImplicationEliminator",
    "NegationNormalizer",
    "VariableStandardizer",
    "PrenexExtractor",
    "Skolemizer",
    "CNFDistributor",
    "eliminate_implications",
    "to_negation_normal_form",
    "standardize_variables",
    "to_prenex_form",
    "skolemize",
    "to_cnf",
    "substitute",
]
