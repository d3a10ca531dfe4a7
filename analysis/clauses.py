# analysis/clauses.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Clause extraction and Horn classification

"""Splits a CNF formula into clauses and classifies them as Horn or not.

A clause is Horn when it has at most one positive literal. Positive literals
are counted at the top of the clause only: the count descends through
disjunctions, an atom counts one and a negation counts zero whatever it
negates.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple
from syntax import ast_nodes as ast
from utils.logger import get_logger


def get_matrix(formula: ast.Formula) -> ast.Formula:
    """Remove the quantifiers of formula, keeping their bodies.

    After Skolemization only the universal prefix is left; it is implicit in
    clausal form.
    """
    if formula.is_quantifier:
        return get_matrix(formula.body)
    if isinstance(formula, ast.Not):
        return ast.Not(get_matrix(formula.operand))
    if isinstance(formula, ast.BINARY_NODES):
        return type(formula)(get_matrix(formula.left), get_matrix(formula.right))
    return formula


def extract_clauses(matrix: ast.Formula) -> Tuple[ast.Formula, ...]:
    """Flatten the top-level conjunctions of matrix, left to right."""
    if isinstance(matrix, ast.And):
        return extract_clauses(matrix.left) + extract_clauses(matrix.right)
    return (matrix,)


def count_positive_literals(clause: ast.Formula) -> int:
    if isinstance(clause, ast.Or):
        return count_positive_literals(clause.left) + count_positive_literals(
            clause.right
        )
    if clause.is_literal:
        return int(isinstance(clause, ast.Atom))
    return 0


@dataclass(frozen=True)
class ClauseReport:
    """Horn classification of a single clause.

    Attributes:
        clause: The clause formula
        positive_literals: Number of un-negated atoms at the top of the clause
        is_horn: True when positive_literals is at most one
    """

    clause: ast.Formula
    positive_literals: int
    is_horn: bool

    def describe(self, index: int) -> str:
        verdict = "Sim" if self.is_horn else "Não"
        return (
            f"Cláusula {index}: {self.clause} → Literais positivos: "
            f"{self.positive_literals} → Horn? {verdict}"
        )


@dataclass(frozen=True)
class HornReport:
    """Horn classification of every clause of a formula.

    Attributes:
        clauses: One report per clause, in clause order
        is_horn: True when every clause is Horn
    """

    clauses: Tuple[ClauseReport, ...]
    is_horn: bool

    def lines(self) -> Iterator[str]:
        """Yield one line per clause, then the aggregate verdict."""
        for index, report in enumerate(self.clauses, start=1):
            yield report.describe(index)

        if self.is_horn:
            yield "Resultado final: Sim, todas as cláusulas são Horn"
        else:
            yield "Resultado final: Não, nem todas as cláusulas são Horn"

    def to_dict(self) -> dict:
        return {
            "is_horn": self.is_horn,
            "clauses": [
                {
                    "clause": str(report.clause),
                    "positive_literals": report.positive_literals,
                    "is_horn": report.is_horn,
                }
                for report in self.clauses
            ],
        }


def classify_horn(clause: ast.Formula) -> ClauseReport:
    positives = count_positive_literals(clause)
    return ClauseReport(clause, positives, positives <= 1)


def analyze_horn(formula: ast.Formula) -> HornReport:
    """Classify every clause of a CNF formula.

    Args:
        formula: Formula in CNF, possibly still under a universal prefix

    Returns:
        Per-clause reports and the aggregate verdict
    """
    clauses = extract_clauses(get_matrix(formula))
    reports = tuple(classify_horn(clause) for clause in clauses)
    is_horn = all(report.is_horn for report in reports)

    get_logger().horn_verdict(len(reports), is_horn)
    return HornReport(reports, is_horn)
