# analysis/__init__.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Clause analysis public API

from .clauses import (
    get_matrix,
    extract_clauses,
    count_positive_literals,
    classify_horn,
    analyze_horn,
    ClauseReport,
    HornReport,
)

__all__ = [
    "get_matrix",
    "extract_clauses",
    "count_positive_literals",
    "classify_horn",
    "analyze_horn",
    "ClauseReport",
    "HornReport",
]
