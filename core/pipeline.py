# core/pipeline.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Pipeline driver sequencing the rewrite passes

"""Runs the complete CNF derivation for a formula.

The passes run in a fixed order, each one consuming the formula produced by
the previous one:

    1. implication elimination
    2. negation normal form
    3. variable standardization
    4. prenex extraction
    5. Skolemization
    6. CNF distribution
    7. clausal form and Horn classification

A parse failure skips the whole pipeline; derive() reports it as a single
error stage, run_pipeline() lets it propagate.
"""

from __future__ import annotations
from typing import Callable, List, Tuple
from syntax import parse
from syntax.ast_nodes import Formula
from syntax.exceptions import ParseError, FormulaTooDeepError
from normalization import (
    PassResult,
    TraceEntry,
    eliminate_implications,
    to_negation_normal_form,
    standardize_variables,
    to_prenex_form,
    skolemize,
    to_cnf,
)
from analysis import get_matrix, analyze_horn
from .stage import Stage, Derivation
from utils.logger import get_logger

PASSES: Tuple[Tuple[str, str, Callable[[Formula], PassResult]], ...] = (
    ("implications", "Eliminação de Implicações e Bicondicionais", eliminate_implications),
    ("negation", "Aplicação das Leis de De Morgan", to_negation_normal_form),
    ("standardization", "Padronização de Variáveis Ligadas (α-renomeação)", standardize_variables),
    ("prenex", "Movendo Quantificadores para Forma Prenex", to_prenex_form),
    ("skolemization", "Skolemização", skolemize),
    ("cnf", "Conversão para Forma Normal Conjuntiva (FNC)", to_cnf),
)

CLAUSES_KEY = "clauses"
CLAUSES_TITLE = "Forma Clausal e Cláusulas de Horn"
ERROR_KEY = "error"
ERROR_TITLE = "Erro"


def run_pipeline(text: str) -> Derivation:
    """Parse text and run every pass on it.

    Args:
        text: Formula in LaTeX-flavored notation

    Returns:
        Derivation with the seven pipeline stages

    Raises:
        ParseError: The text is not a well-formed formula
    """
    logger = get_logger()
    logger.derivation_start(text)

    source = parse(text)
    current = source
    stages: List[Stage] = []

    for index, (key, title, transform) in enumerate(PASSES, start=1):
        current, trace = transform(current)
        stages.append(Stage(key, title, current, trace))
        logger.stage_completed(index, title, str(current), len(trace))

    matrix = get_matrix(current)
    horn = analyze_horn(current)

    trace = (
        TraceEntry.result("Removemos os quantificadores para obter a matriz", matrix),
        *horn.lines(),
    )
    stages.append(Stage(CLAUSES_KEY, CLAUSES_TITLE, matrix, trace))
    logger.stage_completed(len(stages), CLAUSES_TITLE, str(matrix), len(trace))

    return Derivation(text, source, tuple(stages), horn)


def derive(text: str) -> Derivation:
    """Run the derivation, turning a parse failure into an error stage.

    Args:
        text: Formula in LaTeX-flavored notation

    Returns:
        The full derivation, or a Derivation whose only stage is the error;
        formulas nested past the recursion limit fail with FormulaTooDeepError
    """
    try:
        return run_pipeline(text)
    except RecursionError:
        return _failed(text, FormulaTooDeepError())
    except ParseError as exc:
        return _failed(text, exc)


def _failed(text: str, exc: ParseError) -> Derivation:
    get_logger().parse_failed(text, str(exc))
    error_stage = Stage(ERROR_KEY, ERROR_TITLE, None, (str(exc),))
    return Derivation(text, None, (error_stage,), error=exc)
