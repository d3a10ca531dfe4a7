# tests/normalization_tests/test_prenex.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Prenex form extraction test suite

"""Test suite for moving quantifiers to the front of a formula."""

import pytest
from syntax import parse
from syntax import ast_nodes as ast
from normalization import (
    eliminate_implications,
    to_negation_normal_form,
    standardize_variables,
    to_prenex_form,
)
from utils.logger import get_logger


def _strip_prefix(formula):
    while isinstance(formula, ast.QUANTIFIER_NODES):
        formula = formula.body
    return formula


class TestPrenexExtraction:
    """Test cases for prenex extraction."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    # Test cases: (input_formula, expected_output)
    TEST_CASES = [
        (
            r"(\forall x P(x)) \land (\exists y Q(y))",
            r"\forall x \exists y (P(x) \land Q(y))",
        ),
        # Pre-order: outer quantifier, then those inside it, then siblings
        (
            r"(\exists x (P(x) \lor \forall y Q(y))) \land (\forall z R(z))",
            r"\exists x \forall y \forall z ((P(x) \lor Q(y)) \land R(z))",
        ),
        (
            r"p \lor \forall x P(x)",
            r"\forall x (p \lor P(x))",
        ),
        (
            r"\neg p \land \exists y \forall z R(y,z)",
            r"\exists y \forall z (\neg p \land R(y,z))",
        ),
        # Already prenex
        (r"\forall x \exists y P(x,y)", r"\forall x \exists y P(x,y)"),
    ]

    @pytest.mark.parametrize("input_formula, expected_output", TEST_CASES)
    def test_prenex_correctness(self, input_formula, expected_output):
        """Quantifiers are hoisted in pre-order, outermost first."""
        self.logger.debug(f"Extracting prefix of: {input_formula}")

        result, _ = to_prenex_form(parse(input_formula))
        assert str(result) == expected_output

    def test_trace_shows_result(self):
        """The trace holds a single entry with the prenex formula."""
        result, trace = to_prenex_form(parse(r"(\forall x P(x)) \land q"))

        assert len(trace) == 1
        assert not trace[0].is_equivalence
        assert trace[0].after == result
        assert str(trace[0]) == (
            r"Movemos os quantificadores para frente: \forall x (P(x) \land q)"
        )

    def test_quantifier_free_formula_unchanged(self):
        """Without quantifiers the formula is returned as is, with no trace."""
        formula = parse(r"(p \lor q) \land \neg r")
        result, trace = to_prenex_form(formula)

        assert result == formula
        assert trace == ()

    def test_quantifiers_form_leading_prefix(self, sample_formula, nodes_of):
        """After the first four passes, no quantifier is left in the matrix."""
        formula = parse(sample_formula)
        for transform in (
            eliminate_implications,
            to_negation_normal_form,
            standardize_variables,
            to_prenex_form,
        ):
            formula, _ = transform(formula)

        matrix = _strip_prefix(formula)
        assert not any(
            isinstance(node, ast.QUANTIFIER_NODES) for node in nodes_of(matrix)
        ), str(formula)
