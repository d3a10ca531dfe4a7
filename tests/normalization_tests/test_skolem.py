# tests/normalization_tests/test_skolem.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Skolemization test suite

"""Test suite for Skolemization.

Skolem terms depend on the universals enclosing the existential, and the
numbering follows the order in which existentials are met across the whole
formula.
"""

import pytest
from syntax import parse
from syntax import ast_nodes as ast
from normalization import Skolemizer, skolemize
from normalization.skolem import skolem_term
from utils.logger import get_logger


class TestSkolemTerm:
    """Construction of Skolem functions and constants."""

    def test_constant_without_universals(self):
        assert skolem_term((), 1) == "c1"

    def test_function_of_universals(self):
        assert skolem_term(("x",), 2) == "f2(x)"
        assert skolem_term(("x", "y"), 3) == "f3(x,y)"


class TestSkolemization:
    """Test cases for existential elimination."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    # Test cases: (input_formula, expected_output)
    TEST_CASES = [
        (r"\forall x \exists y P(x,y)", r"\forall x P(x,f1(x))"),
        (r"\exists x P(x)", r"P(c1)"),
        (r"\forall x \forall y \exists z P(x,y,z)", r"\forall x \forall y P(x,y,f1(x,y))"),
        (r"\exists x \forall y \exists z R(x,y,z)", r"\forall y R(c1,y,f2(y))"),
        (r"\exists x \exists y (P(x) \lor Q(y))", r"(P(c1) \lor Q(c2))"),
        # Counter is shared between siblings
        (
            r"\forall x ((\exists y P(x,y)) \land \exists z Q(x,z))",
            r"\forall x (P(x,f1(x)) \land Q(x,f2(x)))",
        ),
        # No existentials
        (r"\forall x P(x)", r"\forall x P(x)"),
    ]

    @pytest.mark.parametrize("input_formula, expected_output", TEST_CASES)
    def test_skolemization_correctness(self, input_formula, expected_output):
        """Existential variables are replaced by Skolem terms."""
        self.logger.debug(f"Skolemizing: {input_formula}")

        result, _ = skolemize(parse(input_formula))
        assert str(result) == expected_output

    def test_trace_messages(self):
        """One message per eliminated existential, in elimination order."""
        _, trace = skolemize(parse(r"\exists x \forall y \exists z R(x,y,z)"))

        assert [str(entry) for entry in trace] == [
            r"\exists x substituído por c1",
            r"\exists z substituído por f2(y)",
        ]

    def test_whole_token_replacement(self):
        """Only the existential variable itself is replaced."""
        result, _ = skolemize(parse(r"\exists x P(x,x1,max)"))

        assert result == ast.Atom("P(c1,x1,max)")

    def test_rebinding_quantifier_stops_substitution(self):
        """Occurrences bound by an inner quantifier keep their name."""
        formula = ast.Exists(
            "x", ast.And(ast.Atom("P(x)"), ast.ForAll("x", ast.Atom("Q(x)")))
        )
        result, _ = skolemize(formula)

        assert result == ast.And(ast.Atom("P(c1)"), ast.ForAll("x", ast.Atom("Q(x)")))

    def test_custom_start_counter(self):
        """Numbering starts from the given counter value."""
        result, _ = Skolemizer().transform(parse(r"\exists x P(x)"), counter=5)

        assert result == ast.Atom("P(c5)")

    def test_no_existentials_remain(self, sample_formula, nodes_of):
        """Skolemizing a prenex formula leaves no Exists node."""
        from core import run_pipeline

        result = run_pipeline(sample_formula).stage("skolemization").formula

        assert not any(isinstance(node, ast.Exists) for node in nodes_of(result))
