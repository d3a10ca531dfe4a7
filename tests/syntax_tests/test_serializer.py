# tests/syntax_tests/test_serializer.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Test suite for formula serialization and round-trip parsing

"""Test suite for the serializer.

Verifies the rendered notation of every node type and that parsing the
serialized form of a parsed formula yields the same tree.
"""

import pytest
from syntax import parse, serialize
from syntax.ast_nodes import Atom, Not, And, Or, Implies, Iff, ForAll, Exists


class TestSerializer:
    """Rendering of formula trees."""

    RENDER_CASES = [
        (Atom("P(x,f(y))"), "P(x,f(y))"),
        (Not(Atom("p")), r"\neg p"),
        (And(Atom("p"), Atom("q")), r"(p \land q)"),
        (Or(Atom("p"), Atom("q")), r"(p \lor q)"),
        (Implies(Atom("p"), Atom("q")), r"(p \rightarrow q)"),
        (Iff(Atom("p"), Atom("q")), r"(p \leftrightarrow q)"),
        (ForAll("x", Atom("P(x)")), r"\forall x P(x)"),
        (Exists("y", Not(Atom("Q(y)"))), r"\exists y \neg Q(y)"),
        (Not(And(Atom("p"), Atom("q"))), r"\neg (p \land q)"),
        (
            Or(Not(Atom("p")), And(Atom("q"), Atom("r"))),
            r"(\neg p \lor (q \land r))",
        ),
        (
            ForAll("x", Exists("y", Atom("P(x,y)"))),
            r"\forall x \exists y P(x,y)",
        ),
    ]

    @pytest.mark.parametrize("tree, text", RENDER_CASES)
    def test_render(self, tree, text):
        """Each node type renders in prefix or fully parenthesized form."""
        assert serialize(tree) == text
        assert str(tree) == text

    def test_quantifier_as_left_operand_is_parenthesized(self):
        """A quantifier followed by more text in its group gets parentheses."""
        tree = And(ForAll("x", Atom("P(x)")), Atom("q"))

        assert str(tree) == r"((\forall x P(x)) \land q)"

    def test_quantifier_as_right_operand_is_bare(self):
        """A quantifier closing its group needs no parentheses."""
        tree = And(Atom("q"), ForAll("x", Atom("P(x)")))

        assert str(tree) == r"(q \land \forall x P(x))"

    def test_negated_quantifier_as_left_operand(self):
        """Negations keep the position of the quantifier they wrap."""
        tree = Or(Not(Exists("x", Atom("P(x)"))), Atom("q"))

        assert str(tree) == r"(\neg (\exists x P(x)) \lor q)"


class TestRoundTrip:
    """parse(serialize(parse(x))) == parse(x)."""

    def test_round_trip_parsing_integrity(self, sample_formula):
        """Parsing the serialized form rebuilds the same tree."""
        original_ast = parse(sample_formula)
        stringified = str(original_ast)
        reparsed_ast = parse(stringified)

        assert original_ast == reparsed_ast, (
            f"Round-trip parsing failed:\n"
            f"Original: {sample_formula}\n"
            f"Stringified: {stringified}"
        )

    def test_serialized_form_is_stable(self):
        """Serializing a reparsed tree gives the same text again."""
        text = str(parse(r"(\forall x P(x)) \land \neg \exists y Q(y) \lor r"))

        assert str(parse(text)) == text
