# tests/conftest.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Clausal test suites.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common formula fixtures and structural checks on formula trees
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages are importable before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import core
        import syntax
        import normalization
        import analysis
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


def iter_nodes(formula):
    """Yield every node of a formula tree in pre-order."""
    from syntax import ast_nodes as ast

    yield formula
    if isinstance(formula, ast.Not):
        yield from iter_nodes(formula.operand)
    elif isinstance(formula, ast.BINARY_NODES):
        yield from iter_nodes(formula.left)
        yield from iter_nodes(formula.right)
    elif isinstance(formula, ast.QUANTIFIER_NODES):
        yield from iter_nodes(formula.body)


@pytest.fixture
def nodes_of():
    """Provide the pre-order node iterator to tests."""
    return iter_nodes


@pytest.fixture
def basic_formula():
    """Provide a basic implication for simple tests."""
    return r"p \rightarrow q"


@pytest.fixture
def complex_formula():
    """Provide a quantified formula exercising every pass."""
    return (
        r"\forall x (P(x) \rightarrow \exists y (Q(x,y) \land \neg R(y)))"
        r" \land \exists x (S(x) \lor \forall y T(x,y))"
    )


# Formulas covering every connective, quantifier placement and atom shape
SAMPLE_FORMULAS = [
    r"p",
    r"\neg p",
    r"p \land q",
    r"p \lor q \land r",
    r"p \rightarrow q",
    r"p \leftrightarrow q",
    r"p \to q \iff r",
    r"\neg (p \lor q)",
    r"\neg \neg p",
    r"\forall x P(x)",
    r"\forall x \exists y P(x,y)",
    r"\exists x (P(x) \land \forall x Q(x))",
    r"(\forall x P(x)) \land Q(x)",
    r"\neg \forall x (P(x) \rightarrow \exists y R(x,y))",
    r"\forall x P(x) \lor \exists y Q(y)",
    r"(p \land q) \lor (r \land s)",
    r"\forall x (P(f(x,g(y))) \leftrightarrow Q(x))",
    r"\exists y \forall x (R(x,y) \lor \neg R(y,x))",
    r"(\exists x P(x)) \rightarrow (\forall y Q(y))",
    r"\forall x \forall y (P(x) \land Q(y) \rightarrow R(x,y) \lor S(y,x))",
]


@pytest.fixture(params=SAMPLE_FORMULAS)
def sample_formula(request):
    """Parametrized fixture over SAMPLE_FORMULAS."""
    return request.param
