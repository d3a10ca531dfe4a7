# syntax/__init__.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Formula parsing and serialization components for first-order logic

"""First-order formula parsing and serialization.

This module turns formulas written in a LaTeX-flavored notation into immutable
abstract syntax trees, and renders trees back to the same notation. The trees
are the input of the CNF derivation pipeline in ``normalization``.

Core Functions:
    parse: Converts formula strings into Abstract Syntax Trees
    serialize: Renders a tree back to notation text

Supported Logic:
    - Connectives \\neg, \\land, \\lor, \\rightarrow, \\leftrightarrow
      (each also accepted under an alias: \\lnot, \\wedge, \\vee, \\to, \\iff)
    - Quantifiers \\forall and \\exists, allowed in any operand position
    - Atoms with nested argument lists, e.g. P(x,f(y,z))

Grammar Features:
    - Left-folded implication chains, left-associative AND/OR
    - Right-associative prefix negation
    - Quantifier bodies extending as far right as the enclosing group
    - Syntax errors carrying the character offset of the failure

Example:
    >>> from syntax import parse
    >>> ast = parse(r"\\forall x (P(x) \\rightarrow Q(x))")
    >>> # Returns ForAll node whose body is an Implies node
"""

from .exceptions import (
    ParseError,
    FormulaSyntaxError,
    StructuralError,
    FormulaTooDeepError,
)
from .grammar import _FormulaParser
from .serializer import serialize
from utils.logger import get_logger


def parse(source: str):
    """Parse formula string into Abstract Syntax Tree representation.

    Uses a fresh parser instance for each invocation to ensure stateless
    operation.

    Args:
        source: Well-formed formula string to parse

    Returns:
        Root AST node representing the parsed formula structure

    Raises:
        FormulaSyntaxError: Unexpected token, unmatched parenthesis or
            premature end of input, with the character offset
        StructuralError: An atom or variable identifier is missing
        FormulaTooDeepError: Nesting exceeds the interpreter recursion limit
        ParseError: Any other failure while parsing

    Example:
        >>> ast = parse(r"p \\land q")
        >>> # Returns And node with two Atom nodes
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    parser = _FormulaParser()

    try:
        result = parser.parse(source)
        logger.debug(
            f"Formula parsed successfully into AST with type: {type(result).__name__}"
        )
        return result

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except RecursionError as exc:
        raise FormulaTooDeepError() from exc

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = [
    "parse",
    "serialize",
    "ParseError",
    "FormulaSyntaxError",
    "StructuralError",
    "FormulaTooDeepError",
]

__version__ = "1.0.0"
__description__ = "First-order formula parsing and serialization components"
