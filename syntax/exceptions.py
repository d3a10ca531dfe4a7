# syntax/exceptions.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for first-order formula parsing.

Parsing is the only stage of the derivation that can fail: every rewrite
pass operates on trees the parser already validated. All parser failures
derive from ParseError so callers can handle them with a single except
clause, while the two subclasses keep the offending position (for syntax
errors) or the missing element (for structural errors).
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when a formula cannot be parsed.

    Base class for every error produced by the lexer and the parser.
    """

    pass


class FormulaSyntaxError(ParseError):
    """Unexpected token, unmatched delimiter or premature end of input.

    Attributes:
        offset: Character offset in the source text where parsing failed
        description: Human-readable explanation of the failure
    """

    def __init__(self, description: str, offset: int):
        self.description = description
        self.offset = offset
        super().__init__(f"{description} at position {offset}")


class StructuralError(ParseError):
    """An atom or variable identifier was required but not found.

    Attributes:
        description: Human-readable explanation naming the missing element
        found: Text of the token found instead, if any
    """

    def __init__(self, description: str, found: Optional[str] = None):
        self.description = description
        self.found = found
        message = description if found is None else f"{description}, found '{found}'"
        super().__init__(message)


class FormulaTooDeepError(ParseError):
    """The formula nests deeper than the tree walkers can recurse."""

    def __init__(self):
        super().__init__("Formula nests too deeply to derive")
