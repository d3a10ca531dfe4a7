# syntax/lexer.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Lexical analyzer for LaTeX-flavored first-order formulas using SLY

"""Lexical analyzer for first-order formula strings.

This module breaks formulas written in LaTeX-flavored notation into tokens
for parser consumption. Operators are backslash commands, each accepting two
spellings; identifiers name atoms, predicates, functions and variables.

Supported Tokens:
- Quantifiers: \\forall, \\exists
- Connectives: \\neg \\lnot, \\land \\wedge, \\lor \\vee,
  \\rightarrow \\to, \\leftrightarrow \\iff
- Identifiers: [A-Za-z0-9_]+
- Punctuation: ( ) ,
- Whitespace and the thin-space escape \\, are ignored
"""

from sly import Lexer
from .exceptions import FormulaSyntaxError
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for first-order formula tokenization.

    Backslash commands are matched by a single rule and mapped onto operator
    token types through the COMMANDS table, so every alias of an operator
    yields the same token type. Unknown commands are rejected.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        COMMANDS: Mapping from command spelling to token type
    """

    # Valid token types for parser recognition
    tokens = {
        "FORALL",
        "EXISTS",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "IFF",
        "ID",
        "LPAREN",
        "RPAREN",
        "COMMA",
    }

    # Whitespace characters to ignore
    ignore = " \t\r\n"

    # LaTeX thin space, used for spacing in typeset input
    ignore_thinspace = r"\\,"

    COMMANDS = {
        r"\forall": "FORALL",
        r"\exists": "EXISTS",
        r"\neg": "NOT",
        r"\lnot": "NOT",
        r"\land": "AND",
        r"\wedge": "AND",
        r"\lor": "OR",
        r"\vee": "OR",
        r"\rightarrow": "IMPLIES",
        r"\to": "IMPLIES",
        r"\leftrightarrow": "IFF",
        r"\iff": "IFF",
    }

    # Punctuation tokens
    LPAREN = r"\("
    RPAREN = r"\)"
    COMMA = r","

    # Identifiers may start with a digit so that numeric constants are atoms too
    ID = r"[A-Za-z0-9_]+"

    @_(r"\\[A-Za-z]+")
    def COMMAND(self, t):
        """Map a backslash command onto its operator token type.

        Raises:
            FormulaSyntaxError: Command is not a known operator keyword
        """
        try:
            t.type = self.COMMANDS[t.value]
        except KeyError:
            raise FormulaSyntaxError(f"Unknown operator '{t.value}'", t.index)
        return t

    def error(self, t):
        """Handle illegal characters during tokenization.

        Called automatically when encountering characters that don't match
        any defined token patterns.

        Args:
            t: SLY token object containing error context

        Raises:
            FormulaSyntaxError: Always raised with character and offset
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        # Skip the illegal character
        self.index += 1

        raise FormulaSyntaxError(f"Illegal character '{illegal_char}'", error_pos)
