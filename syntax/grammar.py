# syntax/grammar.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# LALR(1) grammar and parser for first-order formulas using SLY

"""First-order formula grammar implementation using SLY parser generator.

This module defines the grammar rules and parsing logic for LaTeX-flavored
first-order formulas. The parser constructs Abstract Syntax Trees from token
streams provided by the lexer, handling operator precedence and associativity.

Grammar Features:
- Implication and biconditional chains folded to the left
- Disjunction and conjunction, left-associative
- Prefix negation, arbitrarily nested
- Quantifiers in any operand position, whose body extends as far right
  as the enclosing group allows
- Atoms with nested, comma-separated argument lists kept as opaque text

Operator Precedence (lowest to highest):
- QUANT: quantifier body (fictitious token, see expr rules)
- IMPLIES, IFF: left-associative
- OR: left-associative
- AND: left-associative
- NOT: right-associative
"""

from sly import Parser
from .lexer import FormulaLexer
from .ast_nodes import Formula, Atom, Not, And, Or, Implies, Iff, ForAll, Exists
from .exceptions import FormulaSyntaxError, StructuralError

# Symbols after which the grammar demands an atom (or a parenthesized formula)
_OPERAND_EXPECTED = {"$end", "NOT", "AND", "OR", "IMPLIES", "IFF", "LPAREN"}

# Symbols after which the grammar demands a variable name
_VARIABLE_EXPECTED = {"FORALL", "EXISTS"}


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for first-order formulas.

    Implements grammar rules to construct AST nodes from token streams.
    Syntax errors are reported with the character offset of the offending
    token; missing identifiers are reported as structural errors.

    Attributes:
        tokens: Token types from FormulaLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = FormulaLexer.tokens

    precedence = (
        ("right", "QUANT"),
        ("left", "IMPLIES", "IFF"),
        ("left", "OR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    def __init__(self):
        self._text = ""

    @_("expr")
    def start(self, p) -> Formula:
        """Start rule: complete formula is a single expression."""
        return p.expr

    # Expression grammar rules
    @_("FORALL ID expr %prec QUANT")
    def expr(self, p) -> Formula:
        """Universal quantifier with its body."""
        return ForAll(p.ID, p.expr)

    @_("EXISTS ID expr %prec QUANT")
    def expr(self, p) -> Formula:
        """Existential quantifier with its body."""
        return Exists(p.ID, p.expr)

    @_("NOT expr")
    def expr(self, p) -> Formula:
        """Negation operator."""
        return Not(p.expr)

    @_("expr AND expr")
    def expr(self, p) -> Formula:
        """Conjunction operator."""
        return And(p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Formula:
        """Disjunction operator."""
        return Or(p.expr0, p.expr1)

    @_("expr IMPLIES expr")
    def expr(self, p) -> Formula:
        """Implication operator."""
        return Implies(p.expr0, p.expr1)

    @_("expr IFF expr")
    def expr(self, p) -> Formula:
        """Biconditional operator."""
        return Iff(p.expr0, p.expr1)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Formula:
        """Parenthesized expression for grouping."""
        return p.expr

    @_("atom")
    def expr(self, p) -> Formula:
        """Expression can be a single atom."""
        return p.atom

    # Atom grammar rules
    @_("ID")
    def atom(self, p) -> Atom:
        """Propositional letter or constant."""
        return Atom(p.ID)

    @_("ID LPAREN arguments RPAREN")
    def atom(self, p) -> Atom:
        """Predicate applied to terms, kept as opaque text."""
        return Atom(f"{p.ID}({','.join(p.arguments)})")

    @_("term")
    def arguments(self, p) -> list:
        return [p.term]

    @_("arguments COMMA term")
    def arguments(self, p) -> list:
        return p.arguments + [p.term]

    @_("ID")
    def term(self, p) -> str:
        return p.ID

    @_("ID LPAREN arguments RPAREN")
    def term(self, p) -> str:
        """Function application nested inside an argument list."""
        return f"{p.ID}({','.join(p.arguments)})"

    def parse(self, text: str) -> Formula:
        """Tokenize and parse text, rejecting input with no formula in it.

        Logging and wrapping of unexpected failures happen in syntax.parse.
        """
        self._text = text

        ast_result = super().parse(FormulaLexer().tokenize(text))
        if ast_result is None:
            raise FormulaSyntaxError("Empty formula", len(text))
        return ast_result

    def error(self, token):
        """Handle syntax errors during parsing.

        Called automatically by SLY when encountering tokens that don't
        match any grammar rule. The last symbol shifted onto the parser
        stack tells what the grammar was waiting for.

        Args:
            token: Problematic token or None for EOF errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token is None:
            if not self._text.strip():
                raise FormulaSyntaxError("Empty formula", 0)
            raise FormulaSyntaxError("Unexpected end of formula", len(self._text))

        symbols = [sym.type for sym in self.symstack] or ["$end"]
        previous = symbols[-1]

        if previous in _VARIABLE_EXPECTED:
            raise StructuralError("Expected variable after quantifier", token.value)

        # Inside an argument list the missing element is a term
        if previous == "COMMA" or symbols[-2:] == ["ID", "LPAREN"]:
            raise StructuralError("Expected term", token.value)

        if previous in _OPERAND_EXPECTED:
            raise StructuralError("Expected atom", token.value)

        raise FormulaSyntaxError(
            f"Unexpected token '{token.value}' (type: {token.type})", token.index
        )
