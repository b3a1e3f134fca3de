"""
Main parser entry point for Amoud.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`amoudlang.parser.expressions` and `amoudlang.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from amoudlang.exceptions import UnexpectedEOFError
from amoudlang.lexer import TOKEN_LITERALS

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """Amoud parser."""

    def __init__(self, tokens: list, file: str):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with an EOF token.
            file (str): The name of the script.
        """
        self.tokens = tokens
        self.position = 0
        self.curr_token = self.tokens[self.position]
        self.source_file = file

    def describe(self, token) -> str:
        """
        Describe a token for use in an error message.
        """
        if token.type == 'EOF':
            return "end of input (EOF)"
        return f"value '{token.value}' of type {token.type}"

    def syntax_error(self, message: str, token) -> SyntaxError:
        """
        Build the error for a parse failure at the given token.

        Running out of tokens yields an `UnexpectedEOFError`, which callers
        such as the REPL treat as incomplete input.
        """
        if token.type == 'EOF':
            return UnexpectedEOFError(message)
        return SyntaxError(message)

    def eat(self, token_type: str) -> None:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.

        Raises:
            SyntaxError: If the token does not match the expected type.
            UnexpectedEOFError: If the input ended instead.
        """
        if self.curr_token.type == token_type:
            self.position += 1
            self.curr_token = self.tokens[self.position]
        else:
            expd_value = TOKEN_LITERALS.get(token_type, token_type)
            raise self.syntax_error(
                f"Expected token '{expd_value}' of type {token_type}, "
                f"but got {self.describe(self.curr_token)} "
                f"in {self.source_file}",
                self.curr_token,
            )


    # Expression wrappers
    def primary(self) -> tuple:
        """
        Parse a literal, variable, or parenthesized group.
        """
        return _expr.parse_primary(self)

    def multiplicative(self) -> tuple:
        """
        Parse multiplication or division.
        """
        return _expr.parse_multiplicative(self)

    def additive(self) -> tuple:
        """
        Parse addition or subtraction.
        """
        return _expr.parse_additive(self)

    def comparison(self) -> tuple:
        """
        Parse a comparison expression using relational operators.
        """
        return _expr.parse_comparison(self)

    def expr(self) -> tuple:
        """
        Parse a full expression.
        """
        return _expr.parse_expr(self)


    # Statement wrappers
    def statement(self) -> tuple:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_declaration(self) -> tuple:
        """
        Parse a variable declaration statement.
        """
        return _stmt.parse_declaration(self)

    def parse_if(self) -> tuple:
        """
        Parse an 'if' conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_expr_statement(self) -> tuple:
        """
        Parse an expression terminated by a dot.
        """
        return _stmt.parse_expr_statement(self)


    def parse(self) -> list[tuple]:
        """
        Parse the full input into a list of statements.
        """
        statements = []
        while self.curr_token.type != 'EOF':
            statements.append(self.statement())
        return statements
