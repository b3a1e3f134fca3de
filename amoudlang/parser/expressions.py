"""
Expression parsing utilities for Amoud.

These functions operate on a `amoudlang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, maintaining
operator precedence and left associativity. From loosest to tightest:
comparison, additive, multiplicative, primary.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING
from amoudlang.operations import Op

if TYPE_CHECKING:
    from amoudlang.parser import Parser


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> tuple:
    """Parse a literal, variable, or parenthesized expression."""
    tok = parser.curr_token

    if tok.type == 'NUMBER':
        parser.eat('NUMBER')
        return ('number', tok.value)

    if tok.type == 'STRING':
        parser.eat('STRING')
        return ('string', tok.value)

    if tok.type in ('TRUE', 'FALSE'):
        value = tok.type == 'TRUE'
        parser.eat(tok.type)
        return ('bool', value)

    if tok.type == 'ID':
        parser.eat('ID')
        return ('ident', tok.value)

    if tok.type == 'LPAREN':
        parser.eat('LPAREN')
        node = parser.expr()
        parser.eat('RPAREN')
        return node

    raise parser.syntax_error(
        f"Unexpected token: {parser.describe(tok)} "
        f"in {parser.source_file}",
        tok,
    )


def parse_multiplicative(parser: 'Parser') -> tuple:
    """Parse multiplication and division expressions."""
    result = parser.primary()
    while parser.curr_token.type in ('MUL', 'DIV'):
        op_tok = parser.curr_token
        parser.eat(op_tok.type)
        op_map = {
            'MUL': Op.MUL,
            'DIV': Op.DIV,
        }
        result = (op_map[op_tok.type], result, parser.primary())
    return result


def parse_additive(parser: 'Parser') -> tuple:
    """Parse addition and subtraction expressions."""
    result = parser.multiplicative()
    while parser.curr_token.type in ('PLUS', 'MINUS'):
        tok = parser.curr_token
        parser.eat(tok.type)
        op_map = {
            'PLUS': Op.ADD,
            'MINUS': Op.SUB,
        }
        result = (op_map[tok.type], result, parser.multiplicative())
    return result


def parse_comparison(parser: 'Parser') -> tuple:
    """Parse comparison expressions (<, >, <=, >=, ==, !=)."""
    result = parser.additive()
    while parser.curr_token.type in ('LT', 'GT', 'LE', 'GE', 'EQ', 'NE'):
        op_tok = parser.curr_token
        parser.eat(op_tok.type)
        op_map = {
            'LT': Op.LT,
            'GT': Op.GT,
            'LE': Op.LE,
            'GE': Op.GE,
            'EQ': Op.EQ,
            'NE': Op.NE,
        }
        result = (op_map[op_tok.type], result, parser.additive())
    return result


# ---- Entry point ----

def parse_expr(parser: 'Parser') -> tuple:
    """Parse an expression starting from the lowest-precedence operator."""
    return parser.comparison()
