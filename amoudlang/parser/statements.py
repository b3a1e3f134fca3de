"""
Statement parsing utilities for Amoud.

These functions operate on a `amoudlang.parser.parser.Parser` instance and
handle the statement forms of the language: variable declarations,
conditionals and expression statements.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from amoudlang.lexer import TOKEN_LITERALS

if TYPE_CHECKING:
    from amoudlang.parser import Parser


def parse_statement(parser: 'Parser') -> tuple:
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        tuple: representing the AST node.
    """
    tok = parser.curr_token
    if tok.type == 'VAR':
        return parser.parse_declaration()
    elif tok.type == 'IF':
        return parser.parse_if()
    return parser.parse_expr_statement()


def parse_declaration(parser: 'Parser') -> tuple:
    """
    Parse a `متغير` variable declaration.

    Syntax:
        متغير <identifier> = <expression> .

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('decl', name, expr)
    """
    parser.eat('VAR')
    id_tok = parser.curr_token
    if id_tok.type != 'ID':
        raise parser.syntax_error(
            f"Expected identifier after '{TOKEN_LITERALS['VAR']}', "
            f"but got {parser.describe(id_tok)} "
            f"in {parser.source_file}",
            id_tok,
        )
    parser.eat('ID')
    parser.eat('ASSIGN')
    expr_node = parser.expr()
    parser.eat('DOT')
    return ('decl', id_tok.value, expr_node)


def parse_if(parser: 'Parser') -> tuple:
    """
    Parse a conditional `لو` statement with an optional `وإلا` branch.

    There is no block terminator: the then-branch runs until `وإلا` or the
    end of input, and the else-branch takes every remaining statement.

    Syntax:
        لو <condition> ف <statement>* [وإلا <statement>*]

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('if', condition, then_statements, else_statements | None)
    """
    parser.eat('IF')
    condition = parser.expr()
    parser.eat('THEN')

    then_branch = []
    while parser.curr_token.type not in ('ELSE', 'EOF'):
        then_branch.append(parser.statement())

    else_branch = None
    if parser.curr_token.type == 'ELSE':
        parser.eat('ELSE')
        else_branch = []
        while parser.curr_token.type != 'EOF':
            else_branch.append(parser.statement())

    return ('if', condition, then_branch, else_branch)


def parse_expr_statement(parser: 'Parser') -> tuple:
    """
    Parse an expression statement. The node is the bare expression.

    Syntax:
        <expression> .
    """
    expr_node = parser.expr()
    parser.eat('DOT')
    return expr_node
