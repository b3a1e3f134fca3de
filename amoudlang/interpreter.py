"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
numeric arithmetic, comparisons, variable declarations and conditionals.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) in a top-down, recursive manner.
A statement list is executed via the `execute()` method, and every node, statements
included, is evaluated to a value by `evaluate()`. Both methods operate over structured
tuples representing nodes in the AST.

2. Environment
The interpreter maintains a single flat dictionary `vars` mapping variable names to
values. Declaring a name that already exists overwrites it. Conditional branches share
this environment with the statements around them.

3. Values
Numbers are Python floats, strings are str and booleans are bool. Numeric equality is
tolerant up to machine epsilon.

4. Error Handling
Runtime errors such as undefined variables, non-boolean conditions, mismatched operand
types and division by zero are surfaced as exceptions naming the offending expression
and the script. Execution stops at the first error; earlier declarations keep their
effect.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import sys

from amoudlang.exceptions import (
    UndefinedVariableException,
    UnknownOpException,
)
from amoudlang.lexer import KEYWORDS
from amoudlang.operations import Op, BINARY_OPS, SYMBOLS

EPSILON = sys.float_info.epsilon

KEYWORDS_BY_KIND = {kind: word for word, kind in KEYWORDS.items()}


def format_value(value) -> str:
    """
    Render a runtime value the way it is written in source.

    Parameters:
        value (float | str | bool): The value to render.

    Returns:
        str: Numbers as floats, strings quoted, booleans as keywords.
    """
    if isinstance(value, bool):
        return KEYWORDS_BY_KIND["TRUE"] if value else KEYWORDS_BY_KIND["FALSE"]
    if isinstance(value, str):
        return '"' + value.replace('\\', '\\\\').replace('"', '\\"') + '"'
    return repr(value)


def kind_of(value) -> str:
    """
    Return the language-level name of a value's type.
    """
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, str):
        return 'string'
    return 'number'


class Interpreter:
    """Tree-walk interpreter for Amoud."""

    def __init__(self, file: str):
        """Initialize the interpreter with an empty environment."""
        self.vars = {}
        self.file = file

    def _format_expr(self, node) -> str:
        """
        Convert AST back to a readable string for error messages.

        Args:
            node (tuple): An expression node, structured as a tuple.

        Returns:
            str: A string representation of the expression.
        """
        op = node[0]
        match op:
            case 'ident':
                return node[1]
            case 'number' | 'bool' | 'string':
                return format_value(node[1])
            case 'decl':
                return f"{KEYWORDS_BY_KIND['VAR']} {node[1]} = {self._format_expr(node[2])}"
            case 'if':
                return (
                    f"{KEYWORDS_BY_KIND['IF']} {self._format_expr(node[1])} "
                    f"{KEYWORDS_BY_KIND['THEN']} ..."
                )
            case _ if op in BINARY_OPS:
                return (
                    f"({self._format_expr(node[1])} {SYMBOLS[op]} "
                    f"{self._format_expr(node[2])})"
                )
            case _:
                name = op if isinstance(op, str) else op.value
                return f"<expr {name}>"

    def _describe(self, op, node) -> str:
        """
        Render the expression behind a failing operation.
        """
        return self._format_expr(node) if node is not None else str(op)

    def evaluate(self, node):
        """
        Recursively evaluate a node and return its computed value.

        Parameters:
            node (tuple): An AST node, structured as a tuple. The first element is the
                        node kind (e.g. 'number', 'decl' or an `Op` member), followed by
                        its operands.

        Returns:
            The evaluated result of the node.

        Raises:
            UndefinedVariableException: If a variable is referenced that has not been defined.
            UnknownOpException: If an operator does not apply to its operands.
            TypeError: If operand types differ or a condition is not a boolean.
            ZeroDivisionError: If a number is divided by zero.
            NotImplementedError: If a binary operator is applied to two strings.
            RuntimeError: If the node format is invalid.
        """
        op = node[0]

        # Literals
        if op in ('number', 'string', 'bool'):
            return node[1]

        # Variables
        if op == 'ident':
            varname = node[1]
            if varname not in self.vars:
                raise UndefinedVariableException(varname, self.file)
            return self.vars[varname]

        if op == 'decl':
            _, var_name, expr_node = node
            value = self.evaluate(expr_node)
            self.vars[var_name] = value
            return value

        # Binary operations
        if op in BINARY_OPS:
            lhs = self.evaluate(node[1])
            rhs = self.evaluate(node[2])
            return self.binary_op(op, lhs, rhs, node)

        if op == 'if':
            _, cond_node, then_branch, else_branch = node
            condition = self.evaluate(cond_node)
            if not isinstance(condition, bool):
                raise TypeError(
                    f"Condition must evaluate to a boolean, got {kind_of(condition)} "
                    f"from {self._format_expr(cond_node)} in {self.file}"
                )
            if condition:
                self.execute(then_branch)
            elif else_branch is not None:
                self.execute(else_branch)
            # An if statement evaluates to true whichever branch ran.
            return True

        raise RuntimeError(f"Invalid AST node: {node}")

    def binary_op(self, op: Op, lhs, rhs, node=None):
        """
        Apply a binary operator to two evaluated operands.

        Parameters:
            op (Op): The operator.
            lhs: The left operand value.
            rhs: The right operand value.
            node (tuple): The originating node, for error messages.

        Returns:
            float | bool: The result of the operation.
        """
        left_kind, right_kind = kind_of(lhs), kind_of(rhs)

        if left_kind == right_kind == 'number':
            match op:
                # Arithmetic
                case Op.ADD:
                    return lhs + rhs
                case Op.SUB:
                    return lhs - rhs
                case Op.MUL:
                    return lhs * rhs
                case Op.DIV:
                    if rhs == 0.0:
                        raise ZeroDivisionError(
                            f"Division by zero: {self._describe(op, node)} in {self.file}"
                        )
                    return lhs / rhs
                # Comparison
                case Op.LT:
                    return lhs < rhs
                case Op.GT:
                    return lhs > rhs
                case Op.LE:
                    return lhs <= rhs
                case Op.GE:
                    return lhs >= rhs
                case Op.EQ:
                    return abs(lhs - rhs) < EPSILON
                case Op.NE:
                    return abs(lhs - rhs) >= EPSILON
                case _:
                    raise UnknownOpException(op, 'numbers', self._describe(op, node), self.file)

        if left_kind == right_kind == 'boolean':
            match op:
                case Op.AND:
                    return lhs and rhs
                case Op.OR:
                    return lhs or rhs
                case _:
                    raise UnknownOpException(op, 'booleans', self._describe(op, node), self.file)

        if left_kind == right_kind == 'string':
            raise NotImplementedError(
                f"Operations on strings are not implemented: {self._describe(op, node)} in {self.file}"
            )

        raise TypeError(
            f"Type mismatch in binary operation between {left_kind} and {right_kind}: "
            f"{self._describe(op, node)} in {self.file}"
        )

    def execute(self, statements: list):
        """
        Executes a list of statements in order.

        Parameters:
            statements (list): A list of AST nodes.
        """
        for stmt in statements:
            self.evaluate(stmt)

