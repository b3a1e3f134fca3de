"""Shared definitions for AST operation identifiers.

This module centralizes the operator constants used by the parser and
interpreter to label binary operation nodes in the abstract syntax tree.
Keeping them in one place prevents the two components from drifting apart.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported binary operators.
    """

    # Arithmetic
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"

    # Boolean, no surface syntax produces these yet
    AND = "and"
    OR = "or"

    # Comparison
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GE = "ge"
    LT = "lt"
    LE = "le"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


ARITHMETIC_OPS = (Op.ADD, Op.SUB, Op.MUL, Op.DIV)
COMPARISON_OPS = (Op.EQ, Op.NE, Op.GT, Op.GE, Op.LT, Op.LE)
BOOLEAN_OPS = (Op.AND, Op.OR)
BINARY_OPS = ARITHMETIC_OPS + BOOLEAN_OPS + COMPARISON_OPS

# Source spelling of each operator, used when rendering expressions.
SYMBOLS = {
    Op.ADD: '+',
    Op.SUB: '-',
    Op.MUL: '*',
    Op.DIV: '/',
    Op.AND: 'and',
    Op.OR: 'or',
    Op.EQ: '==',
    Op.NE: '!=',
    Op.GT: '>',
    Op.GE: '>=',
    Op.LT: '<',
    Op.LE: '<=',
}


__all__ = ["Op", "ARITHMETIC_OPS", "COMPARISON_OPS", "BOOLEAN_OPS", "BINARY_OPS", "SYMBOLS"]
