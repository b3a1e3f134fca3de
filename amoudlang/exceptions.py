"""Errors.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class UndefinedVariableException(Exception):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, file=None):
        self.varname = varname
        message = f"Undefined variable '{varname}'"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class UnknownOpException(Exception):
    """
    Error for operators that do not apply to their operand kind.
    """
    def __init__(self, op, kind, expr=None, file=None):
        self.op = op
        self.kind = kind
        message = f"Unknown operation '{op}' for {kind}"
        if expr is not None:
            message += f": {expr}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class UnexpectedEOFError(SyntaxError):
    """
    Syntax error raised when the input ends before a construct is complete.
    """
