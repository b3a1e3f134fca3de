"""Amoud language.

A lexer, recursive descent parser and tree-walk interpreter for a small
imperative language written with Arabic keywords and Arabic-Indic numerals.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"
