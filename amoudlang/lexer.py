"""Lexer for Amoud.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type and value.

Numbers are written with Arabic-Indic digits (``٠`` to ``٩``) and may contain
``,`` as a grouping separator, which is ignored when computing the value.
Identifiers are runs of Arabic letters; a fixed table turns some of them into
keywords (``متغير``, ``لو``, ``ف``, ``وإلا``, ``نعم``, ``لا``).

Characters that match no rule are dropped without an error, so the lexer
never raises.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from functools import reduce


ARABIC_DIGITS = '٠١٢٣٤٥٦٧٨٩'
GROUP_SEPARATOR = ','

# Letters that may start an identifier, plus the declension forms that may
# only continue one.
LETTERS = r'ا-يآأإ'
DECLENSION_LETTERS = r'ةى'

KEYWORDS = {
    'متغير': 'VAR',
    'لو': 'IF',
    'ف': 'THEN',
    'وإلا': 'ELSE',
    'نعم': 'TRUE',
    'لا': 'FALSE',
}

# Source spelling of each token type, used when reporting parse errors.
TOKEN_LITERALS = {
    **{kind: word for word, kind in KEYWORDS.items()},
    'PLUS': '+',
    'MINUS': '-',
    'MUL': '*',
    'DIV': '/',
    'LT': '<',
    'GT': '>',
    'LE': '<=',
    'GE': '>=',
    'EQ': '==',
    'NE': '!=',
    'LPAREN': '(',
    'RPAREN': ')',
    'ASSIGN': '=',
    'DOT': '.',
}


class Token:
    """
    Represents a lexical token with a type and value.
    """
    def __init__(self, type_, value):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (Any): The token value.
        """
        self.type = type_
        self.value = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.type, self.value))

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r})"


token_specification: list[tuple[str, str]] = [
    # Literals
    ('NUMBER',    rf'[{ARABIC_DIGITS}][{ARABIC_DIGITS}{GROUP_SEPARATOR}]*'),
    ('STRING',    r'"(?P<STRING_BODY>(?:[^"\\]|\\.)*\\?)"?'),

    # Identifiers and keywords
    ('ID',        rf'[{LETTERS}][{LETTERS}{DECLENSION_LETTERS}]*'),

    # Arithmetic operators
    ('PLUS',      r'\+'),
    ('MINUS',     r'-'),
    ('MUL',       r'\*'),
    ('DIV',       r'/'),

    # Comparison operators, '>' reads as '<'
    ('LT',        r'[<>]'),

    # Delimiters
    ('LPAREN',    r'\('),
    ('RPAREN',    r'\)'),
    ('ASSIGN',    r'='),
    ('DOT',       r'\.'),

    # Miscellaneous
    ('SKIP',      r'\s+'),
    ('MISMATCH',  r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification),
    re.DOTALL,
)
ESCAPE_REGEX = re.compile(r'\\(.?)', re.DOTALL)


def numeral_to_float(numeral: str) -> float:
    """
    Convert a run of Arabic-Indic digits to a float.

    Digits are folded left to right by place value. Grouping separators are
    skipped, so ``١,٢٣٤`` and ``١٢٣٤`` have the same value.
    """
    digits = [ARABIC_DIGITS.index(ch) for ch in numeral if ch in ARABIC_DIGITS]
    return reduce(lambda acc, digit: acc * 10.0 + digit, digits, 0.0)


def unescape(body: str) -> str:
    """
    Copy the character following each backslash verbatim.

    A lone backslash at the very end of the text is dropped.
    """
    return ESCAPE_REGEX.sub(r'\1', body)


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances terminated by an EOF token.
    """
    tokens = []

    for match_obj in TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()

        if kind in ('SKIP', 'MISMATCH'):
            continue

        if kind == 'NUMBER':
            tokens.append(Token('NUMBER', numeral_to_float(value)))
        elif kind == 'STRING':
            tokens.append(Token('STRING', unescape(match_obj.group('STRING_BODY'))))
        elif kind == 'ID':
            tokens.append(Token(KEYWORDS.get(value, 'ID'), value))
        else:
            tokens.append(Token(kind, value))

    tokens.append(Token('EOF', None))
    return tokens
