import pytest

from amoudlang.lexer import tokenize, Token
from amoudlang.parser import Parser
from amoudlang.operations import Op
from amoudlang.exceptions import UnexpectedEOFError
from amoudlang.tests.utils import parse_source


def test_declaration_ast():
    ast = parse_source("متغير س = ٥.")
    assert ast == [('decl', 'س', ('number', 5.0))]


def test_expression_statement_is_bare_expression():
    ast = parse_source("س + ١.")
    assert ast == [(Op.ADD, ('ident', 'س'), ('number', 1.0))]


def test_literals():
    ast = parse_source('١. "نص". نعم. لا. س.')
    assert ast == [
        ('number', 1.0),
        ('string', 'نص'),
        ('bool', True),
        ('bool', False),
        ('ident', 'س'),
    ]


def test_multiplication_binds_tighter_than_addition():
    ast = parse_source("٢ + ٣ * ٤.")
    assert ast == [
        (Op.ADD, ('number', 2.0), (Op.MUL, ('number', 3.0), ('number', 4.0)))
    ]


def test_parentheses_override_precedence():
    ast = parse_source("(٢ + ٣) * ٤.")
    assert ast == [
        (Op.MUL, (Op.ADD, ('number', 2.0), ('number', 3.0)), ('number', 4.0))
    ]


def test_additive_is_left_associative():
    ast = parse_source("١ - ٢ - ٣.")
    assert ast == [
        (Op.SUB, (Op.SUB, ('number', 1.0), ('number', 2.0)), ('number', 3.0))
    ]


def test_multiplicative_is_left_associative():
    ast = parse_source("٨ / ٤ / ٢.")
    assert ast == [
        (Op.DIV, (Op.DIV, ('number', 8.0), ('number', 4.0)), ('number', 2.0))
    ]


def test_comparison_is_loosest_and_left_leaning():
    ast = parse_source("١ + ١ < ٣ > ٢.")
    left = (Op.LT, (Op.ADD, ('number', 1.0), ('number', 1.0)), ('number', 3.0))
    assert ast == [(Op.LT, left, ('number', 2.0))]


def test_comparison_tokens_map_to_operators():
    # The lexer never produces these, but the grammar accepts them.
    tokens = [
        Token('NUMBER', 1.0), Token('GE', '>='), Token('NUMBER', 2.0),
        Token('EQ', '=='), Token('NUMBER', 3.0), Token('DOT', '.'),
        Token('EOF', None),
    ]
    ast = Parser(tokens, '<test>').parse()
    assert ast == [
        (Op.EQ, (Op.GE, ('number', 1.0), ('number', 2.0)), ('number', 3.0))
    ]


def test_if_without_else():
    ast = parse_source("لو نعم ف متغير س = ١. متغير ص = ٢.")
    assert ast == [
        ('if', ('bool', True), [
            ('decl', 'س', ('number', 1.0)),
            ('decl', 'ص', ('number', 2.0)),
        ], None)
    ]


def test_if_with_else_takes_rest_of_program():
    ast = parse_source("لو لا ف متغير س = ١. وإلا متغير س = ٢. متغير ص = ٣.")
    assert len(ast) == 1
    _, cond, then_branch, else_branch = ast[0]
    assert cond == ('bool', False)
    assert then_branch == [('decl', 'س', ('number', 1.0))]
    assert else_branch == [
        ('decl', 'س', ('number', 2.0)),
        ('decl', 'ص', ('number', 3.0)),
    ]


def test_empty_branches():
    assert parse_source("لو نعم ف") == [('if', ('bool', True), [], None)]
    assert parse_source("لو نعم ف وإلا") == [('if', ('bool', True), [], [])]


def test_else_binds_to_innermost_if():
    ast = parse_source("لو نعم ف لو لا ف ١. وإلا ٢.")
    outer = ast[0]
    assert outer[3] is None
    inner = outer[2][0]
    assert inner == ('if', ('bool', False), [('number', 1.0)], [('number', 2.0)])


def test_statements_in_order():
    ast = parse_source("متغير أ = ١. متغير ب = أ. ب.")
    assert [node[0] for node in ast] == ['decl', 'decl', 'ident']


def test_empty_program():
    assert parse_source("") == []


def test_missing_dot_after_expression():
    with pytest.raises(SyntaxError, match="Expected token '.' of type DOT"):
        parse_source("١ + ٢")


def test_missing_dot_reports_end_of_input():
    with pytest.raises(SyntaxError, match="EOF"):
        parse_source("متغير س = ١")


def test_missing_identifier_after_declaration_keyword():
    with pytest.raises(SyntaxError, match="Expected identifier after 'متغير'"):
        parse_source("متغير ١ = ٢.")


def test_missing_assignment_in_declaration():
    with pytest.raises(SyntaxError, match="of type ASSIGN"):
        parse_source("متغير س ٢.")


def test_missing_then_keyword():
    with pytest.raises(SyntaxError, match="of type THEN"):
        parse_source("لو نعم متغير س = ١.")


def test_missing_closing_paren():
    with pytest.raises(SyntaxError, match="of type RPAREN"):
        parse_source("(١ + ٢.")


def test_unexpected_token():
    with pytest.raises(SyntaxError, match="Unexpected token"):
        parse_source("+ ١.")


def test_stray_else_is_unexpected():
    with pytest.raises(SyntaxError, match="Unexpected token"):
        parse_source("وإلا ١.")


def test_assignment_symbol_is_not_equality():
    with pytest.raises(SyntaxError, match="of type DOT"):
        parse_source("١ = ١.")


def test_error_names_script():
    tokens = tokenize("١")
    with pytest.raises(SyntaxError, match="in script.عمود"):
        Parser(tokens, "script.عمود").parse()


def test_running_out_of_input_raises_unexpected_eof():
    for source in ("١ + ٢", "متغير", "متغير س", "لو نعم", "(١", "١ +"):
        with pytest.raises(UnexpectedEOFError):
            parse_source(source)


def test_eof_spelled_in_source_is_a_plain_syntax_error():
    with pytest.raises(SyntaxError) as exc_info:
        parse_source('متغير "EOF".')
    assert not isinstance(exc_info.value, UnexpectedEOFError)
    assert "'EOF' of type STRING" in str(exc_info.value)
