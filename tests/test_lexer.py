'''
Infix lexer tests
'''

import regex

from infix.tokens import Kind
from infix.util import LexError

from pytest import raises, mark


def kinds(tokens):
    return [token.kind for token in tokens]


def test_empty(lexer):
    assert lexer.lex('') == []
    assert lexer.lex(' \t\r ') == []


def test_operators(lexer):
    tokens = lexer.lex('1+2-3*4/5%6^7')
    assert kinds(tokens) == [Kind.INTEGER, Kind.ADD,
                             Kind.INTEGER, Kind.SUBTRACT,
                             Kind.INTEGER, Kind.MULTIPLY,
                             Kind.INTEGER, Kind.DIVIDE,
                             Kind.INTEGER, Kind.MODULO,
                             Kind.INTEGER, Kind.POWER,
                             Kind.INTEGER]
    precedences = {token.text: token.precedence
                   for token
                   in tokens
                   if token.isoperator}
    assert precedences == {'+': 2, '-': 2, '*': 3, '/': 3, '%': 6, '^': 4}


def test_multiply_aliases(lexer):
    tokens = lexer.lex('2x3X4*5')
    assert kinds(tokens)[1::2] == [Kind.MULTIPLY] * 3


def test_associativity(lexer):
    right = {token.text
             for token
             in lexer.lex('-1+2-3*4/5%6^7')
             if token.right_associative}
    assert right == {'m', '^'}


def test_parentheses(lexer):
    left, right = lexer.lex('()')
    assert (left.kind, left.precedence) == (Kind.LEFT_PAREN, 9)
    assert (right.kind, right.precedence) == (Kind.RIGHT_PAREN, 0)
    assert not left.right_associative and not right.right_associative
    assert not left.unary and not right.unary


@mark.parametrize('expression, index', [
    ('-3', 0),
    ('2*-3', 2),
    ('(-3)', 1),
    ('2^-3', 2),
    ('--3', 1),
])
def test_unary_minus(lexer, expression, index):
    token = lexer.lex(expression)[index]
    assert token.kind is Kind.SUBTRACT
    assert token.unary
    assert token.text == 'm'
    assert token.precedence == 5
    assert token.right_associative


@mark.parametrize('expression, index', [
    ('3-2', 1),
    ('(3)-2', 3),
    ('3 - 2', 1),
])
def test_binary_minus(lexer, expression, index):
    token = lexer.lex(expression)[index]
    assert token.kind is Kind.SUBTRACT
    assert not token.unary
    assert token.text == '-'
    assert token.precedence == 2
    assert not token.right_associative


def test_unary_minus_looks_at_tokens_not_spaces(lexer):
    tokens = lexer.lex('2 \t - 3')
    assert not tokens[1].unary


def test_integer(lexer):
    token, = lexer.lex('42')
    assert token.kind is Kind.INTEGER
    assert token.int_value == 42
    assert token.float_value is None
    assert token.value == 42.0


def test_float(lexer):
    token, = lexer.lex('4.25')
    assert token.kind is Kind.FLOAT
    assert token.float_value == 4.25
    assert token.int_value is None


def test_leading_dot(lexer):
    token, = lexer.lex('.5')
    assert token.kind is Kind.FLOAT
    assert token.value == 0.5


def test_trailing_dot(lexer):
    token, = lexer.lex('1.')
    assert token.kind is Kind.FLOAT
    assert token.value == 1.0


def test_underscores(lexer):
    token, = lexer.lex('1_000_000')
    assert token.int_value == 1000000
    # Source text kept for diagnostics
    assert token.text == '1_000_000'
    token, = lexer.lex('1_000.5_5')
    assert token.value == 1000.55
    token, = lexer.lex('.5_0')
    assert token.value == 0.5


def test_last_character(lexer):
    '''
    No sentinel needed: the last character is neither dropped nor repeated.
    '''
    assert [t.text for t in lexer.lex('1+2')] == ['1', '+', '2']
    assert [t.text for t in lexer.lex('(1)')] == ['(', '1', ')']
    assert [t.text for t in lexer.lex('7')] == ['7']
    assert [t.text for t in lexer.lex('12 ')] == ['12']


def test_positions(lexer):
    assert [t.position for t in lexer.lex(' 12 + .5')] == [1, 4, 6]


def test_double_dot(lexer):
    with raises(LexError, match=regex.escape("Redefinition of float: '1..2'")):
        lexer.lex('1..2')
    with raises(LexError, match='Redefinition of float'):
        lexer.lex('1.2.3')
    with raises(LexError, match='Redefinition of float'):
        lexer.lex('.5.')


def test_dangling_dot(lexer):
    with raises(LexError, match=regex.escape("Unexpected: '.'")):
        lexer.lex('1+.')
    with raises(LexError, match=regex.escape("Unexpected: '.'")):
        lexer.lex('._5')


@mark.parametrize('char', ['a', '=', '\n', '[', 'y', '&'])
def test_unexpected(lexer, char):
    with raises(LexError, match=regex.escape("Unexpected: '{}'".format(char))):
        lexer.lex('1+' + char)


def test_unrepresentable(lexer):
    with raises(LexError, match='Cannot convert'):
        lexer.lex('1' * 400 + '.0')
    with raises(LexError, match='Cannot convert'):
        lexer.lex('1' * 400)


def test_stateless(lexer):
    first = lexer.lex('-1')
    lexer.lex('(2+')
    assert lexer.lex('-1') == first
    assert first[0].unary
