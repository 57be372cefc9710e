from collections import namedtuple
from enum import Enum


class Kind(Enum):
    LEFT_PAREN = 'left-paren'
    RIGHT_PAREN = 'right-paren'
    ADD = 'add'
    SUBTRACT = 'subtract'
    MULTIPLY = 'multiply'
    DIVIDE = 'divide'
    MODULO = 'modulo'
    POWER = 'power'
    INTEGER = 'integer-literal'
    FLOAT = 'float-literal'


OPERATORS = frozenset({
    Kind.ADD,
    Kind.SUBTRACT,
    Kind.MULTIPLY,
    Kind.DIVIDE,
    Kind.MODULO,
    Kind.POWER,
})
NUMBERS = frozenset({Kind.INTEGER, Kind.FLOAT})


class Token(namedtuple('Token', ['kind',
                                 'text',
                                 'int_value',
                                 'float_value',
                                 'precedence',
                                 'right_associative',
                                 'unary',
                                 'position'])):
    '''
    Lexeme handed from the lexer to the shunting yard and the evaluator.

    Immutable. Which of int_value/float_value means anything is decided by
    kind alone; read numbers through value rather than the raw fields.
    '''
    __slots__ = ()

    @classmethod
    def operator(cls, kind, text, precedence, right_associative=False,
                 unary=False, position=None):
        '''
        Make an operator or parenthesis token.
        '''
        return cls(kind, text, None, None, precedence, right_associative,
                   unary, position)

    @classmethod
    def number(cls, kind, text, value, position=None):
        '''
        Make an integer or float literal token.
        '''
        if kind is Kind.INTEGER:
            return cls(kind, text, value, None, 0, False, False, position)
        elif kind is Kind.FLOAT:
            return cls(kind, text, None, value, 0, False, False, position)
        raise ValueError('Not a number kind: {}'.format(kind))

    @property
    def isnumber(self):
        return self.kind in NUMBERS

    @property
    def isoperator(self):
        return self.kind in OPERATORS

    @property
    def value(self):
        '''
        Numeric value, integers widened to float.
        '''
        if self.kind is Kind.INTEGER:
            return float(self.int_value)
        elif self.kind is Kind.FLOAT:
            return self.float_value
        raise TypeError('{} has no numeric value'.format(self))

    def __str__(self):
        if self.kind is Kind.INTEGER:
            shown = self.int_value
        elif self.kind is Kind.FLOAT:
            shown = self.float_value
        else:
            shown = '-'
        return '({!r}, {}, [{} : {}])'.format(self.text, shown,
                                              self.precedence,
                                              self.kind.value)
