from functools import reduce
import operator

import regex

from .tokens import Kind, Token
from .util import LexError, wrap_user_errors


class Lexer:
    '''
    Lexer for infix arithmetic expressions.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state. Every call to lex starts from scratch.
    '''
    # Operators and parentheses: kind, precedence, right associative
    SYMBOLS = {
        '(': (Kind.LEFT_PAREN, 9, False),
        ')': (Kind.RIGHT_PAREN, 0, False),
        '+': (Kind.ADD, 2, False),
        '-': (Kind.SUBTRACT, 2, False),
        '/': (Kind.DIVIDE, 3, False),
        '*': (Kind.MULTIPLY, 3, False),
        'x': (Kind.MULTIPLY, 3, False),
        'X': (Kind.MULTIPLY, 3, False),
        '%': (Kind.MODULO, 6, False),
        '^': (Kind.POWER, 4, True),
    }
    # Minus in prefix position. Binds tighter than everything but modulo.
    UNARY_MINUS = 'm', 5, True

    assert not [symbol
                for symbol
                in SYMBOLS
                if len(symbol) != 1]

    # Number, of any kind supported by grammar.
    # Greedy on dots: 1..2 is one bad literal, never 1. followed by .2
    NUMBER = r'''
              (?:
                  # 1, 12, 1_200, 1_200. (notice trailing dot), 1.3
                  [0-9]
                  [0-9_.]*
              )|(?:
                  # .2, .200_200 but not . nor ._2
                  \.
                  [0-9]
                  [0-9_.]*
              )
              '''
    SPACE = r'[\ \t\r]+'

    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    _number_pattern = regex.compile(NUMBER, FLAGS)
    _space_pattern = regex.compile(SPACE, FLAGS)

    def lex(self, line):
        '''
        Take a line and return all of its tokens, in order.

        Raises LexError on the first bad lexeme.
        '''
        tokens = []
        cursor = 0
        while cursor < len(line):
            space = self._space_pattern.match(line, cursor)
            if space is not None:
                cursor = space.end()
                continue
            char = line[cursor]
            if char in type(self).SYMBOLS:
                previous = tokens[-1] if tokens else None
                tokens.append(self._symbol(char, previous, cursor))
                cursor += 1
                continue
            match = self._number_pattern.match(line, cursor)
            if match is None:
                raise LexError("Unexpected: '{}'".format(char))
            tokens.append(self._number(match.group(0), cursor))
            cursor = match.end()
        return tokens

    def isunary(self, previous):
        '''
        Return True if a minus following previous is a negation.

        previous is the last token emitted so far, None at the start.
        '''
        return (previous is None or
                previous.isoperator or
                previous.kind is Kind.LEFT_PAREN)

    def _symbol(self, char, previous, position):
        kind, precedence, right_associative = type(self).SYMBOLS[char]
        if kind is Kind.SUBTRACT and self.isunary(previous):
            text, precedence, right_associative = type(self).UNARY_MINUS
            return Token.operator(kind, text, precedence,
                                  right_associative=right_associative,
                                  unary=True,
                                  position=position)
        return Token.operator(kind, char, precedence,
                              right_associative=right_associative,
                              position=position)

    def _number(self, text, position):
        # Underscores are digit group separators; drop them before parsing
        literal = text.replace('_', '')
        if literal.count('.') > 1:
            raise LexError('Redefinition of float: {!r}'.format(text))
        kind = Kind.FLOAT if '.' in literal else Kind.INTEGER
        return Token.number(kind, text, self._convert(literal, kind),
                            position=position)

    @wrap_user_errors('Cannot convert {1}', LexError)
    def _convert(self, literal, kind):
        '''
        Parse literal text into an int or a float, depending on kind.

        Anything that can't be carried as a finite float is rejected.
        '''
        if kind is Kind.FLOAT:
            value = float(literal)
            if value == float('inf'):
                raise OverflowError('float literal out of range')
            return value
        value = int(literal)
        # Raises OverflowError if it won't widen
        float(value)
        return value
