'''
Dijkstra's shunting-yard algorithm: infix tokens in, postfix tokens out.
'''

from collections import deque

from .tokens import Kind
from .util import MismatchedParenError, UnmatchedParenError


def _yields(o1, o2):
    '''
    Return True if o2, on top of the operator stack, must be output before o1
    is pushed.

    A left parenthesis never yields: it only leaves the stack through its
    matching right parenthesis.
    '''
    if o2.kind is Kind.LEFT_PAREN:
        return False
    if o1.right_associative:
        return o1.precedence < o2.precedence
    return o1.precedence <= o2.precedence


def to_postfix(tokens):
    '''
    Reorder infix tokens into postfix (RPN) order.

    Parentheses are consumed; everything else comes out unchanged. Returns a
    deque, which may be iterated over as many times as needed.
    '''
    output = deque()
    stack = []
    for token in tokens:
        if token.isnumber:
            output.append(token)
        elif token.isoperator:
            while stack and _yields(token, stack[-1]):
                output.append(stack.pop())
            stack.append(token)
        elif token.kind is Kind.LEFT_PAREN:
            stack.append(token)
        elif token.kind is Kind.RIGHT_PAREN:
            while stack and stack[-1].kind is not Kind.LEFT_PAREN:
                output.append(stack.pop())
            if not stack:
                raise UnmatchedParenError(
                    'Right parenthesis error: {}'.format(token))
            # The left parenthesis itself
            stack.pop()
        else:
            raise TypeError('Unknown token {}'.format(token))
    while stack:
        token = stack.pop()
        if token.kind is Kind.LEFT_PAREN:
            raise MismatchedParenError('Mismatched parenthesis error')
        output.append(token)
    return output
