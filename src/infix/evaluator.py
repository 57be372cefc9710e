import math
import operator

from .tokens import Kind
from .util import EvaluationError


def _isoddinteger(n):
    return math.isfinite(n) and n == math.floor(n) and math.fmod(n, 2) != 0


def _power(left, right):
    '''
    C pow(): infinities and NaNs instead of exceptions.
    '''
    try:
        return math.pow(left, right)
    except OverflowError:
        if left < 0 and _isoddinteger(right):
            return -math.inf
        return math.inf
    except ValueError:
        # Either 0 to a negative power, or a negative base to a fractional one
        if left == 0:
            if _isoddinteger(right):
                return math.copysign(math.inf, left)
            return math.inf
        return math.nan


def _divide(left, right):
    '''
    IEEE 754 division: x/0 is a signed infinity, 0/0 is NaN.
    '''
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _modulo(left, right):
    '''
    C fmod(): truncating remainder with the sign of left; NaN where fmod is
    undefined (x % 0, inf % y).
    '''
    try:
        return math.fmod(left, right)
    except ValueError:
        return math.nan


class Evaluator:
    '''
    Postfix (RPN) evaluator over floats.

    Holds no state between calls; the value stack lives for one evaluate only.
    Total over the floats: arithmetic never raises, only malformed postfix
    does.
    '''

    # Binary operators, applied as f(lhs, rhs)
    BINARY = {
        Kind.POWER: _power,
        Kind.MULTIPLY: operator.__mul__,
        Kind.DIVIDE: _divide,
        Kind.ADD: operator.__add__,
        Kind.SUBTRACT: operator.__sub__,
        Kind.MODULO: _modulo,
    }

    def evaluate(self, postfix):
        '''
        Run postfix tokens and return the single resulting float.
        '''
        stack = []
        for token in postfix:
            if token.isnumber:
                stack.append(token.value)
            elif token.unary:
                if not stack:
                    raise EvaluationError(
                        'Empty stack for {}'.format(token))
                # Negate in place
                stack[-1] = -stack[-1]
            elif token.isoperator:
                # If you don't pop rhs first, you'll do 3 2 ^ as 2**3
                rhs, lhs = self._popstack(stack, token, n=2)
                stack.append(type(self).BINARY[token.kind](lhs, rhs))
            else:
                raise EvaluationError('Unexpected token {}'.format(token))
        if not stack:
            raise EvaluationError('Nothing to evaluate')
        if len(stack) != 1:
            raise EvaluationError(
                '{} values left on stack, expected 1'.format(len(stack)))
        return stack[0]

    def _popstack(self, stack, token, n=1):
        '''
        Pop n values off stack for token, topmost first.
        '''
        if len(stack) < n:
            raise EvaluationError(
                'Less than {} element(s) on stack for {}'.format(n, token))
        return [stack.pop() for _ in range(n)]
