'''
Infix calculator.

Reads plain old arithmetic, the way you'd write it down, and works out its
value: + - * / % ^ over integers and decimals, parentheses, and unary minus.

Three stages, each starting from scratch on every expression:

- Lexer: characters to tokens. Knows a minus is a negation when it follows
  nothing, an operator, or an opening parenthesis.
- to_postfix: Dijkstra's shunting yard, infix tokens to postfix (RPN).
- Evaluator: runs the postfix on a stack of floats. Division by zero and
  friends give infinities and NaNs, not errors.

calculate() strings the three together.
'''

from .calculator import calculate
from .cli import CLI
from .evaluator import Evaluator
from .lexer import Lexer
from .shunting import to_postfix
from .tokens import Kind, Token


__all__ = 'calculate', 'to_postfix', 'Evaluator', 'Lexer', 'CLI', 'Kind', \
          'Token'
