import logging

from .evaluator import Evaluator
from .lexer import Lexer
from .shunting import to_postfix


logger = logging.getLogger(__name__)


def calculate(expression, lexer=None, evaluator=None):
    '''
    Lex, reorder and evaluate one infix expression, returning a float.

    Raises a CalcError subclass on bad input. Nothing is kept from one call
    to the next.
    '''
    lexer = lexer or Lexer()
    evaluator = evaluator or Evaluator()
    tokens = lexer.lex(expression)
    logger.debug('tokens: %s', ' '.join(map(str, tokens)))
    postfix = to_postfix(tokens)
    logger.debug('postfix: %s', ' '.join(token.text for token in postfix))
    value = evaluator.evaluate(postfix)
    logger.debug('%r = %r', expression, value)
    return value
