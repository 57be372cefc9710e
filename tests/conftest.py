from pytest import fixture

from infix.evaluator import Evaluator
from infix.lexer import Lexer
from infix.shunting import to_postfix


@fixture
def lexer() -> Lexer:
    return Lexer()


@fixture
def postfix(lexer):
    '''
    Lex and reorder an expression, returning the postfix token texts.
    '''
    def postfix(expression: str) -> list:
        return [token.text for token in to_postfix(lexer.lex(expression))]
    return postfix


@fixture
def evaluate(lexer):
    '''
    Evaluate an expression through its postfix tokens.
    '''
    evaluator = Evaluator()

    def evaluate(expression: str) -> float:
        return evaluator.evaluate(to_postfix(lexer.lex(expression)))
    return evaluate
