from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import sys

from prompt_toolkit import PromptSession

from .util import CalcError
from .lexer import Lexer
from .shunting import to_postfix
from .calculator import calculate


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    # Persistent
                                    history=None,
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the infix calculator.
    '''

    DEFAULT_PROMPT = "Enter an mathematical expression ('exit' to stop): "
    EXIT_COMMAND = 'exit'
    RESULT_HEADER = 'That evaluates out to:'
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def dumper(self):
        '''
        Dump tokens and postfix order of each expression.
        '''
        lexer = Lexer()
        for line in self._lines():
            if line == self.EXIT_COMMAND:
                return 0
            try:
                tokens = lexer.lex(line)
                print('tokens:', *tokens)
                print('postfix:', *(token.text
                                     for token
                                     in to_postfix(tokens)))
            except CalcError as e:
                if self._failed(e):
                    return 1
        return 0

    def executor(self):
        '''
        Evaluate expressions until told to exit or out of input.
        '''
        for line in self._lines():
            if line == self.EXIT_COMMAND:
                return 0
            try:
                value = calculate(line)
            except CalcError as e:
                if self._failed(e):
                    return 1
                continue
            print(self.RESULT_HEADER)
            print(value)
            print()
        return 0

    def _failed(self, error):
        '''
        Report error; return True if the rest of the input is to be abandoned.
        '''
        print(error.args[0], file=sys.stderr)
        logger.debug('Failed expression', exc_info=error)
        return self.args.abort

    def _lines(self):
        '''
        Yield expressions with their line endings stripped.
        '''
        for line in self.args.expressions:
            yield line.rstrip('\n')

    def _prompting_input(self):
        '''
        Wrap stdin with a prompt before each line.

        Uses prompt_toolkit if both stdin/out are a tty.
        '''
        prompt = self.args.prompt or self.DEFAULT_PROMPT
        if sys.stdin.isatty() and sys.stdout.isatty():
            yield from InteractiveInput(prompt=prompt)
            return
        print(prompt, flush=True, end='')
        for line in sys.stdin:
            yield line
            print(prompt, flush=True, end='')

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Infix arithmetic calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-c', '--continue',
                                          action='store_false',
                                          dest='abort',
                                          help='keep going after a bad '
                                               'expression')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        self.argument_parser.add_argument('-D', '--dump',
                                          action='store_const',
                                          const=self.dumper,
                                          dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process' args. Return exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format=self.LOG_FORMAT)
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        try:
            return self.args.action()
        except KeyboardInterrupt:
            return 1
