from os import isatty
from sys import stdin, stdout, exit
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

import regex
from prompt_toolkit import PromptSession

from .util import FormulaError
from .values import Number
from .parser import FormulaParser


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


def variable(definition):
    '''
    Parse NAME=VALUE; VALUE is a number if it reads as one, text otherwise.
    '''
    name, sep, value = definition.partition('=')
    name, value = name.strip(), value.strip()
    if not sep or not CLI.NAME.fullmatch(name):
        raise ValueError(definition)
    try:
        return name, float(value)
    except ValueError:
        return name, value


class CLI:
    '''
    Command line interface to the formula calculator.
    '''

    DEFAULT_PROMPT = '> '
    NAME = regex.compile(r'[a-zA-Z]+')
    # name = formula
    ASSIGNMENT = regex.compile(r'(?<name>[a-zA-Z]+)\s*=(?<formula>.*)')

    def _parser(self):
        parser = FormulaParser(strict=self.args.strict,
                               quoted_strings=self.args.quoted_strings)
        for name, value in self.args.variables:
            parser.set_variable(name, value)
        return parser

    def _format(self, result):
        if isinstance(result, Number) and self.args.precision is not None:
            result = Number(round(result, self.args.precision))
        return str(result)

    def dumper(self):
        '''
        Dump tokens and postfix of each formula.
        '''
        parser = self._parser()
        print('<tokens>\t<postfix>')
        for line in self.args.expressions:
            if not line.strip():
                continue
            try:
                tokens = parser.tokenize(line)
                postfix = parser.convert(line)
            except FormulaError as e:
                print(e, file=sys.stderr)
                continue
            print(' '.join(tokens),
                  ' '.join(map(str, postfix)),
                  sep='\t')

    def executor(self):
        '''
        Evaluate formulas, one per line.
        '''
        parser = self._parser()
        for line in self.args.expressions:
            line = line.strip()
            if not line:
                continue
            assignment = type(self).ASSIGNMENT.fullmatch(line)
            try:
                if assignment:
                    parser.set_variable(
                        assignment['name'],
                        parser.calculate(assignment['formula']))
                else:
                    print(self._format(parser.calculate(line)))
            except FormulaError as e:
                logger.debug('failed', exc_info=True)
                print(e, file=sys.stderr)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        parser = self._parser()
        print(parser.lexer.lexeme)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Formula calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-s', '--set',
                                          type=variable,
                                          action='append',
                                          dest='variables',
                                          metavar='NAME=VALUE')
        self.argument_parser.add_argument('-k', '--precision', type=int)
        self.argument_parser.add_argument('--strict',
                                          action='store_true')
        self.argument_parser.add_argument('--quoted-strings',
                                          action='store_true')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin,
                                          variables=[])

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.verbose:
            logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
