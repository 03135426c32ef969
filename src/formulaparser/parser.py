from threading import Lock
import logging

from .util import FormulaError
from .registry import Registry
from .lexer import Lexer
from .converter import Converter
from .machine import Machine


logger = logging.getLogger(__name__)


class FormulaParser:
    '''
    Formula calculator: tokenize, convert to postfix, evaluate.

    Holds the variables formulas can refer to. Safe to share between threads;
    each calculation works on a snapshot of the variables.
    '''

    def __init__(self, strict=None, quoted_strings=None):
        '''
        :param strict: Fail on unknown identifiers, rather than treating them
                       as text.
        :param quoted_strings: Treat "quoted text" as one text value.
        '''
        self.registry = Registry()
        self.lexer = Lexer(quoted_strings=quoted_strings)
        self.converter = Converter(strict=strict)
        self._lock = Lock()

    def set_variable(self, name, value):
        '''
        Register or overwrite a variable, for all later calculations.
        '''
        with self._lock:
            self.registry.set_variable(name, value)

    def tokenize(self, formula):
        return self.lexer.tokenize(formula)

    def convert(self, formula):
        '''
        Return the postfix sequence for formula.
        '''
        with self._lock:
            registry = self.registry.snapshot()
        tokens = self.tokenize(formula)
        logger.debug('tokens %r', tokens)
        return self.converter.convert(tokens, registry)

    def calculate(self, formula):
        '''
        Evaluate formula, returning a Number or a Text.

        Raises a FormulaError subclass, carrying the formula, on bad input.
        '''
        try:
            return Machine().evaluate(self.convert(formula))
        except FormulaError as e:
            e.formula = formula
            raise
