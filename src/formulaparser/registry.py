'''
Known operators, functions, and caller supplied variables.
'''

from enum import Enum
from types import MappingProxyType
import logging
import math

import regex

from .util import FormulaError
from .values import Number, Text, to_number, to_text, value_of


logger = logging.getLogger(__name__)


def _divide(left, right):
    '''
    IEEE division: x/0 is a signed infinity, 0/0 is NaN.
    '''
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


class Operator(Enum):
    '''
    Binary infix operators, with their precedence (higher binds tighter).

    All are left associative.
    '''
    ADD = '+', 1
    SUB = '-', 1
    MUL = '*', 2
    DIV = '/', 2

    def __init__(self, symbol, precedence):
        self.symbol = symbol
        self.precedence = precedence

    def __str__(self):
        return self.symbol

    def apply(self, left, right):
        if self is Operator.ADD:
            # Text is contagious.
            if isinstance(left, Text) or isinstance(right, Text):
                return Text(to_text(left) + to_text(right))
            return Number(left + right)
        left, right = to_number(left), to_number(right)
        if self is Operator.SUB:
            return Number(left - right)
        elif self is Operator.MUL:
            return Number(left * right)
        elif self is Operator.DIV:
            return Number(_divide(left, right))
        raise NotImplementedError(self)


class Function(Enum):
    '''
    Unary conversion functions, called as Name(argument).
    '''
    STR = 'Str'
    VAL = 'Val'

    def __str__(self):
        return self.value

    def apply(self, value):
        if self is Function.STR:
            return to_text(value)
        elif self is Function.VAL:
            return to_number(value)
        raise NotImplementedError(self)


OPERATORS = MappingProxyType({operator.symbol: operator
                              for operator
                              in Operator})
FUNCTIONS = MappingProxyType({function.value: function
                              for function
                              in Function})


class Registry:
    '''
    Operator and function tables, plus the variables of one parser.

    The operator and function tables are shared and read-only. Variables are
    mutable, but only through set_variable.
    '''
    # Only names the lexer can produce as a single token are reachable.
    NAME = regex.compile(r'[a-zA-Z]+')

    def __init__(self, variables=None):
        self.operators = OPERATORS
        self.functions = FUNCTIONS
        self.variables = dict(variables or {})

    def set_variable(self, name, value):
        '''
        Register or overwrite a variable.
        '''
        if not isinstance(name, str) or not type(self).NAME.fullmatch(name):
            raise FormulaError('Invalid variable name {}'.format(repr(name)))
        self.variables[name] = value_of(value)
        logger.debug('%s = %r', name, self.variables[name])

    def snapshot(self):
        '''
        Copy of this registry whose variables won't change under a caller.
        '''
        return type(self)(self.variables)

    def operator(self, token):
        return self.operators.get(token)

    def function(self, token):
        return self.functions.get(token)

    def isvariable(self, token):
        return token in self.variables
