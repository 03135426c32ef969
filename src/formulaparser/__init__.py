'''
Formula calculator.

Evaluates infix formulas over numbers and text, with variables, the
conversion functions Str and Val, parentheses, and + - * / with the usual
precedence. Formulas are tokenized, converted to postfix by the shunting-yard
algorithm, and run on a stack machine.

    >>> parser = FormulaParser()
    >>> parser.set_variable('sum', 10)
    >>> parser.calculate('((1 + 2) * (3 + 4)) + (5.2 * sum)')
    73.0
'''

from .util import (FormulaError, LexError, UnknownIdentifierError,
                   StackUnderflow, UnmatchedParenthesis, TypeCoercionError,
                   EvaluationError)
from .values import Number, Text
from .registry import Operator, Function, Registry
from .lexer import Lexer
from .converter import Converter
from .machine import Machine
from .parser import FormulaParser


__all__ = ('FormulaParser', 'Lexer', 'Converter', 'Machine', 'Registry',
           'Operator', 'Function', 'Number', 'Text',
           'FormulaError', 'LexError', 'UnknownIdentifierError',
           'StackUnderflow', 'UnmatchedParenthesis', 'TypeCoercionError',
           'EvaluationError')
