'''
Runtime values: every value on a stack is either a Number or a Text.
'''

import math
import numbers

import regex

from .util import TypeCoercionError, wrap_user_errors


# Numeric text: an optionally signed literal, as written in formulas.
NUMBER = regex.compile(r'[+-]?[0-9]+(?:\.[0-9]+)?')


class Number(float):
    '''
    Numeric value.

    Prints canonically: 15 rather than 15.0, Infinity/-Infinity/NaN for the
    non-finite values.
    '''
    # Above this, integral floats keep their exponent notation.
    INTEGRAL_LIMIT = 1e16

    def __str__(self):
        if math.isnan(self):
            return 'NaN'
        if math.isinf(self):
            return 'Infinity' if self > 0 else '-Infinity'
        if self.is_integer() and abs(self) < type(self).INTEGRAL_LIMIT:
            return '{:d}'.format(int(self))
        return float.__repr__(self)


class Text(str):
    '''
    Textual value.
    '''


def to_text(value):
    '''
    Canonical textual representation of a value.
    '''
    if isinstance(value, Text):
        return value
    return Text(str(value))


@wrap_user_errors(TypeCoercionError, 'Cannot convert {0!r} to a number')
def to_number(value):
    '''
    Coerce a value to a Number, failing on non-numeric text.
    '''
    if isinstance(value, Number):
        return value
    if not NUMBER.fullmatch(value):
        raise ValueError(value)
    return Number(float(value))


@wrap_user_errors(TypeCoercionError, 'Unsupported value {0!r}')
def value_of(obj):
    '''
    Wrap a plain Python object as a Value.
    '''
    if isinstance(obj, (Number, Text)):
        return obj
    # bool is Real, but True + 1 has no sensible formula meaning.
    if isinstance(obj, numbers.Real) and not isinstance(obj, bool):
        return Number(obj)
    if isinstance(obj, str):
        return Text(obj)
    raise TypeError(type(obj).__name__)
