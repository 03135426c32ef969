'''
Postfix stack machine tests
'''

import math

from formulaparser.util import EvaluationError, StackUnderflow
from formulaparser.machine import Machine
from formulaparser.registry import Operator, Function
from formulaparser.values import Number, Text

from pytest import raises


def test_operand_order():
    m = Machine()
    assert m.evaluate([Number(10), Number(4), Operator.SUB]) == 6
    assert m.evaluate([Number(1), Number(4), Operator.DIV]) == 0.25


def test_functions():
    m = Machine()
    result = m.evaluate([Number(1), Number(2), Operator.ADD, Number(55),
                         Function.VAL, Operator.MUL, Function.STR,
                         Number(10), Operator.ADD])
    assert result == '16510'
    assert isinstance(result, Text)


def test_plain_literals_become_values():
    m = Machine()
    result = m.evaluate(['a', 2.0, Operator.ADD])
    assert result == 'a2'
    assert isinstance(result, Text)


def test_missing_operand():
    m = Machine()
    with raises(StackUnderflow, match=r'Less than 2 element\(s\) on stack'):
        m.evaluate([Number(1), Operator.SUB])
    with raises(StackUnderflow):
        m.evaluate([Function.STR])


def test_empty():
    with raises(EvaluationError, match='found 0'):
        Machine().evaluate([])


def test_leftovers():
    with raises(EvaluationError, match='found 2'):
        Machine().evaluate([Number(1), Number(2)])


def test_reusable():
    m = Machine()
    with raises(EvaluationError):
        m.evaluate([Number(1), Number(2)])
    assert math.isinf(m.evaluate([Number(1), Number(0), Operator.DIV]))
    assert not m.stack
