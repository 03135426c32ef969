'''
Shunting-yard conversion tests
'''

from formulaparser.util import UnknownIdentifierError, UnmatchedParenthesis
from formulaparser.lexer import Lexer
from formulaparser.converter import Converter
from formulaparser.registry import Registry, Operator, Function
from formulaparser.values import Number, Text

from pytest import raises


ADD, SUB, MUL, DIV = Operator.ADD, Operator.SUB, Operator.MUL, Operator.DIV
STR, VAL = Function.STR, Function.VAL


def convert(formula, registry=None, **kwargs):
    if registry is None:
        registry = Registry()
    return Converter(**kwargs).convert(Lexer().tokenize(formula), registry)


def test_precedence():
    assert convert('1 + 2 * 3') == [1, 2, 3, MUL, ADD]
    assert convert('1 * 2 + 3') == [1, 2, MUL, 3, ADD]


def test_left_associative():
    assert convert('10 - 2 - 3') == [10, 2, SUB, 3, SUB]
    assert convert('8 / 4 * 2') == [8, 4, DIV, 2, MUL]


def test_parentheses():
    assert convert('(1 + 2) * 3') == [1, 2, ADD, 3, MUL]


def test_numbers_are_numbers():
    postfix = convert('2.5')
    assert postfix == [2.5]
    assert isinstance(postfix[0], Number)


def test_variables_are_values():
    registry = Registry()
    registry.set_variable('sum', 10)
    registry.set_variable('name', 'John')
    assert convert('sum + name', registry) == [10, 'John', ADD]


def test_functions_bind_to_parentheses():
    assert convert('Str((1 + 2) * Val("55")) + sum') == \
        [1, 2, ADD, 55, VAL, MUL, STR, 'sum', ADD]


def test_nested_functions():
    assert convert('Val(Str(3)) * 2') == [3, STR, VAL, 2, MUL]


def test_function_without_parentheses():
    assert convert('Str 5') == [5, STR]


def test_quotes_dropped():
    postfix = convert('"Hello " + "World"')
    assert postfix == ['Hello', 'World', ADD]
    assert all(isinstance(element, Text) for element in postfix[:2])


def test_quoted_span():
    tokens = Lexer(quoted_strings=True).tokenize('"Hello " + "55"')
    postfix = Converter().convert(tokens, Registry())
    assert postfix == ['Hello ', '55', ADD]
    assert isinstance(postfix[1], Text)


def test_unknown_passthrough():
    postfix = convert('foo + 1')
    assert postfix == ['foo', 1, ADD]
    assert isinstance(postfix[0], Text)


def test_unknown_strict():
    with raises(UnknownIdentifierError, match="'foo'"):
        convert('foo + 1', strict=True)
    with raises(UnknownIdentifierError, match="'%'"):
        convert('1 % 2', strict=True)


def test_variable_shadows_function():
    registry = Registry()
    registry.set_variable('Str', 'shadow')
    assert convert('Str', registry) == ['shadow']


def test_unmatched_open():
    with raises(UnmatchedParenthesis, match=r"Unmatched '\('"):
        convert('(1 + 2')


def test_unmatched_close():
    with raises(UnmatchedParenthesis, match=r"Unmatched '\)'"):
        convert('1 + 2)')


def test_empty():
    assert convert('') == []
    assert convert('()') == []
