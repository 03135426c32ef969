from pytest import fixture

from formulaparser import FormulaParser


@fixture
def parser():
    '''
    Parser with the variables of the usual examples.
    '''
    parser = FormulaParser()
    parser.set_variable('sum', 10)
    parser.set_variable('name', 'John')
    return parser


@fixture
def strict_parser():
    parser = FormulaParser(strict=True)
    parser.set_variable('sum', 10)
    return parser


@fixture
def quoting_parser():
    parser = FormulaParser(quoted_strings=True)
    parser.set_variable('name', 'John')
    return parser
