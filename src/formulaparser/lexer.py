from functools import reduce
import operator

import regex

from .util import LexError


class Lexer:
    '''
    Lexer for the formula *regular* grammar.

    Tokens are plain strings. Classifying them is left to the converter, so
    any non-whitespace character lexes, legal or not.
    '''
    # Variable and function names
    IDENTIFIER = r'[a-zA-Z]+'
    # 1.5, but not 1. or .5, which lex as 1 . and . 5
    DECIMAL = r'[0-9]+\.[0-9]+'
    INTEGER = r'[0-9]+'
    # Double quoted span, quotes included. Only with quoted strings enabled.
    STRING = r'"[^"]*"'
    # Operators, parentheses, quotes, and whatever else
    SYMBOL = r'\S'
    SPACE = r'\s*'
    # Nothing left but whitespace
    BLANK = regex.compile(r'\s*')

    DEFAULT_QUOTED_STRINGS = False

    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def __init__(self, quoted_strings=None):
        '''
        :param quoted_strings: Lex "quoted text" as a single token, instead
                               of the quotes and everything in between
                               separately.
        '''
        if quoted_strings is None:
            quoted_strings = type(self).DEFAULT_QUOTED_STRINGS
        self.quoted_strings = quoted_strings
        alternatives = [type(self).IDENTIFIER,
                        type(self).DECIMAL,
                        type(self).INTEGER]
        if quoted_strings:
            alternatives.append(type(self).STRING)
        alternatives.append(type(self).SYMBOL)
        # All possible lexemes, in priority order, eating surrounding space.
        self.lexeme = type(self).SPACE + \
            r'(?<token>' + r'|'.join(alternatives) + r')' + \
            type(self).SPACE
        self.pattern = regex.compile(self.lexeme, flags=type(self).FLAGS)

    def lex(self, formula):
        '''
        Take a formula and yield all lexeme matches.
        '''
        position = 0
        while position < len(formula):
            match = self.pattern.match(formula, position)
            if match is None:
                if type(self).BLANK.fullmatch(formula, position):
                    break
                raise LexError("Couldn't lex {0}".format(
                    formula[position:].strip()))
            if self.quoted_strings and match.group('token') == '"':
                raise LexError('Unterminated string {0}'.format(
                    formula[match.start('token'):].strip()))
            yield match
            position = match.end()

    def tokenize(self, formula):
        '''
        Split a formula into its token strings.
        '''
        return [match.group('token') for match in self.lex(formula)]
