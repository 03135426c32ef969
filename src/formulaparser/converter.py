'''
Infix to postfix conversion, by Dijkstra's shunting-yard algorithm.
'''

from collections import deque
import logging

import regex

from .util import UnknownIdentifierError, UnmatchedParenthesis
from .registry import Function, Operator
from .values import Number, Text


logger = logging.getLogger(__name__)


LPAREN = '('
RPAREN = ')'
QUOTE = '"'


class Converter:
    '''
    Converts a formula's tokens to postfix (RPN) order.

    Numbers, variables and unknown tokens come out as Values; operators and
    functions come out as Operator and Function members, ready for Machine.
    '''
    NUMBER = regex.compile(r'[0-9]+(?:\.[0-9]+)?')

    DEFAULT_STRICT = False

    def __init__(self, strict=None):
        '''
        :param strict: Reject unknown tokens, instead of passing them through
                       as text.
        '''
        if strict is None:
            strict = type(self).DEFAULT_STRICT
        self.strict = strict

    def convert(self, tokens, registry):
        '''
        Return tokens in postfix order, resolved against registry.
        '''
        output = []
        stack = deque()
        for token in tokens:
            if type(self).NUMBER.fullmatch(token):
                output.append(Number(token))
            elif registry.isvariable(token):
                output.append(registry.variables[token])
            elif registry.function(token) is not None:
                stack.append(registry.function(token))
            elif token == LPAREN:
                stack.append(LPAREN)
            elif token == RPAREN:
                self._close(stack, output)
            elif registry.operator(token) is not None:
                self._operator(registry.operator(token), stack, output)
            elif self._isquoted(token):
                output.append(Text(token[1:-1]))
            elif token != QUOTE:
                output.append(self._unknown(token))
        while stack:
            top = stack.pop()
            if top == LPAREN:
                raise UnmatchedParenthesis("Unmatched '('")
            output.append(top)
        logger.debug('postfix %s', ' '.join(map(str, output)))
        return output

    def _close(self, stack, output):
        '''
        Unwind the stack down to the matching (, then any function owning it.
        '''
        while True:
            if not stack:
                raise UnmatchedParenthesis("Unmatched ')'")
            top = stack.pop()
            if top == LPAREN:
                break
            output.append(top)
        while stack and isinstance(stack[-1], Function):
            output.append(stack.pop())

    def _operator(self, operator, stack, output):
        # Equal precedence pops first: left associative.
        while stack and isinstance(stack[-1], Operator) and \
              stack[-1].precedence >= operator.precedence:
            output.append(stack.pop())
        stack.append(operator)

    def _isquoted(self, token):
        return len(token) > 1 and \
            token.startswith(QUOTE) and token.endswith(QUOTE)

    def _unknown(self, token):
        if self.strict:
            raise UnknownIdentifierError(
                'Unknown identifier {}'.format(repr(token)))
        return Text(token)
