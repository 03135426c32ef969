from collections import deque
import logging

from .util import EvaluationError, StackUnderflow
from .registry import Function, Operator
from .values import value_of


logger = logging.getLogger(__name__)


class Machine:
    '''
    Postfix stack machine.

    Takes a postfix sequence from Converter and runs it down to one value.
    '''

    def __init__(self):
        '''
        Create empty stack machine.
        '''
        self.stack = deque()

    def evaluate(self, postfix):
        '''
        Run a whole postfix sequence, and return the single resulting value.
        '''
        self.stack.clear()
        for element in postfix:
            self.feed(element)
        if len(self.stack) != 1:
            raise EvaluationError(
                'Expected 1 element on stack, found {}'.format(
                    len(self.stack)))
        result = self._popstack()[0]
        logger.debug('result %r', result)
        return result

    def feed(self, element):
        '''
        Stack a value, or run an operator or function on the stack.
        '''
        if isinstance(element, Operator):
            # Topmost is the right hand side.
            right, left = self._popstack(2)
            self._pshstack(element.apply(left, right))
        elif isinstance(element, Function):
            self._pshstack(element.apply(*self._popstack()))
        else:
            self._pshstack(value_of(element))

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of elements from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise StackUnderflow(
                'Less than {} element(s) on stack'.format(n))
        return [self.stack.pop() for _ in range(n)]
