from enum import Enum
import logging

from .util import CalculationError, LogicError
from .stack import BoundedStack
from .lexer import Operand, Operator, Invalid, EndOfInput
from .numeric import NUMERIC_TYPES, DEFAULT_TYPE, parse, calculate


logger = logging.getLogger(__name__)


class State(Enum):
    OPERAND1 = 'operand 1'
    OPERAND2 = 'operand 2'
    OPERATOR = 'operator'
    DONE = 'done'


# What the user is told they handed us instead.
_GOT = {
    Operand: lambda token: 'operand',
    Operator: lambda token: 'operator',
    EndOfInput: lambda token: 'end-of-calculation',
    Invalid: lambda token: "invalid token '{}'".format(token.text),
}


class Machine:
    '''
    Finite state RPN evaluator over a two operand stack.

    Takes tokens one at a time: operand, operand, operator, then any number of
    further operand, operator pairs, then end of calculation. The running
    result stays on the stack as the next left-hand side.

    :param numeric_type: NumericType, or its name, to parse and compute in.
    :param stack: Stack to work on. Fresh two slot BoundedStack by default.
    '''

    def __init__(self, numeric_type=None, stack=None):
        if numeric_type is None or isinstance(numeric_type, str):
            numeric_type = NUMERIC_TYPES[numeric_type or DEFAULT_TYPE]
        self.numeric_type = numeric_type
        self.stack = BoundedStack() if stack is None else stack
        self.reset()

    def reset(self):
        '''
        Forget the calculation in progress.
        '''
        self.state = State.OPERAND1
        self.got_operator = False
        self.stack.clear()

    @property
    def done(self):
        return self.state is State.DONE

    def feed(self, token):
        '''
        Advance the machine by one token.

        :returns: The result, if token completed the calculation, else None.
        :raises CalculationError: Token not acceptable in current state, or
                                  arithmetic failed.
        '''
        if self.state is State.DONE:
            raise LogicError('calculation already done')
        handler = type(self).TRANSITIONS.get((self.state, type(token)))
        if handler is None:
            raise CalculationError('expected {}, got {}'.format(
                self.state.value, _GOT[type(token)](token)))
        before = self.state
        result = handler(self, token)
        logger.debug('%s --%r--> %s', before.name, token, self.state.name)
        return result

    def run(self, lexer, source):
        '''
        Read tokens off source until the calculation is done.

        :returns: The result.
        '''
        while True:
            result = self.feed(lexer.read_token(source))
            if self.done:
                return result

    def _push(self, value):
        if not self.stack.push(value):
            raise LogicError('stack full')

    def _operand1(self, token):
        self._push(parse(token.text, self.numeric_type))
        self.state = State.OPERAND2

    def _operand2(self, token):
        self._push(parse(token.text, self.numeric_type))
        self.state = State.OPERATOR

    def _operator(self, token):
        if len(self.stack) != 2:
            raise LogicError('expected two elements in memory')
        rhs = self.stack.pop()
        lhs = self.stack.pop()
        self._push(calculate(lhs, rhs, token.op, self.numeric_type))
        self.got_operator = True
        self.state = State.OPERAND2

    def _end(self, token):
        if not self.got_operator:
            raise CalculationError('expected operand 2, got end-of-calculation')
        if len(self.stack) != 1:
            raise LogicError('expected only a single result in memory')
        self.state = State.DONE
        return self.stack.pop()

    # (state, token type) to handler. Anything missing is a type mismatch.
    TRANSITIONS = {
        (State.OPERAND1, Operand): _operand1,
        (State.OPERAND2, Operand): _operand2,
        (State.OPERAND2, EndOfInput): _end,
        (State.OPERATOR, Operator): _operator,
    }
