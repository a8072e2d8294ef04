from enum import Enum
from sys import stdout
import logging

from .util import CalculationError
from .numeric import format_value


logger = logging.getLogger(__name__)


class Policy(Enum):
    '''
    What to do after reporting a calculation error.
    '''
    # Give up on the whole session.
    STOP = 'stop'
    # Drop the rest of the line, clear the stack, and take the next one.
    RESET = 'reset'


class Session:
    '''
    Feeds input through a lexer and machine, one calculation after another,
    printing each result or error on its own line.

    :param machine: Machine to evaluate with.
    :param lexer: Lexer to classify words with.
    :param policy: Policy on calculation errors.
    :param output: Where results and errors go.
    :param precision: Significant digits of floating point results.
    '''

    def __init__(self, machine, lexer, policy=Policy.STOP, output=None,
                 precision=None):
        self.machine = machine
        self.lexer = lexer
        self.policy = policy
        self.output = stdout if output is None else output
        self.precision = precision

    def print(self, *args):
        print(*args, file=self.output, flush=True)

    def run(self, source):
        '''
        Evaluate calculations off source until it runs out, or until the
        first error if the policy is to stop.

        Input and logic errors are not this level's business; they go up.

        :returns: Number of calculation errors reported.
        '''
        errors = 0
        while True:
            self.machine.reset()
            try:
                result = self.machine.run(self.lexer, source)
            except CalculationError as e:
                logger.debug('calculation failed', exc_info=True)
                self.print('Error:', e.args[0])
                errors += 1
                if self.policy is Policy.STOP:
                    break
                source.discard_line()
            else:
                self.print(format_value(result, self.precision))
            if not source.has_more():
                break
        return errors
