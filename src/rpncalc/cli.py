from os import path
from sys import stdin, stdout, stderr
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .util import InputError
from .numeric import NUMERIC_TYPES, DEFAULT_TYPE
from .lexer import Lexer, WordSource
from .machine import Machine
from .session import Session, Policy


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    history=(FileHistory(self.history)
                                             if self.history
                                             else None),
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to RPN calculator.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.rpncalc_history'

    def _lexer(self):
        return Lexer(strict=self.args.strict)

    def _source(self):
        return WordSource(self.args.expressions,
                          per_line=self.args.lines or self._interactive())

    def dumper(self):
        '''
        Dump the token each word classifies as.
        '''
        lexer = self._lexer()
        print('<token>\t<repr(word)>', file=self.output)
        for token in lexer.tokens(self._source()):
            print(type(token).__name__,
                  repr(getattr(token, 'text', getattr(token, 'op', None))),
                  sep='\t', file=self.output)
        return 0

    def executor(self):
        '''
        Run machine (RPN calculator).
        '''
        session = Session(Machine(self.args.type),
                          self._lexer(),
                          policy=(Policy.RESET
                                  if self.args.reset or self._interactive()
                                  else Policy.STOP),
                          output=self.output,
                          precision=self.args.precision)
        session.run(self._source())
        return 0

    def raw_grammar(self):
        '''
        Print current internally defined operand and operator grammar.
        '''
        lexer = self._lexer()
        print(lexer.OPERAND, file=self.output)
        print(lexer.OPERATOR, file=self.output)
        return 0

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           stdin.isatty() and stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=path.expanduser(self.HISTORY_FILE))
        else:
            return stdin

    def __init__(self, output=None):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.output = stdout if output is None else output
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='log state transitions and '
                                               'error tracebacks')
        self.argument_parser.add_argument('-t', '--type',
                                          choices=sorted(NUMERIC_TYPES),
                                          default=DEFAULT_TYPE,
                                          help='numeric type to calculate in')
        self.argument_parser.add_argument('-s', '--strict',
                                          action='store_true',
                                          help='reject malformed operands '
                                               'as invalid tokens')
        self.argument_parser.add_argument('-r', '--reset',
                                          action='store_true',
                                          help='carry on with the next '
                                               'calculation after an error')
        self.argument_parser.add_argument('-l', '--lines',
                                          action='store_true',
                                          help='one calculation per line')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          help='significant digits of '
                                               'floating point results')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        :returns: Exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(stream=stderr,
                            level=(logging.DEBUG
                                   if self.args.verbose
                                   else logging.WARNING),
                            format='%(name)s: %(levelname)s: %(message)s')
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        else:
            # -e words, all one calculation
            self.args.expressions = [' '.join(self.args.expressions)]
        try:
            return self.args.action()
        except InputError as e:
            logger.debug('input failed', exc_info=True)
            print(e.args[0], file=stderr)
            return 2
        except KeyboardInterrupt:
            return 1
