from collections import deque
from dataclasses import dataclass
import logging

import regex

from .util import InputError
from .numeric import OPERATORS


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Operand:
    text: str


@dataclass(frozen=True)
class Operator:
    op: str


@dataclass(frozen=True)
class Invalid:
    text: str


@dataclass(frozen=True)
class EndOfInput:
    pass


class WordSource:
    '''
    Whitespace-delimited words read off an iterable of lines.

    Works on sys.stdin, a list of strings, or InteractiveInput alike. A word
    is never split across reads.

    :param lines: Iterable of text lines.
    :param per_line: End the calculation at every line end, not just at the
                     end of the stream.
    '''

    def __init__(self, lines, per_line=False):
        self._lines = iter(lines)
        self.per_line = per_line
        self._words = deque()
        self._line_open = False
        self._peeked = None
        self._exhausted = False

    def _next_line(self):
        '''
        Next line, or None at end of stream.
        '''
        if self._peeked is not None:
            line, self._peeked = self._peeked, None
            return line
        if self._exhausted:
            return None
        try:
            return next(self._lines)
        except StopIteration:
            self._exhausted = True
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise InputError('failed to read input stream') from e

    def read_word(self):
        '''
        Return the next word, or None at end of calculation.
        '''
        while not self._words:
            if self.per_line and self._line_open:
                self._line_open = False
                return None
            line = self._next_line()
            if line is None:
                return None
            self._line_open = True
            self._words.extend(line.split())
        return self._words.popleft()

    def discard_line(self):
        '''
        Drop the unread rest of the current line.
        '''
        self._words.clear()
        self._line_open = False

    def has_more(self):
        '''
        Return True if there's another calculation's worth of input to read.

        In line mode, a blank line counts; it's an (empty) calculation.
        '''
        if self._words or self._line_open and self.per_line:
            return True
        while True:
            if self._peeked is None:
                self._peeked = self._next_line()
            if self._peeked is None:
                return False
            if self.per_line or self._peeked.split():
                return True
            self._peeked = None


class Lexer:
    '''
    Classifies input words into tokens.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state beyond its classification strategy.

    :param strict: Classify malformed words as Invalid up front. Otherwise
                   anything that isn't an operator is an Operand, and gets
                   rejected when parsed.
    '''
    # Decimal digits only. \d would let in other scripts' digits.
    DIGITS = r'[0-9]+'
    # Signed integer literal; a lone - is the subtraction operator.
    OPERAND = r'-?' + DIGITS
    OPERATOR = r'[' + regex.escape(OPERATORS) + r']'

    FLAGS = regex.VERSION1

    OPERAND_RE = regex.compile(OPERAND, flags=FLAGS)
    OPERATOR_RE = regex.compile(OPERATOR, flags=FLAGS)

    def __init__(self, strict=False):
        self.strict = strict

    def classify(self, word):
        '''
        Return the token for word, or EndOfInput if word is None.
        '''
        if word is None:
            return EndOfInput()
        if self.strict and type(self).OPERAND_RE.fullmatch(word):
            return Operand(word)
        if type(self).OPERATOR_RE.fullmatch(word):
            return Operator(word)
        if self.strict:
            return Invalid(word)
        return Operand(word)

    def read_token(self, source):
        '''
        Consume one word from source and classify it.

        :raises InputError: Source failed to read.
        '''
        token = self.classify(source.read_word())
        logger.debug('read %r', token)
        return token

    def tokens(self, source):
        '''
        Yield all tokens in source, end of calculation markers included.

        Always yields at least one EndOfInput.
        '''
        while True:
            token = self.read_token(source)
            yield token
            if isinstance(token, EndOfInput) and not source.has_more():
                return
