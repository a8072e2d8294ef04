'''
RPN calculator.

Deliberately small: two operands, five operators, one numeric type per run.
Feed it a calculation like

    10 2 / 3 + 4 *

and it prints 32, or an Error: line saying what it expected and what it got
instead. The running result stays on the stack as the next left-hand side, so
a calculation is operand, operand, operator, then any number of operand,
operator pairs.

Integers are checked for overflow against the chosen type (128 bit by
default) and divide C-style, truncating toward zero.
'''

from .cli import CLI
from .lexer import Lexer, WordSource
from .machine import Machine
from .session import Session, Policy


__all__ = 'Machine', 'Lexer', 'WordSource', 'Session', 'Policy', 'CLI'
