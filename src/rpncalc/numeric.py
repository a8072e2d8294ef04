'''
Numeric types the calculator can run in, and the arithmetic on them.

Operands are parsed through Decimal first, so range and integrality are
checked exactly, whatever the target type.
'''

from decimal import Decimal
import logging
import math
import operator
import struct
import sys

from .util import CalculationError, LogicError, wrap_user_errors


logger = logging.getLogger(__name__)

OPERATORS = '+-*/%'


class NumericType:
    '''
    A signed numeric type: bounded integer or IEEE float.

    :param name: Short name, e.g. i32.
    :param integral: Integer, as opposed to floating point, type.
    :param lowest: Most negative representable value.
    :param highest: Most positive representable value.
    :param narrow: Convert a Python number into this type's representation.
    '''

    def __init__(self, name, integral, lowest, highest, narrow):
        self.name = name
        self.integral = integral
        self.lowest = lowest
        self.highest = highest
        self.narrow = narrow

    def __contains__(self, value):
        return self.lowest <= value <= self.highest

    def __repr__(self):
        return '<{} {}>'.format(type(self).__name__, self.name)


def _signed(bits):
    return NumericType('i{}'.format(bits),
                       integral=True,
                       lowest=-(1 << (bits - 1)),
                       highest=(1 << (bits - 1)) - 1,
                       narrow=int)


def _single(value):
    '''
    Round a float to the nearest binary32 value.
    '''
    try:
        return struct.unpack('f', struct.pack('f', value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


FLT_MAX = Decimal('3.4028234663852886e+38')
DBL_MAX = Decimal(sys.float_info.max)

NUMERIC_TYPES = {
    numeric_type.name: numeric_type
    for numeric_type
    in [_signed(8),
        _signed(16),
        _signed(32),
        _signed(64),
        _signed(128),
        NumericType('f32', False, -FLT_MAX, FLT_MAX,
                    lambda v: _single(float(v))),
        NumericType('f64', False, -DBL_MAX, DBL_MAX, float)]
}
DEFAULT_TYPE = 'i128'


@wrap_user_errors("failed to parse input '{0}'")
def _decimal(text):
    value = Decimal(text)
    if not value.is_finite():
        # NaN, sNaN, Infinity all parse; none of them are numbers to us.
        raise CalculationError("failed to parse input '{}'".format(text))
    return value


def parse(text, numeric_type):
    '''
    Parse the whole of text as a value of numeric_type.

    :raises CalculationError: Unparseable, non-integral for an integer type,
                              or out of the type's range.
    :raises LogicError: Empty text. Tokens are never empty.
    '''
    if not text:
        raise LogicError('trying to call parse on an empty value')
    # Decimal() tolerates surrounding whitespace; a word has none to give.
    if text != text.strip():
        raise CalculationError("failed to parse input '{}'".format(text))
    value = _decimal(text)
    if numeric_type.integral and value != value.to_integral_value():
        raise CalculationError(
            "failed to parse input '{}': invalid cross-type parse".format(text))
    if value not in numeric_type:
        raise CalculationError(
            "failed to parse input '{}': parse type value overflow".format(text))
    return numeric_type.narrow(value)


def _truncdiv(lhs, rhs):
    '''
    Integer division rounding toward zero, as fixed width machine integers do.
    '''
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


def _truncmod(lhs, rhs):
    '''
    Remainder with the sign of the dividend, consistent with _truncdiv.
    '''
    return lhs - rhs * _truncdiv(lhs, rhs)


INTEGER_OPERATIONS = {
    '+': operator.__add__,
    '-': operator.__sub__,
    '*': operator.__mul__,
    '/': _truncdiv,
    '%': _truncmod,
}

FLOAT_OPERATIONS = {
    '+': operator.__add__,
    '-': operator.__sub__,
    '*': operator.__mul__,
    '/': operator.__truediv__,
    '%': math.fmod,
}


def calculate(lhs, rhs, op, numeric_type):
    '''
    Apply binary operator op to lhs and rhs.

    Integer results are checked against the type's range; floats are left to
    IEEE rules, so they may become infinite.

    :raises CalculationError: Division by zero, integer overflow.
    :raises LogicError: Unknown operator. The lexer never produces one.
    '''
    operations = (INTEGER_OPERATIONS
                  if numeric_type.integral
                  else FLOAT_OPERATIONS)
    try:
        operation = operations[op]
    except KeyError:
        raise LogicError('unsupported operator {!r}'.format(op)) from None
    if op in '/%' and rhs == 0:
        raise CalculationError('division by zero')
    result = numeric_type.narrow(operation(lhs, rhs))
    if numeric_type.integral and result not in numeric_type:
        raise CalculationError('integer overflow')
    logger.debug('%r %s %r = %r', lhs, op, rhs, result)
    return result


def format_value(value, precision=None):
    '''
    Format value for output: integers in full, floats like C's %g.

    :param precision: Significant digits for floats; 6, like %g, by default.
    '''
    if isinstance(value, int):
        return str(value)
    return '{:.{}g}'.format(value, 6 if precision is None else precision)
