"""
Fixed-width word arithmetic.

Words are WORD_BITS-bit integers; signed values are restricted to the
symmetric range [-INT_MAX, INT_MAX], unsigned values to [0, WORD_MASK].
Every checked operation raises RationalOverflowError instead of wrapping.
"""

import logging

from .common import WORD_BITS, HALF_BITS, WORD_MASK, HALF_MASK, INT_MAX
from .common import RationalOverflowError


def fits_signed(x):
    return -INT_MAX <= x <= INT_MAX


def check_signed(x):
    if not fits_signed(x):
        logging.debug('fixed-width overflow: %d does not fit %d-bit word', x, WORD_BITS)
        raise RationalOverflowError("{} does not fit signed {}-bit word".format(x, WORD_BITS))
    return x


def check_unsigned(x):
    if not 0 <= x <= WORD_MASK:
        raise RationalOverflowError("{} does not fit unsigned {}-bit word".format(x, WORD_BITS))
    return x


def checked_add(x, y):
    return check_signed(check_signed(x) + check_signed(y))


def checked_mul(x, y):
    return check_signed(check_signed(x) * check_signed(y))


def checked_pow(x, e):
    """x**e for e >= 0 by repeated squaring, every step checked."""
    result = 1
    while True:
        if e & 1:
            result = checked_mul(result, x)
        e >>= 1
        if not e:
            return result
        # x**2 is a factor of the final result, so squaring can't overflow spuriously
        x = checked_mul(x, x)


def mul_wide(a, b):
    """
    Full product of two unsigned words as pair of words (high, low).

    Schoolbook multiplication on half-words: every partial product and
    every carry sum fits in a single word.
    """
    check_unsigned(a)
    check_unsigned(b)
    a_lo, a_hi = a & HALF_MASK, a >> HALF_BITS
    b_lo, b_hi = b & HALF_MASK, b >> HALF_BITS

    lo_lo = a_lo * b_lo
    hi_lo = a_hi * b_lo
    lo_hi = a_lo * b_hi
    hi_hi = a_hi * b_hi

    cross = (lo_lo >> HALF_BITS) + (hi_lo & HALF_MASK) + lo_hi
    high = hi_hi + (hi_lo >> HALF_BITS) + (cross >> HALF_BITS)
    low = ((cross << HALF_BITS) & WORD_MASK) | (lo_lo & HALF_MASK)
    return high, low


def is_less_products(a, b, c, d):
    """Check a*b < c*d for unsigned words without forming the products."""
    return mul_wide(a, b) < mul_wide(c, d)
