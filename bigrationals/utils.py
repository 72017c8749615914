import math
import numbers
import operator

from .common import ZeroDenominatorError


def is_integer(x):
    """Integer-like and not bool."""
    return isinstance(x, numbers.Integral) and not isinstance(x, bool)


def as_integer(x):
    """Integer value of integer-like x; TypeError for bools, floats, strings, etc."""
    if isinstance(x, bool):
        raise TypeError("bool is not accepted as integer")
    return operator.index(x)


def get_gcd(a, b):
    """Greatest common divisor of absolute values; gcd(0, b) = |b|."""
    return math.gcd(abs(a), abs(b))


def reduce_pair(n, d):
    """
    Canonical form of fraction n/d.

    Returns pair (n', d') with d' > 0 and gcd(|n'|, d') = 1;
    zero is always represented as (0, 1).
    """
    if d == 0:
        raise ZeroDenominatorError("denominator is zero")
    if n == 0:
        return 0, 1
    g = get_gcd(n, d)
    if d > 0:
        return n // g, d // g
    return -n // g, -d // g
