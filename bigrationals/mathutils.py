"""Free-function forms of comparison and extended math on rational values."""

from .base import BaseRational
from .rationals import RationalNumber
from .utils import is_integer


def as_rational(x, cls=RationalNumber):
    """Convert rational value or integer to cls."""
    if isinstance(x, cls):
        return x
    if isinstance(x, BaseRational):
        return cls(x.numerator, x.denominator)
    if is_integer(x):
        return cls.from_integer(x)
    raise TypeError("Can't convert {!r} to {}".format(x, cls.__name__))


def _value(x, other=None):
    """x as rational value; a bare integer takes the type of other, if other is rational."""
    if isinstance(x, BaseRational):
        return x
    if isinstance(other, BaseRational):
        return as_rational(x, type(other))
    return as_rational(x)


def compare(a, b):
    """Three-way comparison: -1, 0 or 1 as a <, ==, > b."""
    return _value(a, b).compare_to(b)


def minimum(a, b):
    return a if a <= b else b


def maximum(a, b):
    return a if a >= b else b


def log(x, base=None):
    """Float logarithm of rational or integer x; -inf at zero, nan below zero."""
    return _value(x).log(base)


def log10(x):
    return _value(x).log10()
