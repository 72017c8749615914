from .base import BaseRational
from .common import INT_MAX
from .common import RationalOverflowError
from . import wide


class FixedRationalNumber(BaseRational):
    """
    Rational number stored in fixed-width signed words.

    Numerator is in [MIN_NUMERATOR, MAX_NUMERATOR], denominator in
    [1, MAX_DENOMINATOR]; the range is symmetric, so negation and abs
    never overflow. Arithmetic is checked: any intermediate sum, product
    or power that leaves the word raises RationalOverflowError.

    Cross-multiplication products in comparisons may need two words, so
    they are compared as double-width (high, low) pairs.
    """

    __slots__ = ()

    MIN_NUMERATOR = -INT_MAX
    MAX_NUMERATOR = INT_MAX
    MAX_DENOMINATOR = INT_MAX

    @classmethod
    def _check_pair(cls, n, d):
        if not cls.MIN_NUMERATOR <= n <= cls.MAX_NUMERATOR or d > cls.MAX_DENOMINATOR:
            raise RationalOverflowError("{}/{} does not fit {}".format(n, d, cls.__name__))

    _int_add = staticmethod(wide.checked_add)
    _int_mul = staticmethod(wide.checked_mul)
    _int_pow = staticmethod(wide.checked_pow)
    _is_less_products = staticmethod(wide.is_less_products)
