import operator

from .base import BaseRational


class RationalNumber(BaseRational):
    """
    Rational number with arbitrary-precision numerator and denominator.

    Overflow is impossible, so ordering uses plain cross-multiplication.

        >>> RationalNumber(8, 6)
        RationalNumber(4, 3)
        >>> str(RationalNumber(-4, -3) - 1)
        '1/3'
    """

    __slots__ = ()

    _int_add = staticmethod(operator.add)
    _int_mul = staticmethod(operator.mul)
    _int_pow = staticmethod(pow)

    @staticmethod
    def _is_less_products(a, b, c, d):
        return a * b < c * d
