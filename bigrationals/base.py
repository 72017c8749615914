import decimal
from functools import lru_cache
import logging
import math

from .common import DECIMAL_MAX, DECIMAL_PRECISION
from .common import RationalOverflowError, RationalZeroDivisionError
from .utils import as_integer, is_integer, get_gcd, reduce_pair


class BaseRational:
    """
    Exact fraction n/d kept in canonical form: d > 0, gcd(|n|, d) = 1, zero is 0/1.

    Immutable value; every operation returns a new instance built by the
    constructor, so results are always canonical.

    Storage model is defined by subclasses through four hooks:
        _int_add(x, y)                --  integer sum
        _int_mul(x, y)                --  integer product
        _int_pow(x, e)                --  integer power, e >= 0
        _is_less_products(a, b, c, d) --  a*b < c*d for non-negative a, b, c, d
    and by _check_pair, called on every canonical pair before it is stored.
    Values of different subclasses never combine.
    """

    __slots__ = ('_n', '_d')

    def __init__(self, numerator=0, denominator=1):
        n, d = reduce_pair(as_integer(numerator), as_integer(denominator))
        self._check_pair(n, d)
        self._n = n
        self._d = d

    @staticmethod
    def _check_pair(n, d):
        pass

    @staticmethod
    def _int_add(x, y):
        raise NotImplementedError("Define in child class")

    @staticmethod
    def _int_mul(x, y):
        raise NotImplementedError("Define in child class")

    @staticmethod
    def _int_pow(x, e):
        raise NotImplementedError("Define in child class")

    @staticmethod
    def _is_less_products(a, b, c, d):
        raise NotImplementedError("Define in child class")

    @property
    def numerator(self):
        return self._n

    @property
    def denominator(self):
        return self._d

    def as_integer_ratio(self):
        return self._n, self._d

    #
    # factories and implicit widening
    #

    @classmethod
    @lru_cache(maxsize=None)
    def zero(cls):
        return cls(0, 1)

    @classmethod
    @lru_cache(maxsize=None)
    def one(cls):
        return cls(1, 1)

    @classmethod
    def from_integer(cls, value):
        """Exact value/1 for integer-like value."""
        return cls(as_integer(value), 1)

    @classmethod
    def from_float(cls, x):
        """Exact value of a finite float."""
        return cls(*float(x).as_integer_ratio())

    @classmethod
    def convert(cls, x):
        if isinstance(x, cls):
            return x
        elif is_integer(x):
            return cls(x, 1)
        else:
            raise TypeError("Can't convert {!r} to {}".format(x, cls.__name__))

    def _coerce(self, other):
        """Operand of the same type, integer widened to it, or None."""
        if isinstance(other, type(self)):
            return other
        if is_integer(other):
            return type(self)(other, 1)
        return None

    def __reduce__(self):
        return type(self), (self._n, self._d)

    #
    # arithmetic
    #

    def __neg__(self):
        return type(self)(-self._n, self._d)

    def __pos__(self):
        return self

    def __abs__(self):
        if self._n >= 0:
            return self
        return -self

    def abs(self):
        return abs(self)

    def _plus(self, other):
        # scale by the co-factors of the shared part of denominators, not by d1*d2
        n1, d1 = self._n, self._d
        n2, d2 = other._n, other._d
        g = get_gcd(d1, d2)
        if g != 1:
            d1 //= g
            d2 //= g
        mul = self._int_mul
        return type(self)(self._int_add(mul(n1, d2), mul(n2, d1)), mul(d1, other._d))

    def _times(self, other):
        n1, d1 = self._n, self._d
        n2, d2 = other._n, other._d
        g = get_gcd(n1, d2)
        if g != 1:
            n1 //= g
            d2 //= g
        g = get_gcd(n2, d1)
        if g != 1:
            n2 //= g
            d1 //= g
        return type(self)(self._int_mul(n1, n2), self._int_mul(d1, d2))

    def _divide(self, other):
        if other._n == 0:
            raise RationalZeroDivisionError("division by zero")
        n1, d1 = self._n, self._d
        n2, d2 = other._n, other._d
        g = get_gcd(n1, n2)
        if g != 1:
            n1 //= g
            n2 //= g
        g = get_gcd(d1, d2)
        if g != 1:
            d1 //= g
            d2 //= g
        return type(self)(self._int_mul(n1, d2), self._int_mul(d1, n2))

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._plus(other)

    def __radd__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other._plus(self)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._plus(-other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other._plus(-self)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._times(other)

    def __rmul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other._times(self)

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._divide(other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other._divide(self)

    def reciprocal(self):
        if self._n == 0:
            raise RationalZeroDivisionError("zero has no reciprocal")
        return type(self)(self._d, self._n)

    def pow(self, exponent):
        """
        Integer power.

        x**0 is 1 for any x, zero included; zero to a negative power
        raises RationalZeroDivisionError.
        """
        e = as_integer(exponent)
        if e == 0:
            return self.one()
        if e > 0:
            return type(self)(self._int_pow(self._n, e), self._int_pow(self._d, e))
        if self._n == 0:
            raise RationalZeroDivisionError("zero raised to negative power")
        return type(self)(self._int_pow(self._d, -e), self._int_pow(self._n, -e))

    def __pow__(self, exponent):
        if not is_integer(exponent):
            return NotImplemented
        return self.pow(exponent)

    #
    # comparison
    #

    def __eq__(self, other):
        try:
            other = self._coerce(other)
        except RationalOverflowError:
            # integer outside the storage range equals no stored value
            return False
        if other is None:
            return NotImplemented
        return (self._n, self._d) == (other._n, other._d)

    def __hash__(self):
        if self._d == 1:
            return hash(self._n)
        return hash((self._n, self._d))

    def _is_less(self, other):
        if self == other:
            return False
        n1, n2 = self._n, other._n
        if n1 < 0 <= n2:
            return True
        if n2 < 0 <= n1:
            return False

        # same sign; for negatives compare magnitudes and invert
        inverse = n1 < 0
        if inverse:
            n1, n2 = -n1, -n2
        less = self._is_less_products(n1, other._d, n2, self._d)
        return not less if inverse else less

    def __lt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._is_less(other)

    def __gt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return not self == other and not self._is_less(other)

    def __le__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self == other or self._is_less(other)

    def __ge__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self == other or not self._is_less(other)

    def compare_to(self, other):
        """Three-way comparison: -1, 0 or 1."""
        other = self.convert(other)
        if self._is_less(other):
            return -1
        if self == other:
            return 0
        return 1

    def __bool__(self):
        return self._n != 0

    #
    # conversions
    #

    def __int__(self):
        # truncate toward zero
        if self._n < 0:
            return -(-self._n // self._d)
        return self._n // self._d

    def to_float(self):
        """
        Nearest float to n/d; +-inf if the quotient is out of float range.

        Approximate: distinct rationals may map to the same float.
        """
        try:
            return self._n / self._d
        except OverflowError:
            result = math.inf if self._n > 0 else -math.inf
            logging.debug('float conversion of %s overflowed to %s', self, result)
            return result

    def __float__(self):
        return self.to_float()

    def to_decimal(self, context=None):
        """
        Quotient as decimal.Decimal, computed in context.

        Bounded like a 96-bit decimal: raises RationalOverflowError if the
        numerator or the denominator exceeds DECIMAL_MAX.
        """
        if abs(self._n) > DECIMAL_MAX or self._d > DECIMAL_MAX:
            raise RationalOverflowError("{} is out of decimal range".format(self))
        if context is None:
            context = decimal.Context(prec=DECIMAL_PRECISION)
        return context.divide(decimal.Decimal(self._n), decimal.Decimal(self._d))

    def to_sympy(self):
        """Exact sympy.Rational; requires sympy."""
        import sympy
        return sympy.Rational(self._n, self._d)

    #
    # extended math
    #

    def log(self, base=None):
        """
        Logarithm as float: log(n) - log(d).

        -inf for zero, nan for negative values.
        """
        if self._n == 0:
            return -math.inf
        if self._n < 0:
            return math.nan
        if base is None:
            return math.log(self._n) - math.log(self._d)
        return math.log(self._n, base) - math.log(self._d, base)

    def log10(self):
        if self._n == 0:
            return -math.inf
        if self._n < 0:
            return math.nan
        return math.log10(self._n) - math.log10(self._d)

    def min(self, other):
        other = self.convert(other)
        return self if self <= other else other

    def max(self, other):
        other = self.convert(other)
        return self if self >= other else other

    #
    # display
    #

    def __str__(self):
        if self._d == 1:
            return str(self._n)
        return '{}/{}'.format(self._n, self._d)

    def __repr__(self):
        return '{}({}, {})'.format(type(self).__name__, self._n, self._d)

