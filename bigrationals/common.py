"""Errors and configuration constants shared by the rational types."""

# fixed-width storage
WORD_BITS = 64
HALF_BITS = WORD_BITS // 2
WORD_MASK = (1 << WORD_BITS) - 1
HALF_MASK = (1 << HALF_BITS) - 1
INT_MAX = (1 << (WORD_BITS - 1)) - 1

# bounded decimal narrowing: 96-bit integer mantissa, 28 significant digits
DECIMAL_MAX = (1 << 96) - 1
DECIMAL_PRECISION = 28


class RationalError(Exception):
    pass


class ZeroDenominatorError(RationalError, ValueError):
    """Rational number constructed with zero denominator."""


class RationalZeroDivisionError(RationalError, ZeroDivisionError):
    """Division by zero value, or zero raised to a negative power."""


class RationalOverflowError(RationalError, OverflowError):
    """Value does not fit the bounded target type."""
