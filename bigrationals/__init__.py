from .common import (
    RationalError,
    ZeroDenominatorError,
    RationalZeroDivisionError,
    RationalOverflowError,
)
from .base import BaseRational
from .rationals import RationalNumber
from .fixed_rationals import FixedRationalNumber
from .mathutils import as_rational, compare, minimum, maximum, log, log10
