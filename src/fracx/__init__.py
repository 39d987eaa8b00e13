from loguru import logger

from fracx.core.constants import MAX_FLOAT_DENOMINATOR
from fracx.core.errors import ArithmeticOverflow, FractionError, InvalidDenominator
from fracx.core.fraction import Fraction
from fracx.core.glob import checked_int_bits
from fracx.core.pytrees import register_fraction_pytree
from fracx.core.utils import gcd, normalize
from fracx.functional.conversion import to_double, to_float, to_fraction

register_fraction_pytree()

# library logging is opt-in: logger.enable("fracx")
logger.disable("fracx")


__all__ = [
    "Fraction",
    "FractionError",
    "InvalidDenominator",
    "ArithmeticOverflow",
    "MAX_FLOAT_DENOMINATOR",
    "checked_int_bits",
    "gcd",
    "normalize",
    "to_fraction",
    "to_float",
    "to_double",
]
