class FractionError(Exception):
    """Base class of all errors raised by fracx."""


class InvalidDenominator(FractionError, ZeroDivisionError):
    """A fraction was constructed with a zero denominator, directly or through reciprocal/division."""


class ArithmeticOverflow(FractionError, OverflowError):
    """An intermediate value exceeded the range of ``fracx.core.glob.CHECKED_INT_BITS``."""
