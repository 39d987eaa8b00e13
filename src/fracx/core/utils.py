from __future__ import annotations
from typing import Any

import numpy as np

from fracx.core import glob
from fracx.core.errors import ArithmeticOverflow, InvalidDenominator


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor of two non-negative integers using the euclidean algorithm.

    Args:
        a (int): first operand, >= 0
        b (int): second operand, >= 0

    Returns:
        int: gcd(a, b). gcd(0, n) == gcd(n, 0) == n.
    """
    if a < 0 or b < 0:
        raise ValueError(f"gcd is only defined for non-negative integers, got {a} and {b}")
    while b != 0:
        a, b = b, a % b
    return a


def as_int(value: Any, name: str) -> int:
    # bool is an int subclass, but not a valid component
    if isinstance(value, bool) or not isinstance(value, int | np.integer):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}: {value!r}")
    return int(value)


def int_bounds(bits: int) -> tuple[int, int]:
    """Inclusive (min, max) range of a signed integer with the given number of bits."""
    return -(2 ** (bits - 1)), 2 ** (bits - 1) - 1


def check_int_range(*values: int) -> None:
    """
    Raises ArithmeticOverflow if checked arithmetic is enabled (``glob.CHECKED_INT_BITS``) and
    any of the values does not fit into a signed integer of that width. No-op otherwise.
    """
    bits = glob.CHECKED_INT_BITS.get()
    if bits is None:
        return
    lower, upper = int_bounds(bits)
    for v in values:
        if not lower <= v <= upper:
            # no str(v): ints above 4300 digits cannot be converted
            raise ArithmeticOverflow(f"Value of {v.bit_length()} bits does not fit into a signed {bits}-bit integer")


def normalize(
    num: int,
    denom: int,
) -> tuple[int, int]:
    """
    Brings a raw numerator/denominator pair into canonical form: positive denominator and
    lowest terms. Zero is always represented as (0, 1).

    Args:
        num (int): raw numerator
        denom (int): raw denominator

    Returns:
        tuple[int, int]: normalized (numerator, denominator)
    """
    num = as_int(num, "numerator")
    denom = as_int(denom, "denominator")
    if denom == 0:
        raise InvalidDenominator(f"Denominator must not be zero (numerator={num})")
    # sign is carried by the numerator only
    if denom < 0:
        num, denom = -num, -denom
    check_int_range(num, denom)

    common_divisor = gcd(abs(num), denom)
    return num // common_divisor, denom // common_divisor


def check_pow_range(base: int, exponent: int) -> None:
    """
    Fails fast with ArithmeticOverflow if ``base ** exponent`` certainly exceeds the checked integer
    width, without computing the power. |base| >= 2**(bit_length - 1), so the power is at least
    2**((bit_length - 1) * |exponent|). No-op if checked arithmetic is disabled.
    """
    bits = glob.CHECKED_INT_BITS.get()
    if bits is None:
        return
    lower_bound_bits = (abs(base).bit_length() - 1) * abs(exponent)
    if lower_bound_bits >= bits:
        raise ArithmeticOverflow(
            f"Power of a {abs(base).bit_length()}-bit base with a {abs(exponent).bit_length()}-bit exponent does not "
            f"fit into a signed {bits}-bit integer"
        )
