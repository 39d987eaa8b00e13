from __future__ import annotations
import math
from typing import Any, Iterable, NamedTuple

import numpy as np
from loguru import logger

from fracx.core.constants import DECIMAL_BASE, MAX_FLOAT_DENOMINATOR
from fracx.core.utils import check_int_range, check_pow_range, normalize


class _FractionFields(NamedTuple):
    num: int
    denom: int


def _is_operand(x: Any) -> bool:
    if isinstance(x, bool):
        return False
    return isinstance(x, Fraction | int | np.integer)


def _as_fraction(x: Any) -> Fraction:
    if isinstance(x, Fraction):
        return x
    if not _is_operand(x):
        raise TypeError(f"Expected Fraction or int, got {type(x).__name__}: {x!r}")
    return Fraction(x)


def _unorderable(lhs: Any, rhs: Any, op: str):
    # raised directly: returning NotImplemented would fall back to lexicographic tuple ordering
    raise TypeError(f"'{op}' not supported between {type(lhs).__name__} and {type(rhs).__name__}")


class Fraction(_FractionFields):
    """Exact rational number.

    The pair (num, denom) is normalized on construction: the denominator is always positive
    and the pair is in lowest terms, with zero represented as 0/1. Instances are immutable,
    every operation returns a new Fraction.

    Named methods (add, multiply, greater_than, ...) implement the arithmetic, python operators
    are shorthands for them. Operands can be Fractions or integers. Floats are rejected by the
    operators, use ``Fraction.from_float`` or ``to_double`` to cross between the two worlds.

    Raises:
        InvalidDenominator: if the denominator is zero.
        ArithmeticOverflow: if checked arithmetic is enabled and a value does not fit.
    """

    __slots__ = ()
    # numpy scalars would otherwise treat a Fraction as a length 2 sequence in binary operations
    __array_ufunc__ = None

    def __new__(cls, num: int = 0, denom: int = 1) -> Fraction:
        num, denom = normalize(num, denom)
        return super().__new__(cls, num, denom)

    @classmethod
    def _make(cls, iterable: Iterable[int]) -> Fraction:
        # namedtuple._make and _replace would otherwise bypass normalization
        return cls(*iterable)

    @property
    def numerator(self) -> int:
        return self.num

    @property
    def denominator(self) -> int:
        return self.denom

    def __repr__(self) -> str:
        return f"Fraction({self.num}, {self.denom})"

    def __str__(self) -> str:
        return f"{self.num}/{self.denom}"

    def __bool__(self) -> bool:
        return self.num != 0

    def __hash__(self) -> int:
        # whole numbers compare equal to ints, so they have to hash like them
        if self.denom == 1:
            return hash(self.num)
        return hash((self.num, self.denom))

    # Arithmetic
    def add(self, other: Fraction | int) -> Fraction:
        other = _as_fraction(other)
        lhs = self.num * other.denom
        rhs = other.num * self.denom
        check_int_range(lhs, rhs)
        return Fraction(lhs + rhs, self.denom * other.denom)

    def negate(self) -> Fraction:
        return Fraction(-self.num, self.denom)

    def subtract(self, other: Fraction | int) -> Fraction:
        return self.add(_as_fraction(other).negate())

    def multiply(self, other: Fraction | int) -> Fraction:
        """Product with another Fraction, or with an integer scalar (only the numerator is scaled)."""
        if isinstance(other, Fraction):
            return Fraction(self.num * other.num, self.denom * other.denom)
        if not _is_operand(other):
            raise TypeError(f"Expected Fraction or int, got {type(other).__name__}: {other!r}")
        return Fraction(self.num * int(other), self.denom)

    def reciprocal(self) -> Fraction:
        """Swaps numerator and denominator. Raises InvalidDenominator for a zero fraction."""
        return Fraction(self.denom, self.num)

    def divide(self, other: Fraction | int) -> Fraction:
        return self.multiply(_as_fraction(other).reciprocal())

    def power(self, exponent: int) -> Fraction:
        """
        Integer power. The signed numerator is exponentiated, so the sign follows the parity of
        the exponent. A negative exponent yields the reciprocal of the positive power and an
        exponent of zero yields 1/1 (including 0^0).

        Args:
            exponent (int): integer exponent

        Returns:
            Fraction: self ** exponent
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int | np.integer):
            raise TypeError(f"Exponent must be an integer, got {type(exponent).__name__}: {exponent!r}")
        exponent = int(exponent)
        if exponent == 1:
            return self

        check_pow_range(self.num, exponent)
        check_pow_range(self.denom, exponent)
        num = self.num ** abs(exponent)
        denom = self.denom ** abs(exponent)
        # (a/b)^-n == (b/a)^n
        if exponent > 0:
            return Fraction(num, denom)
        return Fraction(denom, num)

    def increment(self) -> Fraction:
        return Fraction(self.num + self.denom, self.denom)

    def decrement(self) -> Fraction:
        return Fraction(self.num - self.denom, self.denom)

    # Comparison
    def equals(self, other: Fraction | int) -> bool:
        other = _as_fraction(other)
        if self.num == 0 and other.num == 0:
            return True
        lhs = self.num * other.denom
        rhs = other.num * self.denom
        check_int_range(lhs, rhs)
        return lhs == rhs

    def greater_than(self, other: Fraction | int) -> bool:
        other = _as_fraction(other)
        # same denominator, a zero numerator or different signs: numerators decide on their own
        if (
            self.denom == other.denom
            or self.num == 0
            or other.num == 0
            or (self.num > 0) != (other.num > 0)
        ):
            return self.num > other.num
        lhs = self.num * other.denom
        rhs = other.num * self.denom
        check_int_range(lhs, rhs)
        return lhs > rhs

    def greater_than_or_equal(self, other: Fraction | int) -> bool:
        return self.equals(other) or self.greater_than(other)

    def less_than(self, other: Fraction | int) -> bool:
        return not self.greater_than_or_equal(other)

    def less_than_or_equal(self, other: Fraction | int) -> bool:
        return self.less_than(other) or self.equals(other)

    def compare(self, other: Fraction | int) -> int:
        """Three-way comparison: 0 if equal, 1 if self is greater, -1 if self is less."""
        if self.equals(other):
            return 0
        if self.greater_than(other):
            return 1
        return -1

    # Conversion
    def to_float(self) -> np.float32:
        """Single precision value, computed by float32 division."""
        return np.float32(self.num) / np.float32(self.denom)

    def to_double(self) -> float:
        return self.num / self.denom

    def __float__(self) -> float:
        return self.to_double()

    @classmethod
    def from_float(
        cls,
        value: float,
        max_denominator: int = MAX_FLOAT_DENOMINATOR,
    ) -> Fraction:
        """
        Lossy conversion of a float by decimal scaling: the value and the denominator are
        multiplied by ten until the value has no fractional part, or until another step would
        push the denominator past ``max_denominator``. The remaining fractional part is
        truncated (towards zero). This is not a best rational approximation, 1/3 becomes
        33333/100000 with the default bound.

        Args:
            value (float): finite float to convert
            max_denominator (int, optional): upper bound for the denominator before reduction.
                Defaults to MAX_FLOAT_DENOMINATOR.

        Returns:
            Fraction: the normalized approximation of value
        """
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Cannot convert non-finite float {value} to a Fraction")
        if max_denominator < 1:
            raise ValueError(f"max_denominator must be positive, got {max_denominator}")

        scaled = value
        denom = 1
        while scaled != math.floor(scaled) and denom * DECIMAL_BASE <= max_denominator:
            scaled *= DECIMAL_BASE
            denom *= DECIMAL_BASE

        if scaled != math.floor(scaled):
            logger.debug(
                f"Truncated {value} at denominator {denom}, dropped fractional part {scaled - math.trunc(scaled)}"
            )
        return cls(math.trunc(scaled), denom)

    @classmethod
    def from_float32(
        cls,
        value: float | np.float32,
        max_denominator: int = MAX_FLOAT_DENOMINATOR,
    ) -> Fraction:
        """Widens a single precision value to double precision, then converts like ``from_float``."""
        return cls.from_float(float(np.float32(value)), max_denominator=max_denominator)

    # Operators
    def __neg__(self) -> Fraction:
        return self.negate()

    def __pos__(self) -> Fraction:
        return self

    def __add__(self, other: Any) -> Fraction:  # type: ignore[override]
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> Fraction:
        if not _is_operand(other):
            return NotImplemented
        return _as_fraction(other).add(self)

    def __sub__(self, other: Any) -> Fraction:
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> Fraction:
        if not _is_operand(other):
            return NotImplemented
        return _as_fraction(other).subtract(self)

    def __mul__(self, other: Any) -> Fraction:  # type: ignore[override]
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> Fraction:  # type: ignore[override]
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Fraction:
        if not _is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Any) -> Fraction:
        if not _is_operand(other):
            return NotImplemented
        return _as_fraction(other).divide(self)

    def __pow__(self, exponent: Any) -> Fraction:
        if isinstance(exponent, bool) or not isinstance(exponent, int | np.integer):
            return NotImplemented
        return self.power(exponent)

    def __eq__(self, other: Any) -> bool:  # type: ignore[override]
        if not _is_operand(other):
            return False
        return self.equals(other)

    def __ne__(self, other: Any) -> bool:  # type: ignore[override]
        if not _is_operand(other):
            return True
        return not self.equals(other)

    def __gt__(self, other: Any) -> bool:  # type: ignore[override]
        if not _is_operand(other):
            _unorderable(self, other, ">")
        return self.greater_than(other)

    def __ge__(self, other: Any) -> bool:  # type: ignore[override]
        if not _is_operand(other):
            _unorderable(self, other, ">=")
        return self.greater_than_or_equal(other)

    def __lt__(self, other: Any) -> bool:  # type: ignore[override]
        if not _is_operand(other):
            _unorderable(self, other, "<")
        return self.less_than(other)

    def __le__(self, other: Any) -> bool:  # type: ignore[override]
        if not _is_operand(other):
            _unorderable(self, other, "<=")
        return self.less_than_or_equal(other)
