# ruff: noqa: F811
import numpy as np
from plum import dispatch, overload

from fracx.core.constants import MAX_FLOAT_DENOMINATOR
from fracx.core.fraction import Fraction

# unsupported argument types raise plum.NotFoundLookupError, bool matches the int overloads
# and is rejected by Fraction with a TypeError


## to_fraction #####################################
@overload
def to_fraction(
    x: Fraction,
    max_denominator: int = MAX_FLOAT_DENOMINATOR,
) -> Fraction:
    del max_denominator
    return x


@overload
def to_fraction(
    x: int | np.integer,
    max_denominator: int = MAX_FLOAT_DENOMINATOR,
) -> Fraction:
    del max_denominator
    return Fraction(x)


@overload
def to_fraction(
    x: np.float32,
    max_denominator: int = MAX_FLOAT_DENOMINATOR,
) -> Fraction:
    return Fraction.from_float32(x, max_denominator=max_denominator)


@overload
def to_fraction(
    x: float | np.float64,
    max_denominator: int = MAX_FLOAT_DENOMINATOR,
) -> Fraction:
    return Fraction.from_float(x, max_denominator=max_denominator)


@dispatch
def to_fraction(x, max_denominator=MAX_FLOAT_DENOMINATOR):  # type: ignore[empty-body]
    ...


## to_float #####################################
@overload
def to_float(x: Fraction) -> np.float32:
    return x.to_float()


@overload
def to_float(x: int | np.integer) -> np.float32:
    return Fraction(x).to_float()


@dispatch
def to_float(x):  # type: ignore[empty-body]
    ...


## to_double #####################################
@overload
def to_double(x: Fraction) -> float:
    return x.to_double()


@overload
def to_double(x: int | np.integer) -> float:
    return Fraction(x).to_double()


@dispatch
def to_double(x):  # type: ignore[empty-body]
    ...
