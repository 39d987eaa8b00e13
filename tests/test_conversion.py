import math

import numpy as np
import plum
import pytest
from loguru import logger

from fracx import MAX_FLOAT_DENOMINATOR, Fraction, to_double, to_float, to_fraction


def test_to_double():
    """1/3 as double precision"""
    assert math.isclose(Fraction(1, 3).to_double(), 0.3333333333333333)
    assert Fraction(-1, 4).to_double() == -0.25
    assert float(Fraction(3, 2)) == 1.5
    assert isinstance(Fraction(1, 3).to_double(), float)


def test_to_float_is_single_precision():
    result = Fraction(1, 3).to_float()
    assert isinstance(result, np.float32)
    assert result == np.float32(1) / np.float32(3)
    assert Fraction(1, 2).to_float() == np.float32(0.5)


def test_from_float_exact_decimals():
    """0.5 -> 1/2, 0.25 -> 1/4, 0.3 survives the binary representation error"""
    assert tuple(Fraction.from_float(0.5)) == (1, 2)
    assert tuple(Fraction.from_float(0.25)) == (1, 4)
    assert tuple(Fraction.from_float(0.3)) == (3, 10)
    assert tuple(Fraction.from_float(-0.5)) == (-1, 2)
    assert tuple(Fraction.from_float(1.125)) == (9, 8)


def test_from_float_whole_numbers():
    assert tuple(Fraction.from_float(3.0)) == (3, 1)
    assert tuple(Fraction.from_float(-7.0)) == (-7, 1)
    assert tuple(Fraction.from_float(0.0)) == (0, 1)


def test_from_float_one_third_is_bounded():
    """1/3 is truncated at the default maximum denominator"""
    f = Fraction.from_float(1.0 / 3.0)
    assert f.denom <= MAX_FLOAT_DENOMINATOR
    assert tuple(f) == (33333, 100000)
    assert abs(f.to_double() - 1.0 / 3.0) <= 1.0 / MAX_FLOAT_DENOMINATOR


def test_from_float_truncates_towards_zero():
    f = Fraction.from_float(-1.0 / 3.0)
    assert tuple(f) == (-33333, 100000)
    assert f.to_double() > -1.0 / 3.0


def test_from_float_custom_max_denominator():
    assert tuple(Fraction.from_float(1.0 / 3.0, max_denominator=100)) == (33, 100)
    # bound that is not a power of ten: the denominator never exceeds it
    assert tuple(Fraction.from_float(1.0 / 3.0, max_denominator=5000)) == (333, 1000)
    assert tuple(Fraction.from_float(2.75, max_denominator=1)) == (2, 1)


def test_from_float_invalid_input():
    with pytest.raises(ValueError):
        Fraction.from_float(math.nan)
    with pytest.raises(ValueError):
        Fraction.from_float(math.inf)
    with pytest.raises(ValueError):
        Fraction.from_float(0.5, max_denominator=0)


def test_from_float_logs_truncation():
    messages = []
    logger.enable("fracx")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        Fraction.from_float(0.5)
        assert messages == []
        Fraction.from_float(1.0 / 3.0)
    finally:
        logger.remove(handler_id)
        logger.disable("fracx")
    assert len(messages) == 1
    assert "Truncated" in messages[0]


def test_from_float32_widens_first():
    assert tuple(Fraction.from_float32(np.float32(0.5))) == (1, 2)
    # float32(0.1) == 0.100000001490116..., truncated at five digits
    assert tuple(Fraction.from_float32(np.float32(0.1))) == (1, 10)
    assert tuple(Fraction.from_float32(0.75)) == (3, 4)


def test_round_trip_through_double():
    for f in [Fraction(1, 2), Fraction(-3, 8), Fraction(5, 4), Fraction(-17, 16)]:
        assert Fraction.from_float(f.to_double()) == f


def test_to_fraction_dispatch():
    f = Fraction(1, 2)
    assert to_fraction(f) is f
    assert tuple(to_fraction(3)) == (3, 1)
    assert tuple(to_fraction(np.int32(-4))) == (-4, 1)
    assert tuple(to_fraction(0.25)) == (1, 4)
    assert tuple(to_fraction(np.float64(0.2))) == (1, 5)
    assert tuple(to_fraction(np.float32(0.5))) == (1, 2)
    assert tuple(to_fraction(1.0 / 3.0, max_denominator=10)) == (3, 10)


def test_to_fraction_unsupported_type():
    with pytest.raises(plum.NotFoundLookupError):
        to_fraction("1/2")


def test_conversion_rejects_bool():
    """bool is not a valid integer input, like for the Fraction constructor"""
    for fn in [to_fraction, to_float, to_double]:
        with pytest.raises(TypeError):
            fn(True)


def test_to_float_and_to_double_dispatch():
    assert to_double(Fraction(1, 4)) == 0.25
    assert to_double(2) == 2.0
    assert isinstance(to_float(Fraction(1, 4)), np.float32)
    assert to_float(np.int64(3)) == np.float32(3.0)
    with pytest.raises(plum.NotFoundLookupError):
        to_double(0.5)
