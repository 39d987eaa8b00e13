import itertools

from fracx.core.fraction import Fraction
from fracx.core.utils import gcd


def sample_fractions() -> list[Fraction]:
    raw = [(0, 1), (1, 3), (2, 3), (-1, 2), (5, -7), (-6, -4), (7, 1), (-12, 5), (100, 33)]
    return [Fraction(n, d) for n, d in raw]


def fraction_pairs() -> list[tuple[Fraction, Fraction]]:
    return list(itertools.product(sample_fractions(), repeat=2))


def assert_normalized(f: Fraction):
    assert f.denom > 0
    assert gcd(abs(f.num), f.denom) == 1
    if f.num == 0:
        assert f.denom == 1
