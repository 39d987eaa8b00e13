from __future__ import annotations

import jax

from fracx.core.fraction import Fraction

_REGISTERED: bool = False


def _flatten_fraction(f: Fraction) -> tuple[tuple[()], tuple[int, int]]:
    # no leaves: numerator and denominator are static metadata, so a Fraction is never traced
    return (), (f.num, f.denom)


def _unflatten_fraction(aux_data: tuple[int, int], children: tuple[()]) -> Fraction:
    del children
    return Fraction(*aux_data)


def register_fraction_pytree() -> None:
    """Registers Fraction as a leafless pytree node. Safe to call multiple times."""
    global _REGISTERED
    if _REGISTERED:
        return
    jax.tree_util.register_pytree_node(Fraction, _flatten_fraction, _unflatten_fraction)
    _REGISTERED = True

