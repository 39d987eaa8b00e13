from __future__ import annotations
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from loguru import logger

"""Signed integer width used for checked arithmetic. If None, numerators and denominators are
arbitrary precision python integers and can never overflow. If set to a width (e.g. 32), every
intermediate numerator, denominator and comparison product is checked against the signed range
of that width and ArithmeticOverflow is raised instead of wrapping around.
The setting is scoped to the current thread / asyncio task, new threads start unchecked.
"""
CHECKED_INT_BITS: ContextVar[int | None] = ContextVar("CHECKED_INT_BITS", default=None)


@contextmanager
def checked_int_bits(bits: int | None) -> Iterator[None]:
    """Temporarily set ``CHECKED_INT_BITS`` in the current context.

    Args:
        bits (int | None): Signed integer width to check against, or None to disable checking.
    """
    if bits is not None and bits < 2:
        raise ValueError(f"Integer width must be at least 2 bits, got {bits}")
    token = CHECKED_INT_BITS.set(bits)
    logger.debug(f"Checked integer width set to {bits} (was {token.old_value})")
    try:
        yield
    finally:
        CHECKED_INT_BITS.reset(token)
        logger.debug(f"Checked integer width restored to {CHECKED_INT_BITS.get()}")
