"""Maximum denominator produced by the decimal-scaling float conversion. Conversion stops
multiplying by ``DECIMAL_BASE`` once the denominator reaches this bound, accepting the
remaining fractional error.
"""

MAX_FLOAT_DENOMINATOR: int = 100_000
DECIMAL_BASE: int = 10

"""Common signed integer widths for checked arithmetic, see fracx.core.glob"""
INT32_BITS: int = 32
INT64_BITS: int = 64
