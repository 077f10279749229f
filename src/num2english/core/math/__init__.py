"""
Core math modules для num2english

Точная десятичная запись чисел и разбиение на digit groups.
"""

from num2english.core.math.decimal_expansion import (
    # Exceptions
    UnsupportedFormat,
    # Types
    SplitNumber,
    # Functions
    canonicalize,
    chunk_fractional_digits,
    chunk_integer_digits,
    expand_to_plain_decimal,
    is_valid_float,
    split_number,
)

__all__ = [
    # Decimal Expansion — Exceptions
    "UnsupportedFormat",
    # Decimal Expansion — Types
    "SplitNumber",
    # Decimal Expansion — Functions
    "canonicalize",
    "chunk_fractional_digits",
    "chunk_integer_digits",
    "expand_to_plain_decimal",
    "is_valid_float",
    "split_number",
]
