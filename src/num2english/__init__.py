"""
num2english — имена чисел на английском.

Большие разряды называются по системе Conway-Wechsler
(thousand, million, ..., decillion, ..., uncentillion).

    >>> from num2english import to_english
    >>> to_english(60.212)
    'sixty and two hundred twelve thousandths'
"""

from num2english.core.contracts import (
    dump_canonical_number,
    load_canonical_number,
    validate_canonical_number,
)
from num2english.core.domain import CanonicalNumber, Sign
from num2english.core.math import SplitNumber, UnsupportedFormat, canonicalize
from num2english.naming import illion_name, name_for_scale
from num2english.rendering import WordRenderer, render, to_english

__all__ = [
    # Entry point
    "to_english",
    # Canonicalization
    "canonicalize",
    "CanonicalNumber",
    "Sign",
    "SplitNumber",
    "UnsupportedFormat",
    # Naming
    "name_for_scale",
    "illion_name",
    # Rendering
    "WordRenderer",
    "render",
    # Contracts
    "dump_canonical_number",
    "load_canonical_number",
    "validate_canonical_number",
]
