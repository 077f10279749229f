"""
Domain models and value objects.

Contains the canonical number representation consumed by the renderer.
"""

from num2english.core.domain.canonical_number import (
    DIGIT_GROUP_SIZE,
    CanonicalNumber,
    Sign,
)

__all__ = [
    "DIGIT_GROUP_SIZE",
    "CanonicalNumber",
    "Sign",
]
