"""
Contract Validation Module

Модуль для валидации JSON контрактов num2english.
"""

from .validators import (
    CanonicalNumberValidator,
    ContractValidator,
    SchemaLoader,
    dump_canonical_number,
    load_canonical_number,
    validate_canonical_number,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CanonicalNumberValidator",
    # Functions
    "dump_canonical_number",
    "load_canonical_number",
    "validate_canonical_number",
]
