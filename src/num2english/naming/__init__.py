"""Naming — имена разрядов по системе Conway-Wechsler."""

from .scale_namer import (
    BASE_ILLION_NAMES,
    THOUSAND,
    illion_name,
    name_for_scale,
)

__all__ = [
    "BASE_ILLION_NAMES",
    "THOUSAND",
    "illion_name",
    "name_for_scale",
]
