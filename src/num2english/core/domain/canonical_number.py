"""
CanonicalNumber — каноническое представление числа для рендеринга

Immutable Pydantic модель: знак + группы по три цифры для целой и дробной части.
Соответствует JSON Schema контракту (core/contracts/schema/canonical_number.json).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. integer_groups непустой; старшая группа 1..3 цифры, остальные ровно 3
2. fractional_groups — ровно по 3 цифры, дополнены нулями справа
3. len(fractional_groups) == ceil(decimal_places / 3), padding только нули
4. sign == ZERO тогда и только тогда, когда все цифры нулевые
"""

import re
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator, model_validator

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DIGIT_GROUP_SIZE: Final[int] = 3

_LEADING_GROUP_PATTERN: Final = re.compile(r"[0-9]{1,3}")
_FULL_GROUP_PATTERN: Final = re.compile(r"[0-9]{3}")


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак числа"""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    ZERO = "zero"


# =============================================================================
# CANONICAL NUMBER MODEL
# =============================================================================


class CanonicalNumber(BaseModel):
    """
    Каноническое число: знак, целые и дробные digit groups.

    Создаётся один раз на вызов конверсии и не изменяется (frozen=True).
    decimal_places хранит литеральную длину дробной части исходного текста:
    именно она выбирает знаменатель ("thousandths" для трёх знаков),
    а не математически сокращённое значение.
    """

    sign: Sign = Field(..., description="Знак числа (positive/negative/zero)")
    integer_groups: tuple[str, ...] = Field(
        ..., min_length=1, description="Группы целой части, старшая первой"
    )
    fractional_groups: tuple[str, ...] = Field(
        default=(), description="Группы дробной части, сразу после точки"
    )
    decimal_places: int = Field(
        default=0, ge=0, description="Литеральное число знаков после точки"
    )

    model_config = {"frozen": True}

    @field_validator("integer_groups")
    @classmethod
    def validate_integer_groups(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Старшая группа 1..3 цифры, остальные ровно 3"""
        for position, group in enumerate(v):
            pattern = _LEADING_GROUP_PATTERN if position == 0 else _FULL_GROUP_PATTERN
            if pattern.fullmatch(group) is None:
                raise ValueError(f"Invalid integer digit group at {position}: {group!r}")
        return v

    @field_validator("fractional_groups")
    @classmethod
    def validate_fractional_groups(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Все дробные группы ровно 3 цифры"""
        for position, group in enumerate(v):
            if _FULL_GROUP_PATTERN.fullmatch(group) is None:
                raise ValueError(f"Invalid fractional digit group at {position}: {group!r}")
        return v

    @model_validator(mode="after")
    def validate_layout(self) -> "CanonicalNumber":
        """
        Согласованность decimal_places, padding и знака.
        """
        expected_groups = -(-self.decimal_places // DIGIT_GROUP_SIZE)
        if len(self.fractional_groups) != expected_groups:
            raise ValueError(
                f"decimal_places={self.decimal_places} requires {expected_groups} "
                f"fractional group(s), got {len(self.fractional_groups)}"
            )

        padding = "".join(self.fractional_groups)[self.decimal_places:]
        if padding.strip("0"):
            raise ValueError(f"Fractional padding must be zeros, got {padding!r}")

        if (self.sign == Sign.ZERO) != self.is_zero:
            raise ValueError(f"sign={self.sign.value} contradicts digits")

        return self

    @property
    def integer_digits(self) -> str:
        """Цифры целой части одной строкой"""
        return "".join(self.integer_groups)

    @property
    def fractional_digits(self) -> str:
        """Литеральные цифры дробной части (без padding)"""
        return "".join(self.fractional_groups)[: self.decimal_places]

    @property
    def has_fraction(self) -> bool:
        """Есть ли ненулевая дробная часть"""
        return bool(self.fractional_digits.strip("0"))

    @property
    def is_zero(self) -> bool:
        """Все цифры нулевые"""
        return not self.integer_digits.strip("0") and not self.has_fraction
