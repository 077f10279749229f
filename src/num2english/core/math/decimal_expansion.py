"""
Decimal Expansion — каноническая десятичная запись входного числа

Модуль превращает входное значение в CanonicalNumber:
- Определение знака
- Точная позиционная десятичная запись (без экспоненты)
- Разделение по десятичной точке
- Разбиение на группы по три цифры

Поддерживаемые типы:
- int (и numbers.Integral): str(int(value))
- float: кратчайшее round-trip представление (repr), развёрнутое без экспоненты
- Decimal: str(value), если он не использует научную нотацию
- str: литерал вида [+-]digits[.digits]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Научная нотация никогда не доходит до рендеринга (UnsupportedFormat)
2. NaN/Inf никогда не доходят до рендеринга (UnsupportedFormat)
3. Дробные цифры берутся из текста как есть, без независимого округления
"""

import math
import numbers
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Final

from num2english.core.domain.canonical_number import DIGIT_GROUP_SIZE, CanonicalNumber, Sign

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# sign, integer digits, fractional digits
_PLAIN_DECIMAL_PATTERN: Final = re.compile(r"([+-]?)([0-9]*)(?:\.([0-9]*))?")

_EXPONENT_MARKERS: Final[str] = "eE"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnsupportedFormat(ValueError):
    """
    Каноническая десятичная запись числа недоступна.

    Возникает, когда текстовая форма значения требует научной нотации
    (Decimal("1E+5"), "1e5"), значение не конечно (NaN/Inf) или тип
    не является поддерживаемым числом.
    """

    pass


# =============================================================================
# RESULT TYPES
# =============================================================================


@dataclass(frozen=True)
class SplitNumber:
    """Число, разделённое по десятичной точке."""

    negative: bool
    integer_digits: str
    fractional_digits: str


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, что float не является NaN или Inf.

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


# =============================================================================
# ДЕСЯТИЧНАЯ ЗАПИСЬ
# =============================================================================


def _expand_integer(value: numbers.Integral) -> str:
    try:
        return str(int(value))
    except ValueError as e:
        # Превышен лимит интерпретатора на длину int → str
        raise UnsupportedFormat(f"Integer too long for decimal expansion: {e}") from e


def _expand_float(value: float) -> str:
    if not is_valid_float(value):
        raise UnsupportedFormat(f"Non-finite float has no decimal expansion: {value!r}")
    # repr даёт кратчайшие round-trip цифры; формат "f" разворачивает экспоненту
    return format(Decimal(repr(value)), "f")


def _expand_decimal(value: Decimal) -> str:
    if not value.is_finite():
        raise UnsupportedFormat(f"Non-finite Decimal has no decimal expansion: {value!r}")

    text = str(value)
    if any(marker in text for marker in _EXPONENT_MARKERS):
        raise UnsupportedFormat(f"Scientific notation is not supported: {text}")
    return text


def _expand_text(value: str) -> str:
    text = value.strip()
    if any(marker in text for marker in _EXPONENT_MARKERS):
        raise UnsupportedFormat(f"Scientific notation is not supported: {text!r}")

    # Проверка формы литерала
    split_number(text)
    return text


def expand_to_plain_decimal(value: object) -> str:
    """
    Точная позиционная десятичная запись значения.

    Args:
        value: int, float, Decimal или числовая строка

    Returns:
        Текст вида [-]digits[.digits] без экспоненты

    Raises:
        UnsupportedFormat: Если запись требует научной нотации, значение
            не конечно или тип не поддерживается

    Examples:
        >>> expand_to_plain_decimal(60.212)
        '60.212'
        >>> expand_to_plain_decimal(1e22)
        '10000000000000000000000'
        >>> expand_to_plain_decimal(Decimal("1234.5678"))
        '1234.5678'
    """
    # bool — подкласс int, но не числовая величина
    if isinstance(value, bool):
        raise UnsupportedFormat("Booleans are not numbers")

    if isinstance(value, numbers.Integral):
        return _expand_integer(value)
    if isinstance(value, float):
        return _expand_float(value)
    if isinstance(value, Decimal):
        return _expand_decimal(value)
    if isinstance(value, str):
        return _expand_text(value)

    raise UnsupportedFormat(f"Unsupported numeric type: {type(value).__name__}")


def split_number(text: str) -> SplitNumber:
    """
    Разделение десятичной записи на знак, целую и дробную части.

    Ведущие нули целой части отбрасываются ("" → "0"), дробная часть
    сохраняется как есть (включая хвостовые нули).

    Args:
        text: Запись вида [+-]digits[.digits]

    Returns:
        SplitNumber

    Raises:
        UnsupportedFormat: Если текст не является простой десятичной записью
    """
    match = _PLAIN_DECIMAL_PATTERN.fullmatch(text)
    if match is None or not (match.group(2) or match.group(3)):
        raise UnsupportedFormat(f"Not a plain decimal numeral: {text!r}")

    sign, integer_digits, fractional_digits = match.groups()
    return SplitNumber(
        negative=(sign == "-"),
        integer_digits=integer_digits.lstrip("0") or "0",
        fractional_digits=fractional_digits or "",
    )


# =============================================================================
# DIGIT GROUPS
# =============================================================================


def chunk_integer_digits(digits: str) -> tuple[str, ...]:
    """
    Разбиение целых цифр на группы по три, старшая группа может быть короче.

    Examples:
        >>> chunk_integer_digits("1234567")
        ('1', '234', '567')
    """
    if not digits:
        raise ValueError("Integer digits cannot be empty")

    head = len(digits) % DIGIT_GROUP_SIZE or DIGIT_GROUP_SIZE
    groups = [digits[:head]]
    groups.extend(
        digits[start : start + DIGIT_GROUP_SIZE]
        for start in range(head, len(digits), DIGIT_GROUP_SIZE)
    )
    return tuple(groups)


def chunk_fractional_digits(digits: str) -> tuple[str, ...]:
    """
    Разбиение дробных цифр на группы по три, последняя дополняется нулями справа.

    Examples:
        >>> chunk_fractional_digits("0052")
        ('005', '200')
    """
    return tuple(
        digits[start : start + DIGIT_GROUP_SIZE].ljust(DIGIT_GROUP_SIZE, "0")
        for start in range(0, len(digits), DIGIT_GROUP_SIZE)
    )


# =============================================================================
# CANONICALIZATION
# =============================================================================


def canonicalize(value: object) -> CanonicalNumber:
    """
    Построение CanonicalNumber из входного значения.

    Args:
        value: int, float, Decimal или числовая строка

    Returns:
        CanonicalNumber (frozen)

    Raises:
        UnsupportedFormat: Если десятичная запись недоступна
    """
    split = split_number(expand_to_plain_decimal(value))

    if split.integer_digits == "0" and not split.fractional_digits.strip("0"):
        sign = Sign.ZERO
    elif split.negative:
        sign = Sign.NEGATIVE
    else:
        sign = Sign.POSITIVE

    return CanonicalNumber(
        sign=sign,
        integer_groups=chunk_integer_digits(split.integer_digits),
        fractional_groups=chunk_fractional_digits(split.fractional_digits),
        decimal_places=len(split.fractional_digits),
    )
