"""
ScaleNamer — имена разрядов по системе Conway-Wechsler

Модуль называет группу из трёх цифр по её scale index:
- 0 → "" (единицы, имени нет)
- 1 → "thousand"
- n ≥ 2 → (n - 1)-й "-illion": million, billion, ..., decillion, ..., uncentillion

Имена строятся по правилу (латинские префиксы + эвфонические вставки), а не
по таблице, поэтому верхней границы индекса нет.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда lowercase, одно слово, без дефисов
2. Для n ≥ 2 имя оканчивается на "illion"
3. Функции чистые и детерминированные (таблицы — immutable константы)

АЛГОРИТМ (illion_name(m)):
    m разбивается на base-1000 группы (старшая первой)
    для каждой группы g:
        g == 0      → "n"
        g < 10      → базовый стем (m, b, tr, quadr, ...)
        иначе       → units + tens + hundreds префиксы, финальная гласная отбрасывается
        + "illi"
    + "on"

    1    → m·illi·on                → million
    101  → uncent·illi·on           → uncentillion
    1000 → m·illi·n·illi·on         → millinillion
"""

from typing import Final

# =============================================================================
# БАЗОВЫЕ ИМЕНА
# =============================================================================

THOUSAND: Final[str] = "thousand"

# illion_name(1..9)
BASE_ILLION_NAMES: Final[tuple[str, ...]] = (
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
)

# Стемы для групп 1..9 внутри многогрупповых имён (millimillion, billinillion)
BASE_STEMS: Final[tuple[str, ...]] = (
    "m",
    "b",
    "tr",
    "quadr",
    "quint",
    "sext",
    "sept",
    "oct",
    "non",
)

ZERO_STEM: Final[str] = "n"
STEM_JOINER: Final[str] = "illi"
ILLION_ENDING: Final[str] = "on"


# =============================================================================
# ПРЕФИКСЫ (индекс = цифра)
# =============================================================================

UNITS_PREFIXES: Final[tuple[str, ...]] = (
    "",
    "un",
    "duo",
    "tre",
    "quattuor",
    "quin",
    "se",
    "septe",
    "octo",
    "nove",
)

TENS_PREFIXES: Final[tuple[str, ...]] = (
    "",
    "deci",
    "viginti",
    "triginta",
    "quadraginta",
    "quinquaginta",
    "sexaginta",
    "septuaginta",
    "octoginta",
    "nonaginta",
)

HUNDREDS_PREFIXES: Final[tuple[str, ...]] = (
    "",
    "centi",
    "ducenti",
    "trecenti",
    "quadringenti",
    "quingenti",
    "sescenti",
    "septingenti",
    "octingenti",
    "nongenti",
)

# Маркеры: какие буквы может "принять" units-префикс перед этим компонентом
TENS_MARKERS: Final[tuple[frozenset[str], ...]] = (
    frozenset(),
    frozenset("n"),
    frozenset("ms"),
    frozenset("ns"),
    frozenset("ns"),
    frozenset("ns"),
    frozenset("n"),
    frozenset("n"),
    frozenset("mx"),
    frozenset(),
)

HUNDREDS_MARKERS: Final[tuple[frozenset[str], ...]] = (
    frozenset(),
    frozenset("nx"),
    frozenset("n"),
    frozenset("ns"),
    frozenset("ns"),
    frozenset("ns"),
    frozenset("n"),
    frozenset("n"),
    frozenset("mx"),
    frozenset(),
)

# units digit → ((маркер, форма), ...), первый совпавший маркер выигрывает
EUPHONIC_FORMS: Final[dict[int, tuple[tuple[str, str], ...]]] = {
    3: (("s", "tres"), ("x", "tres")),
    6: (("s", "ses"), ("x", "sex")),
    7: (("m", "septem"), ("n", "septen")),
    9: (("m", "novem"), ("n", "noven")),
}

_VOWELS: Final[str] = "aeiou"


# =============================================================================
# СБОРКА СТЕМОВ
# =============================================================================


def combining_units_prefix(units: int, markers: frozenset[str]) -> str:
    """
    Units-префикс с эвфонической вставкой перед следующим компонентом.

    Args:
        units: Цифра единиц (1..9)
        markers: Маркеры компонента, идущего сразу за префиксом

    Returns:
        Форма префикса (например, "tre" → "tres" перед "viginti")

    Examples:
        >>> combining_units_prefix(3, TENS_MARKERS[2])
        'tres'
        >>> combining_units_prefix(6, TENS_MARKERS[8])
        'sex'
        >>> combining_units_prefix(7, TENS_MARKERS[1])
        'septen'
    """
    for marker, form in EUPHONIC_FORMS.get(units, ()):
        if marker in markers:
            return form
    return UNITS_PREFIXES[units]


def latin_stem(group: int) -> str:
    """
    Стем одной base-1000 группы порядкового номера "-illion" (без "illi").

    Args:
        group: Значение группы (0..999)

    Returns:
        Стем: "n" для 0, базовый стем для 1..9, иначе композиция префиксов
        без финальной гласной

    Raises:
        ValueError: Если group вне диапазона 0..999
    """
    if not 0 <= group <= 999:
        raise ValueError(f"Stem group must be in 0..999, got {group}")

    if group == 0:
        return ZERO_STEM
    if group < 10:
        return BASE_STEMS[group - 1]

    hundreds, rest = divmod(group, 100)
    tens, units = divmod(rest, 10)

    # Вставка зависит от компонента сразу после units: tens, а если его нет — hundreds
    markers = TENS_MARKERS[tens] if tens else HUNDREDS_MARKERS[hundreds]

    prefix = ""
    if units:
        prefix += combining_units_prefix(units, markers)
    prefix += TENS_PREFIXES[tens] + HUNDREDS_PREFIXES[hundreds]

    if prefix[-1] in _VOWELS:
        prefix = prefix[:-1]
    return prefix


# =============================================================================
# ПУБЛИЧНЫЕ ФУНКЦИИ
# =============================================================================


def illion_name(ordinal: int) -> str:
    """
    Имя ordinal-го "-illion" по Conway-Wechsler.

    Args:
        ordinal: Порядковый номер (1 = million, 10 = decillion, 101 = uncentillion)

    Returns:
        Имя в lowercase, одно слово

    Raises:
        ValueError: Если ordinal < 1

    Examples:
        >>> illion_name(1)
        'million'
        >>> illion_name(96)
        'senonagintillion'
        >>> illion_name(1000)
        'millinillion'
    """
    if ordinal < 1:
        raise ValueError(f"Illion ordinal must be >= 1, got {ordinal}")

    if ordinal <= len(BASE_ILLION_NAMES):
        return BASE_ILLION_NAMES[ordinal - 1]

    groups = []
    while ordinal:
        ordinal, group = divmod(ordinal, 1000)
        groups.append(group)

    return "".join(latin_stem(group) + STEM_JOINER for group in reversed(groups)) + ILLION_ENDING


def name_for_scale(index: int) -> str:
    """
    Имя разряда для группы с данным scale index.

    Args:
        index: Позиция группы от десятичной точки (0 = единицы)

    Returns:
        "" для 0, "thousand" для 1, иначе illion_name(index - 1)

    Raises:
        ValueError: Если index отрицательный

    Examples:
        >>> name_for_scale(0)
        ''
        >>> name_for_scale(2)
        'million'
        >>> name_for_scale(102)
        'uncentillion'
    """
    if index < 0:
        raise ValueError(f"Scale index cannot be negative: {index}")

    if index == 0:
        return ""
    if index == 1:
        return THOUSAND
    return illion_name(index - 1)
