"""
WordRenderer — английская фраза из CanonicalNumber

Сборка фразы:
- Каждая ненулевая целая группа → "X hundred Y" + имя разряда (ScaleNamer)
- Дробная часть → числитель + знаменатель ("fifty-two millionths")
- Целая и дробная части соединяются через "and"
- Отрицательные числа получают префикс "negative"

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль (включая -0.0) → ровно "zero"
2. "and" никогда не появляется внутри группы ("one hundred seventy-nine")
3. Нулевые группы пропускаются ("one million one", без "zero thousand")
4. Знаменатель в единственном числе только при дробном значении ровно 1
5. Нулевая целая часть при ненулевой дроби не произносится ("fifty-six thousandths")
"""

from typing import Final, Sequence

from num2english.core.domain.canonical_number import DIGIT_GROUP_SIZE, CanonicalNumber, Sign
from num2english.core.math.decimal_expansion import chunk_integer_digits
from num2english.naming.scale_namer import name_for_scale

# =============================================================================
# СЛОВАРЬ
# =============================================================================

ZERO_WORD: Final[str] = "zero"
NEGATIVE_MARKER: Final[str] = "negative"
FRACTION_JOINER: Final[str] = "and"
HUNDRED: Final[str] = "hundred"
ORDINAL_SUFFIX: Final[str] = "th"
PLURAL_SUFFIX: Final[str] = "s"

ONE_TO_NINETEEN: Final[tuple[str, ...]] = (
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

# Десятки 20..90 (индекс = цифра десятков - 2)
TENS: Final[tuple[str, ...]] = (
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)

# Префикс знаменателя по остатку от деления числа знаков на 3
DENOMINATOR_PREFIXES: Final[tuple[str, ...]] = ("", "ten", HUNDRED)


# =============================================================================
# ГРУППЫ
# =============================================================================


def render_hundreds(value: int) -> str:
    """
    Число 0..999 словами, без "and" и без имени разряда.

    Args:
        value: Значение группы (0..999)

    Returns:
        Фраза; "" для 0

    Raises:
        ValueError: Если value вне диапазона 0..999

    Examples:
        >>> render_hundreds(179)
        'one hundred seventy-nine'
        >>> render_hundreds(40)
        'forty'
    """
    if not 0 <= value <= 999:
        raise ValueError(f"Group value must be in 0..999, got {value}")

    hundreds, rest = divmod(value, 100)
    words = []

    if hundreds:
        words.append(ONE_TO_NINETEEN[hundreds - 1])
        words.append(HUNDRED)

    if rest:
        if rest < 20:
            words.append(ONE_TO_NINETEEN[rest - 1])
        else:
            tens, units = divmod(rest, 10)
            if units:
                words.append(f"{TENS[tens - 2]}-{ONE_TO_NINETEEN[units - 1]}")
            else:
                words.append(TENS[tens - 2])

    return " ".join(words)


def render_digit_groups(groups: Sequence[str]) -> str:
    """
    Целое число из digit groups (старшая первой) словами.

    Args:
        groups: Группы по три цифры; старшая может быть короче

    Returns:
        Фраза; "" если все группы нулевые
    """
    phrases = []
    for index, group in enumerate(reversed(groups)):
        value = int(group)
        if value == 0:
            continue

        phrase = render_hundreds(value)
        scale = name_for_scale(index)
        if scale:
            phrase = f"{phrase} {scale}"
        phrases.append(phrase)

    return " ".join(reversed(phrases))


# =============================================================================
# ДРОБНАЯ ЧАСТЬ
# =============================================================================


def denominator_word(decimal_places: int, plural: bool = False) -> str:
    """
    Знаменатель для дроби с данным числом знаков.

    Args:
        decimal_places: Литеральное число знаков после точки (>= 1)
        plural: Добавить окончание множественного числа

    Returns:
        "tenth", "hundredth", "thousandth", "ten-thousandth", "millionth", ...

    Raises:
        ValueError: Если decimal_places < 1

    Examples:
        >>> denominator_word(1)
        'tenth'
        >>> denominator_word(5, plural=True)
        'hundred-thousandths'
        >>> denominator_word(6)
        'millionth'
    """
    if decimal_places < 1:
        raise ValueError(f"decimal_places must be >= 1, got {decimal_places}")

    scale_index, remainder = divmod(decimal_places, DIGIT_GROUP_SIZE)
    parts = [DENOMINATOR_PREFIXES[remainder], name_for_scale(scale_index)]
    word = "-".join(part for part in parts if part) + ORDINAL_SUFFIX

    if plural:
        word += PLURAL_SUFFIX
    return word


def render_fraction(number: CanonicalNumber) -> str:
    """
    Дробная часть словами: числитель + знаменатель.

    Args:
        number: Каноническое число

    Returns:
        Фраза ("two hundred twelve thousandths"); "" если дробь нулевая
    """
    numerator_digits = number.fractional_digits.lstrip("0")
    if not numerator_digits:
        return ""

    numerator = render_digit_groups(chunk_integer_digits(numerator_digits))
    denominator = denominator_word(number.decimal_places, plural=numerator_digits != "1")
    return f"{numerator} {denominator}"


# =============================================================================
# RENDERER
# =============================================================================


class WordRenderer:
    """
    Рендеринг CanonicalNumber в английскую фразу.

    Stateless: один экземпляр можно использовать из нескольких потоков.
    """

    def render(self, number: CanonicalNumber) -> str:
        """
        Полная фраза для числа.

        Args:
            number: Каноническое число

        Returns:
            Фраза в lowercase ("negative sixty and two hundred twelve thousandths")
        """
        if number.sign == Sign.ZERO:
            return ZERO_WORD

        clauses = [
            clause
            for clause in (render_digit_groups(number.integer_groups), render_fraction(number))
            if clause
        ]
        words = f" {FRACTION_JOINER} ".join(clauses)

        if number.sign == Sign.NEGATIVE:
            words = f"{NEGATIVE_MARKER} {words}"
        return words


_RENDERER = WordRenderer()


def render(number: CanonicalNumber) -> str:
    """
    Рендеринг через общий экземпляр WordRenderer.

    Args:
        number: Каноническое число

    Returns:
        Английская фраза
    """
    return _RENDERER.render(number)
