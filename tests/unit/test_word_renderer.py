"""
Тесты для WordRenderer — английская фраза из CanonicalNumber

Проверяемые инварианты:
1. Ноль → "zero"
2. Группы 0..999 рендерятся инъективно и без "and"
3. Нулевые группы пропускаются
4. Знаменатель: единственное число только для значения 1
5. Отрицательное число = "negative " + фраза модуля
6. Нулевая целая часть при дроби не произносится
"""

import pytest

from num2english.core.domain import CanonicalNumber, Sign
from num2english.core.math import canonicalize
from num2english.rendering.word_renderer import (
    WordRenderer,
    denominator_word,
    render,
    render_digit_groups,
    render_fraction,
    render_hundreds,
)


def _fraction(digits: str, integer_groups: tuple[str, ...] = ("0",)) -> CanonicalNumber:
    """CanonicalNumber с заданными дробными цифрами."""
    padded = digits.ljust(-(-len(digits) // 3) * 3, "0")
    return CanonicalNumber(
        sign=Sign.POSITIVE,
        integer_groups=integer_groups,
        fractional_groups=tuple(padded[i : i + 3] for i in range(0, len(padded), 3)),
        decimal_places=len(digits),
    )


# =============================================================================
# ТЕСТЫ: Группы
# =============================================================================


class TestRenderHundreds:
    """Тесты render_hundreds."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, ""),
            (1, "one"),
            (10, "ten"),
            (13, "thirteen"),
            (19, "nineteen"),
            (20, "twenty"),
            (21, "twenty-one"),
            (40, "forty"),
            (99, "ninety-nine"),
            (100, "one hundred"),
            (101, "one hundred one"),
            (110, "one hundred ten"),
            (179, "one hundred seventy-nine"),
            (255, "two hundred fifty-five"),
            (999, "nine hundred ninety-nine"),
        ],
    )
    def test_values(self, value: int, expected: str) -> None:
        assert render_hundreds(value) == expected

    def test_injective(self) -> None:
        """Разные значения 0..999 → разные фразы."""
        phrases = [render_hundreds(value) for value in range(1000)]
        assert len(set(phrases)) == 1000

    def test_no_and_inside_group(self) -> None:
        """'and' никогда не появляется внутри группы."""
        for value in range(1000):
            assert "and" not in render_hundreds(value).split()

    def test_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            render_hundreds(1000)
        with pytest.raises(ValueError):
            render_hundreds(-1)


class TestRenderDigitGroups:
    """Тесты render_digit_groups."""

    def test_scales_appended(self) -> None:
        assert (
            render_digit_groups(("123", "456"))
            == "one hundred twenty-three thousand four hundred fifty-six"
        )

    def test_zero_groups_skipped(self) -> None:
        """Нулевые группы не дают 'zero thousand'."""
        assert render_digit_groups(("1", "000", "001")) == "one million one"
        assert render_digit_groups(("12", "000")) == "twelve thousand"

    def test_all_zero(self) -> None:
        assert render_digit_groups(("0",)) == ""


# =============================================================================
# ТЕСТЫ: Дробная часть
# =============================================================================


class TestDenominatorWord:
    """Тесты denominator_word."""

    @pytest.mark.parametrize(
        "places, expected",
        [
            (1, "tenth"),
            (2, "hundredth"),
            (3, "thousandth"),
            (4, "ten-thousandth"),
            (5, "hundred-thousandth"),
            (6, "millionth"),
            (7, "ten-millionth"),
            (9, "billionth"),
            (12, "trillionth"),
            (33, "decillionth"),
        ],
    )
    def test_singular(self, places: int, expected: str) -> None:
        assert denominator_word(places) == expected

    def test_plural(self) -> None:
        assert denominator_word(3, plural=True) == "thousandths"
        assert denominator_word(4, plural=True) == "ten-thousandths"

    def test_zero_places(self) -> None:
        with pytest.raises(ValueError):
            denominator_word(0)


class TestRenderFraction:
    """Тесты render_fraction и pluralization."""

    def test_singular_when_one(self) -> None:
        """Значение ровно 1 → единственное число."""
        assert render_fraction(_fraction("1")) == "one tenth"
        assert render_fraction(_fraction("01")) == "one hundredth"
        assert render_fraction(_fraction("000001")) == "one millionth"

    def test_plural_otherwise(self) -> None:
        assert render_fraction(_fraction("10")) == "ten hundredths"
        assert render_fraction(_fraction("000052")) == "fifty-two millionths"
        assert render_fraction(_fraction("212")) == "two hundred twelve thousandths"

    def test_large_numerator(self) -> None:
        """Числитель использует полные имена разрядов."""
        assert render_fraction(_fraction("5678")) == (
            "five thousand six hundred seventy-eight ten-thousandths"
        )

    def test_empty_or_zero_fraction(self) -> None:
        assert render_fraction(_fraction("", integer_groups=("5",))) == ""
        assert render_fraction(_fraction("000", integer_groups=("5",))) == ""


# =============================================================================
# ТЕСТЫ: WordRenderer
# =============================================================================


class TestWordRenderer:
    """Тесты WordRenderer.render."""

    def test_zero(self) -> None:
        """Ноль → 'zero', дробные нули игнорируются."""
        number = CanonicalNumber(
            sign=Sign.ZERO,
            integer_groups=("0",),
            fractional_groups=("000",),
            decimal_places=2,
        )
        assert WordRenderer().render(number) == "zero"

    def test_integer_and_fraction_joined(self) -> None:
        assert render(_fraction("000052", integer_groups=("6",))) == (
            "six and fifty-two millionths"
        )
        assert render(_fraction("000001", integer_groups=("52",))) == (
            "fifty-two and one millionth"
        )

    def test_zero_integer_omitted(self) -> None:
        """Нулевая целая часть при дроби не произносится."""
        assert render(_fraction("056")) == "fifty-six thousandths"

    def test_zero_fraction_omitted(self) -> None:
        assert render(_fraction("0", integer_groups=("6",))) == "six"

    @pytest.mark.parametrize("value", ["1", "179", "60.212", "0.5", "123456.000001"])
    def test_negative_mirrors_absolute(self, value: str) -> None:
        """Отрицательное число = 'negative ' + фраза модуля."""
        positive = render(canonicalize(value))
        negative = render(canonicalize("-" + value))
        assert negative == f"negative {positive}"

    def test_module_render_matches_instance(self) -> None:
        number = canonicalize("1001.25")
        assert render(number) == WordRenderer().render(number)
