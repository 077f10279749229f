"""
Converter — точка входа: число → английская фраза

to_english(value) = render(canonicalize(value))
"""

import logging

from num2english.core.math.decimal_expansion import UnsupportedFormat, canonicalize
from num2english.rendering.word_renderer import render

logger = logging.getLogger(__name__)


def to_english(value: object) -> str:
    """
    Имя числа на английском.

    Args:
        value: int, float, Decimal или числовая строка

    Returns:
        Фраза, например 60.212 → "sixty and two hundred twelve thousandths"

    Raises:
        UnsupportedFormat: Если каноническая десятичная запись требует
            научной нотации или недоступна

    Examples:
        >>> to_english(60)
        'sixty'
        >>> to_english(-60.212)
        'negative sixty and two hundred twelve thousandths'
    """
    try:
        number = canonicalize(value)
    except UnsupportedFormat:
        logger.warning("Rejected %r: no plain decimal expansion", value)
        raise

    logger.debug(
        "Converting %r: sign=%s, %d integer group(s), %d decimal place(s)",
        value,
        number.sign.value,
        len(number.integer_groups),
        number.decimal_places,
    )
    return render(number)
