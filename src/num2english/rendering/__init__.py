"""Rendering — сборка английской фразы из канонического числа."""

from .converter import to_english
from .word_renderer import (
    WordRenderer,
    denominator_word,
    render,
    render_digit_groups,
    render_fraction,
    render_hundreds,
)

__all__ = [
    "WordRenderer",
    "denominator_word",
    "render",
    "render_digit_groups",
    "render_fraction",
    "render_hundreds",
    "to_english",
]
