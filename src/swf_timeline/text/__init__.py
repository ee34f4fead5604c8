"""Text layout helpers."""

from .fonts import DEFAULT_CHARACTERS, define_font_from_pil, load_truetype_font
from .text_table import TextTable

__all__ = [
    "DEFAULT_CHARACTERS",
    "TextTable",
    "define_font_from_pil",
    "load_truetype_font",
]
