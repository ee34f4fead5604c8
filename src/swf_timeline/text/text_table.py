"""Lay out static text using a font's glyph table."""

from typing import Sequence

from ..constants import EM_SQUARE
from ..datatypes import Bounds, GlyphIndex, TextSpan
from ..errors import GlyphNotFoundError
from ..tags import DefineFont, DefineText


class TextTable:
    """
    Glyph table for one font at a fixed size.

    Each character maps to a GlyphIndex whose advance is already scaled to
    the requested size, so the same objects are shared by every span.
    """

    def __init__(self, font: DefineFont, font_size: int):
        """
        Args:
            font: Font definition with advances in EM-square units
            font_size: Size of the text in twips
        """
        scale = font_size / EM_SQUARE
        self.identifier = font.identifier
        self.size = font_size
        self.ascent = int(font.ascent * scale)
        self.descent = int(font.descent * scale)
        self._characters: dict[str, GlyphIndex] = {
            chr(code): GlyphIndex(index, int(advance * scale))
            for index, (code, advance) in enumerate(
                zip(font.codes, font.advances, strict=True)
            )
        }

    def __contains__(self, character: str) -> bool:
        return character in self._characters

    @property
    def line_height(self) -> int:
        return self.ascent + self.descent

    def glyph(self, character: str) -> GlyphIndex:
        try:
            return self._characters[character]
        except KeyError:
            raise GlyphNotFoundError(character) from None

    def bounds_for_text(self, text: str) -> Bounds:
        """Bounding box enclosing one line of text drawn at the origin."""
        total = sum(self.glyph(character).advance for character in text)
        return Bounds(0, -self.ascent, total, self.descent)

    def characters_for_text(self, text: str) -> list[GlyphIndex]:
        return [self.glyph(character) for character in text]

    def define_span(
        self, text: str, color: tuple[int, ...], x: int, y: int
    ) -> TextSpan:
        return TextSpan(self.identifier, self.size, color, x, y, self.characters_for_text(text))

    def define_text(self, identifier: int, text: str, color: tuple[int, ...]) -> DefineText:
        """Define a static text field showing a single line."""
        return DefineText(
            identifier=identifier,
            bounds=self.bounds_for_text(text),
            spans=[self.define_span(text, color, 0, 0)],
        )

    def define_text_block(
        self,
        identifier: int,
        lines: Sequence[str],
        color: tuple[int, ...],
        line_spacing: int | None = None,
    ) -> DefineText:
        """
        Define a static text field showing several lines.

        Args:
            identifier: Identifier of the new text definition
            lines: Text of each line, top to bottom
            color: Colour of the text
            line_spacing: Distance between baselines; defaults to the line height
        """
        if line_spacing is None:
            line_spacing = self.line_height

        x_min = y_min = x_max = y_max = 0
        y_offset = self.ascent
        spans: list[TextSpan] = []

        for line_number, text in enumerate(lines):
            spans.append(self.define_span(text, color, 0, y_offset))
            bounds = self.bounds_for_text(text)

            if line_number == 0:
                y_min = bounds.min_y
                y_max = bounds.max_y
            else:
                y_max += line_spacing

            if line_number == len(lines) - 1:
                y_max += bounds.height

            x_min = min(x_min, bounds.min_x)
            x_max = max(x_max, bounds.max_x)
            y_offset += line_spacing

        return DefineText(
            identifier=identifier,
            bounds=Bounds(x_min, y_min, x_max, y_max),
            spans=spans,
        )
