"""Build font definitions from fonts Pillow can open."""

from pathlib import Path
from typing import Protocol

from PIL import ImageFont

from ..constants import EM_SQUARE
from ..tags import DefineFont

DEFAULT_CHARACTERS = "".join(chr(code) for code in range(32, 127))


class MeasurableFont(Protocol):
    """The parts of ``PIL.ImageFont.FreeTypeFont`` used here."""

    def getlength(self, text: str) -> float: ...

    def getmetrics(self) -> tuple[int, int]: ...

    def getname(self) -> tuple[str | None, str | None]: ...


def define_font_from_pil(
    identifier: int,
    pil_font: MeasurableFont,
    characters: str = DEFAULT_CHARACTERS,
    name: str | None = None,
) -> DefineFont:
    """
    Create a DefineFont from a font loaded at the EM-square size.

    Args:
        identifier: Identifier of the new definition
        pil_font: Font opened with a size of ``EM_SQUARE``
        characters: Characters to include, duplicates ignored
        name: Font name; taken from the font when omitted
    """
    unique = list(dict.fromkeys(characters))
    ascent, descent = pil_font.getmetrics()
    if name is None:
        family, _style = pil_font.getname()
        name = family or ""
    return DefineFont(
        identifier=identifier,
        name=name,
        codes=[ord(character) for character in unique],
        advances=[round(pil_font.getlength(character)) for character in unique],
        ascent=ascent,
        descent=descent,
    )


def load_truetype_font(
    identifier: int,
    path: str | Path,
    characters: str = DEFAULT_CHARACTERS,
) -> DefineFont:
    """
    Open a TrueType/OpenType file and build its DefineFont.

    Raises:
        OSError: If Pillow cannot read the file
    """
    pil_font = ImageFont.truetype(str(path), EM_SQUARE)
    return define_font_from_pil(identifier, pil_font, characters)
