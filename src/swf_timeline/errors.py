"""Exceptions raised by the timeline model."""


class TimelineError(Exception):
    """Base exception for all timeline errors."""
    pass


class InvalidArgumentError(TimelineError, ValueError):
    """A frame list was replaced with, or extended by, ``None``."""
    pass


class FrameRangeError(TimelineError, IndexError):
    """A frame number does not address a slot of the merged timeline."""

    def __init__(self, number: int, layer: int | None = None):
        self.number = number
        self.layer = layer
        where = f" on layer {layer}" if layer is not None else ""
        super().__init__(f"Frame number {number}{where} is out of range (must be >= 1)")


class GlyphNotFoundError(TimelineError, KeyError):
    """A character has no entry in a font's glyph table."""

    def __init__(self, character: str):
        self.character = character
        super().__init__(character)

    def __str__(self) -> str:
        return f"No glyph for character {self.character!r}"


class MovieFormatError(TimelineError, ValueError):
    """A movie document could not be decoded."""
    pass
