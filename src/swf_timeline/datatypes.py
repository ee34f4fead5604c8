"""Value types shared by tags and the text layout helpers."""

from dataclasses import dataclass, field, fields
from typing import Any


def describe(value: Any) -> str:
    """Render a value the way tag dumps show it."""
    if isinstance(value, list):
        return "[" + ", ".join(describe(item) for item in value) + "]"
    if isinstance(value, tuple):
        return "(" + ", ".join(describe(item) for item in value) + ")"
    if isinstance(value, bytes):
        return f"<{len(value)} bytes>"
    return str(value)


class Describable:
    """Mixin giving dataclasses a ``Name: { field=value; ... }`` string form."""

    def __str__(self) -> str:
        parts = "; ".join(
            f"{item.name}={describe(getattr(self, item.name))}" for item in fields(self)
        )
        name = type(self).__name__
        return f"{name}: {{ {parts} }}" if parts else name


@dataclass(frozen=True)
class Bounds(Describable):
    """Axis-aligned bounding box in twips."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    def to_dict(self) -> dict[str, int]:
        return {
            "min_x": self.min_x,
            "min_y": self.min_y,
            "max_x": self.max_x,
            "max_y": self.max_y,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Bounds":
        return cls(
            min_x=int(data["min_x"]),
            min_y=int(data["min_y"]),
            max_x=int(data["max_x"]),
            max_y=int(data["max_y"]),
        )


@dataclass(frozen=True)
class GlyphIndex(Describable):
    """A glyph in a font and the distance to advance after drawing it."""

    index: int
    advance: int


@dataclass
class TextSpan(Describable):
    """A run of glyphs drawn with one font, size and colour."""

    identifier: int
    height: int
    color: tuple[int, ...]
    x: int
    y: int
    characters: list[GlyphIndex] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "identifier": self.identifier,
            "height": self.height,
            "color": list(self.color),
            "x": self.x,
            "y": self.y,
            "characters": [[glyph.index, glyph.advance] for glyph in self.characters],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TextSpan":
        return cls(
            identifier=data["identifier"],
            height=data["height"],
            color=tuple(data["color"]),
            x=data["x"],
            y=data["y"],
            characters=[GlyphIndex(index, advance) for index, advance in data["characters"]],
        )
