"""
Movie tags and their classification.

A movie is a flat sequence of tags. The timeline model only needs to know
which role a tag plays; every tag class declares it through the ``role``
class attribute and ``classify`` reads nothing else.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar

from .datatypes import Bounds, Describable, TextSpan
from .errors import MovieFormatError


class TagRole(Enum):
    """What a tag contributes to a frame."""

    ACTION = "action"
    LABEL = "label"
    DEFINITION = "definition"
    SHOW_FRAME = "show_frame"
    OTHER = "other"


def classify(tag: object) -> TagRole:
    """Return the role of any value; unknown values are ``TagRole.OTHER``."""
    role = getattr(type(tag), "role", None)
    if isinstance(role, TagRole):
        return role
    return TagRole.OTHER


@dataclass(frozen=True)
class Action(Describable):
    """A single action executed when a frame is displayed."""

    name: str
    args: tuple[Any, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "args": list(self.args)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Action":
        return cls(name=data["name"], args=tuple(data.get("args", ())))


class MovieTag(Describable):
    """Base class for every tag in a movie."""

    role: ClassVar[TagRole] = TagRole.OTHER

    def to_dict(self) -> dict[str, Any]:
        return {item.name: getattr(self, item.name) for item in fields(self)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MovieTag":
        return cls(**data)


# -- markers ---------------------------------------------------------------


@dataclass
class ShowFrame(MovieTag):
    """Tells the player to render the display list."""

    role: ClassVar[TagRole] = TagRole.SHOW_FRAME


@dataclass
class FrameLabel(MovieTag):
    role: ClassVar[TagRole] = TagRole.LABEL

    label: str
    anchor: bool = False


@dataclass
class DoAction(MovieTag):
    """Bundle of actions executed when the frame is displayed."""

    role: ClassVar[TagRole] = TagRole.ACTION

    actions: list[Action] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"actions": [action.to_dict() for action in self.actions]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DoAction":
        return cls(actions=[Action.from_dict(item) for item in data.get("actions", [])])


# -- definitions -----------------------------------------------------------


@dataclass
class Definition(MovieTag):
    """Defines an object (shape, font, text, data) that commands refer to."""

    role: ClassVar[TagRole] = TagRole.DEFINITION

    identifier: int


@dataclass
class DefineShape(Definition):
    bounds: Bounds

    def to_dict(self) -> dict[str, Any]:
        return {"identifier": self.identifier, "bounds": self.bounds.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DefineShape":
        return cls(identifier=data["identifier"], bounds=Bounds.from_dict(data["bounds"]))


@dataclass
class DefineFont(Definition):
    """Font glyph table. Advances, ascent and descent are in EM-square units."""

    name: str
    codes: list[int]
    advances: list[int]
    ascent: int
    descent: int


@dataclass
class DefineText(Definition):
    bounds: Bounds
    spans: list[TextSpan] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "identifier": self.identifier,
            "bounds": self.bounds.to_dict(),
            "spans": [span.to_dict() for span in self.spans],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DefineText":
        return cls(
            identifier=data["identifier"],
            bounds=Bounds.from_dict(data["bounds"]),
            spans=[TextSpan.from_dict(item) for item in data.get("spans", [])],
        )


@dataclass
class DefineData(Definition):
    data: bytes = b""

    def to_dict(self) -> dict[str, Any]:
        return {"identifier": self.identifier, "data": self.data.hex()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DefineData":
        return cls(identifier=data["identifier"], data=bytes.fromhex(data.get("data", "")))


# -- display list commands -------------------------------------------------


@dataclass
class Place(MovieTag):
    """Place, or move, an object on the display list."""

    layer: int
    identifier: int = 0  # 0 moves the object already on the layer
    x: int = 0
    y: int = 0


@dataclass
class Remove(MovieTag):
    layer: int


@dataclass
class Background(MovieTag):
    color: tuple[int, int, int]

    def to_dict(self) -> dict[str, Any]:
        return {"color": list(self.color)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Background":
        return cls(color=tuple(data["color"]))


@dataclass
class UnknownTag(MovieTag):
    """A tag type this library does not model; kept as-is."""

    type_name: str
    payload: dict[str, Any] = field(default_factory=dict)


TAG_TYPES: dict[str, type[MovieTag]] = {
    tag_type.__name__: tag_type
    for tag_type in (
        ShowFrame,
        FrameLabel,
        DoAction,
        DefineShape,
        DefineFont,
        DefineText,
        DefineData,
        Place,
        Remove,
        Background,
    )
}


def tag_to_dict(tag: MovieTag) -> dict[str, Any]:
    """Encode a tag as a JSON-compatible dict with a ``type`` discriminator."""
    if isinstance(tag, UnknownTag):
        return {**tag.payload, "type": tag.type_name}
    if type(tag).__name__ not in TAG_TYPES:
        raise MovieFormatError(f"Cannot encode {type(tag).__name__} as a movie tag")
    return {"type": type(tag).__name__, **tag.to_dict()}


def tag_from_dict(data: dict[str, Any]) -> MovieTag:
    """
    Decode a tag produced by ``tag_to_dict``.

    Unrecognised type names decode to ``UnknownTag`` so documents written by
    newer versions still load.

    Raises:
        MovieFormatError: If the dict has no type or its fields do not fit
    """
    if not isinstance(data, dict) or "type" not in data:
        raise MovieFormatError(f"Tag entry has no 'type': {data!r}")

    payload = dict(data)
    type_name = payload.pop("type")
    tag_type = TAG_TYPES.get(type_name)
    if tag_type is None:
        return UnknownTag(type_name=type_name, payload=payload)
    try:
        return tag_type.from_dict(payload)
    except (KeyError, TypeError, ValueError) as e:
        raise MovieFormatError(f"Invalid {type_name} tag: {e}")
