"""Frame and layer based editing of movie timelines."""

from .datatypes import Bounds, GlyphIndex, TextSpan
from .errors import (
    FrameRangeError,
    GlyphNotFoundError,
    InvalidArgumentError,
    MovieFormatError,
    TimelineError,
)
from .movie import Frame, Layer, Movie, flatten_frames, merge_layers, split_frames
from .tags import (
    Action,
    Background,
    DefineData,
    DefineFont,
    DefineShape,
    DefineText,
    Definition,
    DoAction,
    FrameLabel,
    MovieTag,
    Place,
    Remove,
    ShowFrame,
    TagRole,
    UnknownTag,
    classify,
)
from .text import TextTable

__all__ = [
    "Action",
    "Background",
    "Bounds",
    "DefineData",
    "DefineFont",
    "DefineShape",
    "DefineText",
    "Definition",
    "DoAction",
    "Frame",
    "FrameLabel",
    "FrameRangeError",
    "GlyphIndex",
    "GlyphNotFoundError",
    "InvalidArgumentError",
    "Layer",
    "Movie",
    "MovieFormatError",
    "MovieTag",
    "Place",
    "Remove",
    "ShowFrame",
    "TagRole",
    "TextSpan",
    "TextTable",
    "TimelineError",
    "UnknownTag",
    "classify",
    "flatten_frames",
    "merge_layers",
    "split_frames",
]
