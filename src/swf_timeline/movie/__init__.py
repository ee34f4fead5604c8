"""Frame and layer based views of a movie."""

from .frame import Frame, TagSink, flatten_frames
from .layer import Layer, merge_layers
from .movie import Movie, load_movie, save_movie
from .splitter import split_frames

__all__ = [
    "Frame",
    "TagSink",
    "flatten_frames",
    "Layer",
    "merge_layers",
    "Movie",
    "load_movie",
    "save_movie",
    "split_frames",
]
