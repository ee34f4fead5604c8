"""Movie container: header attributes plus the flat tag sequence."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from ..constants import DEFAULT_FRAME_RATE, DEFAULT_FRAME_SIZE, DEFAULT_VERSION
from ..datatypes import Bounds
from ..errors import InvalidArgumentError, MovieFormatError
from ..tags import MovieTag, tag_from_dict, tag_to_dict
from .frame import Frame, flatten_frames
from .splitter import split_frames

logger = logging.getLogger(__name__)


@dataclass
class Movie:
    """A movie: the tags a player reads in order, plus header attributes."""

    version: int = DEFAULT_VERSION
    frame_size: Bounds = field(default_factory=lambda: Bounds(*DEFAULT_FRAME_SIZE))
    frame_rate: float = DEFAULT_FRAME_RATE
    objects: list[MovieTag] = field(default_factory=list)

    def append(self, tag: MovieTag) -> None:
        if tag is None:
            raise InvalidArgumentError("Cannot add None to a movie")
        self.objects.append(tag)

    def add(self, tags: MovieTag | Iterable[MovieTag]) -> "Movie":
        """Add a tag, or each tag of an iterable, to the end of the movie."""
        if isinstance(tags, MovieTag):
            self.append(tags)
        else:
            for tag in tags:
                self.append(tag)
        return self

    @property
    def frame_count(self) -> int:
        return len(self.frames())

    def frames(self) -> list[Frame]:
        """Group the movie's tags into frames."""
        return split_frames(self.objects)

    @classmethod
    def from_frames(cls, frames: Iterable[Frame], **header: Any) -> "Movie":
        """Create a movie whose tags are the flattened frames."""
        return cls(objects=flatten_frames(frames), **header)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "frame_size": self.frame_size.to_dict(),
            "frame_rate": self.frame_rate,
            "objects": [tag_to_dict(tag) for tag in self.objects],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Movie":
        """
        Decode a movie document.

        Raises:
            MovieFormatError: If the document is not a movie
        """
        if not isinstance(data, dict):
            raise MovieFormatError("Movie document must be a JSON object")
        objects = data.get("objects", [])
        if not isinstance(objects, list):
            raise MovieFormatError("Movie 'objects' must be a list of tags")
        try:
            frame_size = (
                Bounds.from_dict(data["frame_size"])
                if "frame_size" in data
                else Bounds(*DEFAULT_FRAME_SIZE)
            )
            return cls(
                version=int(data.get("version", DEFAULT_VERSION)),
                frame_size=frame_size,
                frame_rate=float(data.get("frame_rate", DEFAULT_FRAME_RATE)),
                objects=[tag_from_dict(item) for item in objects],
            )
        except MovieFormatError:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise MovieFormatError(f"Invalid movie header: {e}")


def load_movie(path: str | Path) -> Movie:
    """
    Read a movie from a JSON document.

    Raises:
        FileNotFoundError: If the file does not exist
        MovieFormatError: If the file is not a valid movie document
    """
    logger.debug("Loading movie from %s", path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise MovieFormatError(f"Invalid JSON in '{path}': {e}")
    return Movie.from_dict(data)


def save_movie(movie: Movie, path: str | Path) -> None:
    """Write a movie as a JSON document."""
    logger.debug("Saving movie with %d tag(s) to %s", len(movie.objects), path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(movie.to_dict(), f, indent=2)
