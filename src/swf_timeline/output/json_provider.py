"""JSON movie document output provider."""

import json

from ..movie.movie import Movie
from .base import MovieOutputProvider


class JsonOutputProvider(MovieOutputProvider):
    """Output provider for JSON movie documents, readable by ``load_movie``."""

    indent = 2

    def encode(self, movie: Movie) -> bytes:
        return json.dumps(movie.to_dict(), indent=self.indent).encode("utf-8")
