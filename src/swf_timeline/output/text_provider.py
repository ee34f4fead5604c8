"""Pretty-printed diagnostic dump output provider."""

from io import StringIO

from ..movie.movie import Movie
from ..tools.movie_writer import MovieWriter
from .base import MovieOutputProvider


class TextDumpOutputProvider(MovieOutputProvider):
    """Output provider writing every tag through MovieWriter."""

    def encode(self, movie: Movie) -> bytes:
        buffer = StringIO()
        MovieWriter().write_movie(movie, buffer)
        return buffer.getvalue().encode("utf-8")
