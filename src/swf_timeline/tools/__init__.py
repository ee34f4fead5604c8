"""Diagnostic tools."""

from .movie_writer import MovieWriter, format_dump

__all__ = ["MovieWriter", "format_dump"]
