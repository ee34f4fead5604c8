"""Shared timeline orchestration used by the CLI."""

import logging
from typing import Sequence

from .movie.layer import Layer, merge_layers
from .movie.movie import Movie
from .output import resolve_output_provider
from .output.base import MovieOutputProvider

logger = logging.getLogger(__name__)


def layers_from_movies(movies: Sequence[Movie]) -> list[Layer]:
    """Turn each movie into a layer, numbered from 1 in the given order."""
    layers = []
    for number, movie in enumerate(movies, start=1):
        layer = Layer(number)
        layer.extend(movie.frames())
        layers.append(layer)
    return layers


def merge_movies(movies: Sequence[Movie], *, frame_rate: float | None = None) -> Movie:
    """
    Merge several movies, each treated as one layer, into a single movie.

    The header (version, frame size and frame rate) comes from the first
    movie unless ``frame_rate`` is given.
    """
    if not movies:
        raise ValueError("At least one movie is required")

    layers = layers_from_movies(movies)
    merged = merge_layers(layers)
    header = movies[0]
    logger.debug("Merged %d movie(s) into %d frame(s)", len(movies), len(merged))
    return Movie.from_frames(
        merged,
        version=header.version,
        frame_size=header.frame_size,
        frame_rate=frame_rate if frame_rate is not None else header.frame_rate,
    )


def encode_movie(
    movie: Movie,
    output_path: str,
    provider: MovieOutputProvider | None = None,
) -> bytes:
    """Encode a movie for the given output path."""
    target_provider = provider or resolve_output_provider(output_path)
    return target_provider.encode(movie)
