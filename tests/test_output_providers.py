"""Tests for output providers."""

import json

import pytest

from swf_timeline import output
from swf_timeline.movie import Movie, load_movie
from swf_timeline.output import (
    JsonOutputProvider,
    TextDumpOutputProvider,
    resolve_output_provider,
    supported_output_formats,
)
from swf_timeline.tags import FrameLabel, Place, ShowFrame


def create_test_movie() -> Movie:
    return Movie().add([FrameLabel("intro"), Place(layer=1, identifier=1), ShowFrame()])


def test_json_provider_encodes_movie():
    """JsonOutputProvider should encode a movie document."""
    provider = JsonOutputProvider("movie.json")

    result = provider.encode(create_test_movie())

    data = json.loads(result)
    assert [tag["type"] for tag in data["objects"]] == ["FrameLabel", "Place", "ShowFrame"]


def test_json_provider_output_loads_back(tmp_path):
    path = tmp_path / "movie.json"
    provider = JsonOutputProvider(str(path))
    movie = create_test_movie()

    provider.write(provider.encode(movie))

    assert load_movie(path) == movie


def test_text_provider_pretty_prints_tags():
    provider = TextDumpOutputProvider("movie.txt")

    result = provider.encode(create_test_movie()).decode("utf-8")

    assert result.startswith("FrameLabel: {\n\tlabel - intro;\n")
    assert result.endswith("ShowFrame,\n")


def test_text_provider_empty_movie():
    assert TextDumpOutputProvider("movie.txt").encode(Movie()) == b""


def test_write_without_path():
    with pytest.raises(ValueError, match="Output path not set"):
        JsonOutputProvider().write(b"{}")


def test_resolve_json_provider():
    """resolve_output_provider should return JsonOutputProvider for .json files."""
    provider = resolve_output_provider("output.json")

    assert isinstance(provider, JsonOutputProvider)
    assert provider.path == "output.json"


def test_resolve_text_provider():
    assert isinstance(resolve_output_provider("output.txt"), TextDumpOutputProvider)


def test_resolve_unsupported_format():
    """resolve_output_provider should raise ValueError for unsupported formats."""
    with pytest.raises(ValueError, match="Unsupported output format"):
        resolve_output_provider("output.swf")


def test_resolve_case_insensitive():
    assert isinstance(resolve_output_provider("output.JSON"), JsonOutputProvider)


def test_supported_formats():
    assert supported_output_formats() == ("json", "txt")
    assert not hasattr(output, "media_type_for_output_format")
