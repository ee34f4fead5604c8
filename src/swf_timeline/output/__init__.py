"""Output providers for different movie formats."""

from dataclasses import dataclass
from pathlib import Path

from .base import MovieOutputProvider
from .json_provider import JsonOutputProvider
from .text_provider import TextDumpOutputProvider


@dataclass(frozen=True)
class OutputFormatSpec:
    extension: str
    provider_class: type[MovieOutputProvider]


_OUTPUT_FORMATS: dict[str, OutputFormatSpec] = {
    "json": OutputFormatSpec(
        extension=".json",
        provider_class=JsonOutputProvider,
    ),
    "txt": OutputFormatSpec(
        extension=".txt",
        provider_class=TextDumpOutputProvider,
    ),
}


def resolve_output_provider(file_path: str) -> MovieOutputProvider:
    """
    Resolve the appropriate output provider based on file extension.

    Args:
        file_path: Output file path (extension determines format)

    Returns:
        A MovieOutputProvider instance

    Raises:
        ValueError: If file extension is not supported
    """
    ext = Path(file_path).suffix.lower()
    spec = _output_spec_from_extension(ext)
    return spec.provider_class(file_path)


def supported_output_formats() -> tuple[str, ...]:
    """Return supported output format names."""
    return tuple(_OUTPUT_FORMATS.keys())


def _output_spec_from_extension(ext: str) -> OutputFormatSpec:
    output_format = ext.removeprefix(".")
    spec = _OUTPUT_FORMATS.get(output_format)
    if spec is not None:
        return spec
    supported = ", ".join(spec.extension for spec in _OUTPUT_FORMATS.values())
    raise ValueError(f"Unsupported output format: {ext}. Supported formats: {supported}")


__all__ = [
    "OutputFormatSpec",
    "MovieOutputProvider",
    "JsonOutputProvider",
    "TextDumpOutputProvider",
    "resolve_output_provider",
    "supported_output_formats",
]
