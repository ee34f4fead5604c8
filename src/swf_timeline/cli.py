"""CLI interface for swf-timeline."""

import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .config import Settings, load_settings
from .errors import GlyphNotFoundError, MovieFormatError
from .log import setup_logging
from .movie.movie import Movie, load_movie
from .output import resolve_output_provider, supported_output_formats
from .text.fonts import load_truetype_font
from .text.text_table import TextTable
from .timeline_pipeline import encode_movie, merge_movies
from .tools.movie_writer import MovieWriter

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()

app = typer.Typer(help="Split, merge and inspect movie timelines.")
_state: dict[str, Settings] = {}


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
) -> None:
    """Load settings and set up logging before any command runs."""
    try:
        settings = load_settings()
    except ValueError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)
    setup_logging("DEBUG" if verbose else settings.log_level)
    _state["settings"] = settings


def _settings() -> Settings:
    return _state.get("settings") or Settings()


@app.command()
def inspect(
    movie_path: str = typer.Argument(..., help="Movie document (JSON)"),
    dump: bool = typer.Option(False, "--dump", "-d", help="Pretty print every tag"),
) -> None:
    """Show the frames of a movie."""
    try:
        movie = _load_movie(movie_path)
        _print_frames(movie)
        if dump:
            console.print()
            MovieWriter().write_movie(movie, sys.stdout)
    except CLIError as e:
        _fail(e)
    except Exception as e:
        _fail(e, unexpected=True)


@app.command()
def merge(
    layers: list[str] = typer.Argument(..., help="Movie documents, one per layer, back to front"),
    out: str = typer.Option(
        ...,
        "--output",
        "-o",
        help=f"Merged movie path ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    frame_rate: float | None = typer.Option(
        None,
        "--frame-rate",
        help="Frame rate of the merged movie (defaults to SWF_TIMELINE_FRAME_RATE, then the first layer's)",
    ),
) -> None:
    """
    Merge movies into one, treating each as a layer.

    When layers share a frame, the later layer's definitions, commands
    and actions replace the earlier ones.

    Examples:
      swf-timeline merge background.json actors.json -o scene.json
    """
    if frame_rate is None:
        frame_rate = _settings().frame_rate
    try:
        if frame_rate is not None and frame_rate <= 0:
            raise CLIError(f"Frame rate must be positive, got {frame_rate:g}")

        try:
            provider = resolve_output_provider(out)
        except ValueError as e:
            raise CLIError(str(e))

        movies = [_load_movie(path) for path in layers]
        merged = merge_movies(movies, frame_rate=frame_rate)

        console.print(f"[bold blue]Saving to {out}...[/bold blue]")
        try:
            provider.write(encode_movie(merged, out, provider))
        except OSError as e:
            raise CLIError(f"Failed to save file '{out}': {e}")
        console.print(
            f"[green]✓[/green] {len(layers)} layer(s) merged into "
            f"{merged.frame_count} frame(s), saved to {out}"
        )
    except CLIError as e:
        _fail(e)
    except Exception as e:
        _fail(e, unexpected=True)


@app.command()
def measure(
    font_path: str = typer.Argument(..., help="TrueType or OpenType font file"),
    text: str = typer.Argument(..., help="Text to measure; use \\n for line breaks"),
    size: int | None = typer.Option(None, "--size", "-s", help="Font size in twips"),
) -> None:
    """Print the bounding box of text drawn in a font."""
    settings = _settings()
    font_size = size if size is not None else settings.font_size
    try:
        try:
            font = load_truetype_font(1, font_path)
        except OSError as e:
            raise CLIError(f"Cannot read font '{font_path}': {e}")

        table = TextTable(font, font_size)
        lines = text.replace("\\n", "\n").split("\n")
        try:
            definition = table.define_text_block(
                1, lines, (0, 0, 0), settings.line_spacing or None
            )
        except GlyphNotFoundError as e:
            raise CLIError(str(e))

        bounds = definition.bounds
        console.print(
            f"[bold]{Path(font_path).name}[/bold] at {font_size} twips: "
            f"width {bounds.width}, height {bounds.height} "
            f"({bounds.min_x}, {bounds.min_y}) - ({bounds.max_x}, {bounds.max_y})"
        )
    except CLIError as e:
        _fail(e)
    except Exception as e:
        _fail(e, unexpected=True)


def _load_movie(path: str) -> Movie:
    try:
        return load_movie(path)
    except FileNotFoundError:
        raise CLIError(f"File '{path}' not found")
    except MovieFormatError as e:
        raise CLIError(f"Invalid movie '{path}': {e}")


def _print_frames(movie: Movie) -> None:
    frames = movie.frames()
    console.print(
        f"[bold]Version {movie.version}[/bold], {movie.frame_rate:g} fps, "
        f"{movie.frame_size.width}x{movie.frame_size.height} twips, "
        f"{len(movie.objects)} tag(s), {len(frames)} frame(s)"
    )

    table = Table()
    table.add_column("Frame", justify="right")
    table.add_column("Label")
    table.add_column("Definitions", justify="right")
    table.add_column("Commands", justify="right")
    table.add_column("Actions", justify="right")
    for frame in frames:
        table.add_row(
            str(frame.number),
            frame.label or "",
            str(len(frame.definitions)),
            str(len(frame.commands)),
            str(len(frame.actions)),
        )
    console.print(table)


def _fail(error: Exception, unexpected: bool = False) -> None:
    prefix = "Unexpected error" if unexpected else "Error"
    err_console.print(f"[bold red]{prefix}:[/bold red] {error}")
    sys.exit(1)


if __name__ == "__main__":
    app()
