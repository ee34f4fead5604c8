"""Pretty print the string form of tags, or of an entire movie."""

from pathlib import Path
from typing import TextIO

from ..movie.movie import Movie


def format_dump(text: str) -> str:
    """
    Reformat a one-line dump so each field sits on its own indented line.

    Braces and brackets open and close tab-indented blocks, ``;`` and ``,``
    end a line (except commas inside parentheses, which hold coordinates),
    ``<``/``>`` become brackets and ``=`` becomes `` - ``. Spaces right
    after a line break are dropped.
    """
    out: list[str] = []
    level = 0
    start = False
    coord = False

    for c in text:
        if c == "{":
            level += 1
            out.append("{\n" + "\t" * level)
            start = True
        elif c == "}":
            level -= 1
            out.append(";\n" + "\t" * level + "}")
        elif c == "[":
            level += 1
            out.append("[\n" + "\t" * level)
        elif c == "]":
            level -= 1
            out.append("\n" + "\t" * level + "]")
        elif c == ";":
            out.append(";\n" + "\t" * level)
            start = True
        elif c == ",":
            out.append(",")
            if not coord:
                out.append("\n" + "\t" * level)
                start = True
        elif c == "<":
            out.append("[")
        elif c == ">":
            out.append("]")
        elif c == "(":
            out.append(c)
            coord = True
        elif c == ")":
            out.append(c)
            coord = False
        elif c == "=":
            out.append(" - ")
        elif c == " ":
            if not start:
                out.append(c)
        else:
            out.append(c)
            start = False

    return "".join(out)


class MovieWriter:
    """Writes formatted dumps of tags and movies for diagnostics."""

    def write(self, obj: object, writer: TextIO) -> None:
        """Pretty print one object followed by a ``,`` line terminator."""
        writer.write(format_dump(str(obj)))
        writer.write(",\n")
        writer.flush()

    def write_movie(self, movie: Movie, writer: TextIO) -> None:
        for tag in movie.objects:
            self.write(tag, writer)

    def write_file(self, movie: Movie, path: str | Path) -> None:
        """
        Pretty print a movie to a file.

        Raises:
            OSError: If the file cannot be written
        """
        with open(path, "w", encoding="utf-8") as f:
            self.write_movie(movie, f)
