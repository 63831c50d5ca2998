"""Reading and validating grid files."""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from .errors import FormatError, NotFoundError
from .grid import CELL_STATES, Grid

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def parse_lines(lines: Iterable[str], source: str = "<string>") -> Grid:
    """Validate grid lines and build a Grid from them.

    Every line is checked before the grid is built, so a malformed input
    never yields a partial grid. Lines must already have their terminators
    stripped.

    Args:
        lines: Row strings in file order
        source: Name reported in error messages

    Returns:
        The parsed grid

    Raises:
        FormatError: On an empty input, inconsistent widths, or a character
            other than '0' or '1'
    """
    rows: List[str] = []
    width = 0

    for line_number, line in enumerate(lines, start=1):
        if line_number == 1:
            width = len(line)
            if width == 0:
                raise FormatError(source, "The first line is empty.", line=1)
        elif len(line) != width:
            raise FormatError(
                source,
                f"There are inconsistent widths to this file's formatting at line {line_number} "
                f"(expected {width} characters, found {len(line)}).",
                line=line_number,
            )

        for column, char in enumerate(line, start=1):
            if char not in CELL_STATES:
                raise FormatError(
                    source,
                    f"An illegal character, {char!r} was found at line {line_number}, column {column}!",
                    line=line_number,
                    char=char,
                )

        rows.append(line)

    if not rows:
        raise FormatError(source, "The file is empty.")

    return Grid.from_rows(rows)


def load_grid(path: PathLike) -> Grid:
    """Load a grid from a text file.

    Args:
        path: Path to a file of equal-length lines of '0' and '1'

    Returns:
        The grid described by the file

    Raises:
        NotFoundError: If the path is not a readable regular file
        FormatError: If the file contents are not a valid grid
    """
    source = str(path)
    file_path = Path(path)
    if not file_path.is_file():
        raise NotFoundError(source)

    try:
        with open(file_path, "r", encoding="utf-8", newline="\n") as f:
            lines = [line.rstrip("\n") for line in f]
    except UnicodeDecodeError as e:
        raise FormatError(source, f"The file is not valid UTF-8 text ({e.reason}).") from e
    except OSError as e:
        raise NotFoundError(source, e.strerror) from e

    logger.debug("Read %d lines from %s", len(lines), source)
    grid = parse_lines(lines, source)
    logger.debug("Loaded %dx%d grid with %d live cells", grid.height, grid.width, grid.population)
    return grid
