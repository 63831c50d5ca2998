"""Text rendering of grids."""

from .grid import Grid


def render(grid: Grid) -> str:
    """Render a grid in the same format the loader reads.

    Returns:
        One line per row, each of exactly ``grid.width`` characters and
        terminated by a newline
    """
    return "".join(f"{row}\n" for row in grid.rows())
