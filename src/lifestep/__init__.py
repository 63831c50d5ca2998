"""Single-generation Conway's Game of Life over grid files."""

__version__ = "0.1.0"

from .core.errors import FormatError, GridError, NotFoundError
from .core.grid import Grid
from .core.loader import load_grid
from .core.game import step
from .core.render import render

__all__ = ["Grid", "GridError", "NotFoundError", "FormatError", "load_grid", "step", "render"]
