"""Core grid loading, stepping and rendering logic."""

from .errors import FormatError, GridError, NotFoundError
from .grid import ALIVE, DEAD, Grid
from .loader import load_grid, parse_lines
from .neighbors import count_all_neighbors, count_live_neighbors
from .game import apply_rule, next_state, step
from .render import render

__all__ = [
    "ALIVE",
    "DEAD",
    "Grid",
    "GridError",
    "NotFoundError",
    "FormatError",
    "load_grid",
    "parse_lines",
    "count_live_neighbors",
    "count_all_neighbors",
    "apply_rule",
    "next_state",
    "step",
    "render",
]
