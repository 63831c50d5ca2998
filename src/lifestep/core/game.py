"""Conway's Game of Life transition for a single generation."""

import logging

import numpy as np

from .grid import ALIVE, CELL_STATES, DEAD, Grid
from .neighbors import count_all_neighbors

logger = logging.getLogger(__name__)


def apply_rule(cells: np.ndarray, neighbor_counts: np.ndarray) -> np.ndarray:
    """Map cell states and live-neighbor counts to next states.

    | Live neighbors | Next state |
    |---|---|
    | 0-1 | dead |
    | 2 | unchanged |
    | 3 | alive |
    | 4-8 | dead |

    Works elementwise on arrays of any matching shape, including 0-d.

    Args:
        cells: Current states, '0' or '1'
        neighbor_counts: Live-neighbor counts for the same cells

    Returns:
        Array of next states with the broadcast shape of the inputs
    """
    return np.where(
        neighbor_counts == 3,
        ALIVE,
        np.where(neighbor_counts == 2, cells, DEAD),
    )


def next_state(current: str, live_neighbors: int) -> str:
    """Apply the transition rule (see ``apply_rule``) to one cell.

    Args:
        current: Current state, '0' or '1'
        live_neighbors: Number of living neighbors (0-8)

    Returns:
        The next state of the cell

    Raises:
        ValueError: If the state or count is out of range
    """
    if current not in CELL_STATES:
        raise ValueError(f"Illegal cell state {current!r}")
    if not 0 <= live_neighbors <= 8:
        raise ValueError(f"Neighbor count must be between 0 and 8, got {live_neighbors}")

    return str(apply_rule(np.asarray(current), np.asarray(live_neighbors)))


def step(grid: Grid) -> Grid:
    """Compute the next generation of a grid.

    All neighbor counts are taken from ``grid`` before any new state is
    written, and the result goes into a fresh array, so the update is
    simultaneous for every cell. ``grid`` itself is left untouched.

    Args:
        grid: The current generation

    Returns:
        A new Grid with the same dimensions holding the next generation
    """
    result = Grid(apply_rule(grid.cells, count_all_neighbors(grid)))
    logger.debug("Population %d -> %d", grid.population, result.population)
    return result
