"""Live-neighbor counting with fixed (non-wrapping) grid edges."""

import numpy as np
import torch
import torch.nn.functional as F

from .grid import ALIVE, Grid

# Moore neighborhood: every cell touching the origin, the origin excluded
NEIGHBOR_OFFSETS = tuple((dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0))

_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


def count_live_neighbors(grid: Grid, row: int, col: int) -> int:
    """Count living neighbors of a cell.

    Positions past any edge of the grid are skipped; nothing wraps to the
    opposite edge.

    Args:
        grid: Grid holding the cell
        row: Row coordinate
        col: Column coordinate

    Returns:
        Number of living neighbors (0-8)

    Raises:
        IndexError: If (row, col) is outside the grid
    """
    if not grid.in_bounds(row, col):
        raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {grid.height}x{grid.width} grid")

    cells = grid.cells
    count = 0
    for dr, dc in NEIGHBOR_OFFSETS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < grid.height and 0 <= nc < grid.width and cells[nr, nc] == ALIVE:
            count += 1
    return count


def count_all_neighbors(grid: Grid) -> np.ndarray:
    """Count neighbors for all cells using a PyTorch convolution.

    Zero padding around the live mask makes off-grid positions contribute
    nothing, which matches ``count_live_neighbors`` cell for cell.

    Returns:
        Integer array of shape (height, width) with neighbor counts
    """
    mask = torch.from_numpy(grid.alive_mask().astype(np.float32)).reshape(1, 1, grid.height, grid.width)
    neighbors = F.conv2d(mask, _KERNEL, padding=1)
    return neighbors[0, 0].numpy().astype(np.int8)
