"""Grid data structure for a single Game of Life generation."""

from typing import Iterable, List, Sequence, Tuple
import numpy as np

DEAD = "0"
ALIVE = "1"
CELL_STATES = (DEAD, ALIVE)


class Grid:
    """Immutable 2D grid of cell states.

    Cells are stored row-major in a read-only numpy array of single
    characters, each either ``'0'`` (dead) or ``'1'`` (alive). A grid is
    never modified after construction; computing the next generation
    produces a new Grid.
    """

    def __init__(self, cells: Sequence[Sequence[str]]) -> None:
        """Initialize a grid from nested rows of cell states.

        Args:
            cells: Sequence of rows, each a sequence of '0'/'1' characters

        Raises:
            ValueError: If the grid is empty, ragged, or holds other symbols
        """
        if isinstance(cells, np.ndarray):
            arr = np.array(cells, dtype=str)
        else:
            rows = [list(row) for row in cells]
            if not rows or not rows[0]:
                raise ValueError("Grid must have at least one row and one column")
            width = len(rows[0])
            for index, row in enumerate(rows):
                if len(row) != width:
                    raise ValueError(f"Row {index} has {len(row)} cells, expected {width}")
            arr = np.array(rows, dtype=str)

        if arr.ndim != 2 or arr.shape[0] < 1 or arr.shape[1] < 1:
            raise ValueError(f"Grid must be a non-empty 2D array, got shape {arr.shape}")

        illegal = ~np.isin(arr, CELL_STATES)
        if illegal.any():
            row, col = (int(i) for i in np.argwhere(illegal)[0])
            raise ValueError(f"Illegal cell state {str(arr[row, col])!r} at ({row}, {col})")

        # astype always copies, so callers keep no handle on the backing array
        self._cells = arr.astype("<U1")
        self._cells.flags.writeable = False

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Grid":
        """Build a grid from row strings such as ``["010", "111"]``."""
        return cls([list(row) for row in rows])

    @property
    def cells(self) -> np.ndarray:
        """Read-only array of cell states, indexed ``[row, col]``."""
        return self._cells

    @property
    def height(self) -> int:
        """Number of rows."""
        return int(self._cells.shape[0])

    @property
    def width(self) -> int:
        """Number of columns."""
        return int(self._cells.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (height, width)."""
        return (self.height, self.width)

    def in_bounds(self, row: int, col: int) -> bool:
        """Whether (row, col) lies inside the grid."""
        return 0 <= row < self.height and 0 <= col < self.width

    def cell(self, row: int, col: int) -> str:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            '1' if the cell is alive, '0' if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.height}x{self.width} grid")
        return str(self._cells[row, col])

    def is_alive(self, row: int, col: int) -> bool:
        """Whether the cell at (row, col) is alive."""
        return self.cell(row, col) == ALIVE

    def alive_mask(self) -> np.ndarray:
        """Boolean array marking live cells."""
        return self._cells == ALIVE

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self.alive_mask()))

    def rows(self) -> List[str]:
        """Row strings in top-to-bottom order."""
        return ["".join(row) for row in self._cells.tolist()]

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self.shape, tuple(self.rows())))

    def __repr__(self) -> str:
        return f"Grid(height={self.height}, width={self.width}, population={self.population})"

    def __str__(self) -> str:
        """Rows joined by newlines, without a trailing newline."""
        return "\n".join(self.rows())
