"""Tests for live-neighbor counting."""

import numpy as np
import pytest
from lifestep.core.grid import Grid
from lifestep.core.neighbors import NEIGHBOR_OFFSETS, count_all_neighbors, count_live_neighbors


class TestCountLiveNeighbors:
    """Test per-cell neighbor counting."""

    def test_offsets(self):
        """Test the neighborhood has eight positions excluding the origin."""
        assert len(NEIGHBOR_OFFSETS) == 8
        assert (0, 0) not in NEIGHBOR_OFFSETS

    def test_single_dead_cell(self):
        """Test a 1x1 dead grid has no neighbors."""
        grid = Grid.from_rows(["0"])
        assert count_live_neighbors(grid, 0, 0) == 0

    def test_single_live_cell(self):
        """Test a cell never counts itself."""
        grid = Grid.from_rows(["1"])
        assert count_live_neighbors(grid, 0, 0) == 0

    def test_full_grid_interior(self):
        """Test an interior cell of a full grid sees all eight neighbors."""
        grid = Grid.from_rows(["111", "111", "111"])
        assert count_live_neighbors(grid, 1, 1) == 8

    def test_corners_clipped(self):
        """Test corners of a full grid see only three neighbors."""
        grid = Grid.from_rows(["1111", "1111", "1111"])

        assert count_live_neighbors(grid, 0, 0) == 3
        assert count_live_neighbors(grid, 0, 3) == 3
        assert count_live_neighbors(grid, 2, 0) == 3
        assert count_live_neighbors(grid, 2, 3) == 3

    def test_corner_candidates(self):
        """Test (0,0) only looks right, down and down-right."""
        grid = Grid.from_rows(["01", "11"])
        assert count_live_neighbors(grid, 0, 0) == 3

    def test_edges_clipped(self):
        """Test non-corner edge cells of a full grid see five neighbors."""
        grid = Grid.from_rows(["111", "111", "111"])

        assert count_live_neighbors(grid, 0, 1) == 5
        assert count_live_neighbors(grid, 1, 0) == 5
        assert count_live_neighbors(grid, 1, 2) == 5
        assert count_live_neighbors(grid, 2, 1) == 5

    def test_no_wraparound(self):
        """Test opposite corners do not see each other."""
        grid = Grid.from_rows(["100", "000", "001"])

        assert count_live_neighbors(grid, 0, 0) == 0
        assert count_live_neighbors(grid, 2, 2) == 0
        assert count_live_neighbors(grid, 1, 1) == 2

    def test_single_row(self):
        """Test a one-row grid only looks left and right."""
        grid = Grid.from_rows(["10101"])

        assert count_live_neighbors(grid, 0, 1) == 2
        assert count_live_neighbors(grid, 0, 0) == 0
        assert count_live_neighbors(grid, 0, 4) == 0

    def test_single_column(self):
        """Test a one-column grid only looks up and down."""
        grid = Grid.from_rows(["1", "0", "1"])
        assert count_live_neighbors(grid, 1, 0) == 2

    def test_out_of_bounds(self):
        """Test coordinates outside the grid raise IndexError."""
        grid = Grid.from_rows(["01", "10"])

        with pytest.raises(IndexError):
            count_live_neighbors(grid, -1, 0)

        with pytest.raises(IndexError):
            count_live_neighbors(grid, 0, 2)


class TestCountAllNeighbors:
    """Test vectorized neighbor counting."""

    def test_shape_and_values(self):
        """Test counts for a vertical blinker."""
        grid = Grid.from_rows(["00000", "00100", "00100", "00100", "00000"])
        counts = count_all_neighbors(grid)

        assert counts.shape == (5, 5)
        assert counts[2, 2] == 2  # Middle of line
        assert counts[2, 1] == 3  # Beside the middle
        assert counts[2, 3] == 3
        assert counts[0, 2] == 1
        assert counts[0, 0] == 0

    def test_full_grid_boundaries(self):
        """Test zero padding reproduces fixed edges."""
        grid = Grid.from_rows(["111", "111", "111"])
        counts = count_all_neighbors(grid)

        assert counts.tolist() == [[3, 5, 3], [5, 8, 5], [3, 5, 3]]

    def test_single_cell(self):
        """Test a 1x1 grid."""
        counts = count_all_neighbors(Grid.from_rows(["1"]))
        assert counts.tolist() == [[0]]

    def test_matches_per_cell_counts(self):
        """Test vectorized counts agree with per-cell counts everywhere."""
        rng = np.random.default_rng(7)
        for height, width in [(1, 6), (6, 1), (4, 7), (9, 9)]:
            bits = rng.integers(0, 2, size=(height, width))
            grid = Grid(bits.astype(str))
            counts = count_all_neighbors(grid)

            for row in range(height):
                for col in range(width):
                    assert counts[row, col] == count_live_neighbors(grid, row, col)
