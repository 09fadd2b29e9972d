"""
Tests for the arena grid, cells, and directions.
"""

import pytest

from snake_arcade.game.grid import Cell, Direction, Grid


class TestDirection:
    """Tests for Direction helpers."""

    def test_opposites(self):
        """Test opposite pairs are UP/DOWN and LEFT/RIGHT."""
        assert Direction.UP.opposite == Direction.DOWN
        assert Direction.DOWN.opposite == Direction.UP
        assert Direction.LEFT.opposite == Direction.RIGHT
        assert Direction.RIGHT.opposite == Direction.LEFT

    def test_perpendicular(self):
        """Test only 90 degree turns count as perpendicular."""
        assert Direction.UP.is_perpendicular_to(Direction.RIGHT)
        assert Direction.LEFT.is_perpendicular_to(Direction.DOWN)
        assert not Direction.UP.is_perpendicular_to(Direction.UP)
        assert not Direction.UP.is_perpendicular_to(Direction.DOWN)

    def test_shifted(self):
        """Test one step in each direction."""
        cell = Cell(5, 5)

        assert cell.shifted(Direction.RIGHT) == Cell(6, 5)
        assert cell.shifted(Direction.LEFT) == Cell(4, 5)
        assert cell.shifted(Direction.UP) == Cell(5, 4)
        assert cell.shifted(Direction.DOWN) == Cell(5, 6)


class TestGrid:
    """Tests for Grid addressing and free cells."""

    def test_default_dimensions(self):
        """Test the default 20x15 arena."""
        grid = Grid()

        assert grid.columns == 20
        assert grid.rows == 15
        assert grid.size == 300
        assert len(list(grid.cells())) == 300

    def test_invalid_dimensions(self):
        """Test an empty grid is rejected."""
        with pytest.raises(ValueError):
            Grid(0, 5)

    def test_contains(self):
        """Test arena bounds are half-open."""
        grid = Grid(20, 15)

        assert grid.contains(Cell(0, 0))
        assert grid.contains(Cell(19, 14))
        assert not grid.contains(Cell(-1, 5))
        assert not grid.contains(Cell(20, 5))
        assert not grid.contains(Cell(5, -1))
        assert not grid.contains(Cell(5, 15))

    def test_wrap(self):
        """Test out-of-range coordinates fold to the opposite edge."""
        grid = Grid(20, 15)

        assert grid.wrap(Cell(-1, 5)) == Cell(19, 5)
        assert grid.wrap(Cell(20, 5)) == Cell(0, 5)
        assert grid.wrap(Cell(5, -1)) == Cell(5, 14)
        assert grid.wrap(Cell(5, 15)) == Cell(5, 0)

    def test_free_cells_excludes_occupied(self):
        """Test free cells never include occupied cells."""
        grid = Grid(4, 3)
        occupied = {Cell(0, 0), Cell(1, 0), Cell(3, 2)}

        free = grid.free_cells(occupied)

        assert len(free) == 12 - 3
        assert not occupied.intersection(free)

    def test_free_cells_is_pure(self):
        """Test free_cells does not consume or modify its input."""
        grid = Grid(3, 3)
        occupied = [Cell(1, 1)]

        grid.free_cells(occupied)

        assert occupied == [Cell(1, 1)]

    def test_free_cells_full_grid(self):
        """Test a fully occupied grid has no free cells."""
        grid = Grid(2, 2)

        assert grid.free_cells(grid.cells()) == []
