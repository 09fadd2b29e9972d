"""
Arena grid - dimensions, cell addressing, and free-cell enumeration.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List
from enum import IntEnum


class Direction(IntEnum):
    """Snake movement directions."""
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    @property
    def opposite(self) -> "Direction":
        """The direction pointing the other way on the same axis."""
        return Direction((self.value + 2) % 4)

    @property
    def delta(self):
        """(column, row) offset of one step in this direction."""
        return _DELTAS[self]

    def is_perpendicular_to(self, other: "Direction") -> bool:
        """True if turning from `other` to this direction is a 90 degree turn."""
        return self != other and self != other.opposite


_DELTAS = {
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
}


@dataclass(frozen=True)
class Cell:
    """A cell on the game grid. May lie outside the arena transiently."""
    column: int
    row: int

    def shifted(self, direction: Direction) -> "Cell":
        """Return the neighbouring cell one step along `direction`."""
        dc, dr = direction.delta
        return Cell(self.column + dc, self.row + dr)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"column": self.column, "row": self.row}


@dataclass(frozen=True)
class Grid:
    """
    Immutable arena of `columns` x `rows` cells.

    Cells are addressed as (column, row) with (0, 0) in the top-left corner.
    """
    columns: int = 20
    rows: int = 15

    def __post_init__(self):
        if self.columns < 1 or self.rows < 1:
            raise ValueError(f"Grid must be at least 1x1, got {self.columns}x{self.rows}")

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.columns * self.rows

    def cells(self) -> Iterator[Cell]:
        """Iterate every cell in row-major order."""
        for row in range(self.rows):
            for column in range(self.columns):
                yield Cell(column, row)

    def contains(self, cell: Cell) -> bool:
        """True if the cell lies inside the arena."""
        return 0 <= cell.column < self.columns and 0 <= cell.row < self.rows

    def wrap(self, cell: Cell) -> Cell:
        """Fold an out-of-range cell back into the arena."""
        return Cell(cell.column % self.columns, cell.row % self.rows)

    def free_cells(self, occupied: Iterable[Cell]) -> List[Cell]:
        """
        Get every arena cell not in `occupied`.

        Args:
            occupied: Cells covered by snake segments and food

        Returns:
            Free cells in row-major order
        """
        taken = set(occupied)
        return [cell for cell in self.cells() if cell not in taken]
