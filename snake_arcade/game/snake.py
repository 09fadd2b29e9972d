"""
Snake entity - body geometry, direction state machine, movement and collisions.
"""
from dataclasses import dataclass
from typing import List, Optional, Dict, Any, Sequence

from ..core.entity_interface import Movable, Drawable, Collidable
from .grid import Cell, Direction, Grid


@dataclass
class Segment:
    """
    One body cell plus the sides that visually link to its neighbours.

    The connection flags are render hints, recomputed from the body on every
    move.
    """
    cell: Cell
    top: bool = False
    right: bool = False
    bottom: bool = False
    left: bool = False

    def clear_connections(self) -> None:
        self.top = self.right = self.bottom = self.left = False

    def connect_towards(self, other: Cell) -> None:
        """Set the flag for the side facing an adjacent cell."""
        dc = other.column - self.cell.column
        dr = other.row - self.cell.row

        # A jump of more than one cell means the neighbour is across a wrapped edge
        if dc == 1 or dc < -1:
            self.right = True
        elif dc == -1 or dc > 1:
            self.left = True
        elif dr == 1 or dr < -1:
            self.bottom = True
        elif dr == -1 or dr > 1:
            self.top = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "column": self.cell.column,
            "row": self.cell.row,
            "top": self.top,
            "right": self.right,
            "bottom": self.bottom,
            "left": self.left,
        }


class Snake(Movable, Drawable, Collidable):
    """
    The player-controlled snake.

    The body is an ordered list of segments with the head first. Direction
    requests are buffered and only applied inside move(), so at most one
    turn happens per step.
    """

    def __init__(self, body: Sequence[Cell], direction: Direction = Direction.RIGHT):
        """
        Initialize the snake.

        Args:
            body: Cells from head to tail (at least two)
            direction: Initial movement direction
        """
        if len(body) < 2:
            raise ValueError(f"Snake needs at least 2 segments, got {len(body)}")

        self.direction: Direction = direction
        self.desired_direction: Optional[Direction] = None
        self.grow_pending: bool = False
        self.segments: List[Segment] = [Segment(cell) for cell in body]
        self._refresh_connections()

    @classmethod
    def spawn(
        cls,
        column: int,
        row: int,
        length: int = 2,
        direction: Direction = Direction.RIGHT
    ) -> "Snake":
        """
        Create a straight snake with its head at (column, row).

        The body trails behind the head, opposite to `direction`.
        """
        body = [Cell(column, row)]
        for _ in range(length - 1):
            body.append(body[-1].shifted(direction.opposite))
        return cls(body, direction)

    @property
    def head(self) -> Cell:
        return self.segments[0].cell

    @property
    def tail(self) -> Cell:
        return self.segments[-1].cell

    @property
    def cells(self) -> List[Cell]:
        return [segment.cell for segment in self.segments]

    def __len__(self) -> int:
        return len(self.segments)

    def request_direction(self, direction: Direction) -> bool:
        """
        Buffer a turn for the next move.

        Only 90 degree turns relative to the current direction are recorded;
        straight-ahead and reversing requests are ignored.

        Returns:
            True if the request was recorded
        """
        if not direction.is_perpendicular_to(self.direction):
            return False
        self.desired_direction = direction
        return True

    def move(self) -> None:
        """Advance one cell, applying any pending turn and growth."""
        if self.desired_direction is not None:
            if self.desired_direction.is_perpendicular_to(self.direction):
                self.direction = self.desired_direction
            self.desired_direction = None

        new_head = self.head.shifted(self.direction)
        self.segments.insert(0, Segment(new_head))

        if self.grow_pending:
            self.grow_pending = False
        else:
            self.segments.pop()

        self._refresh_connections()

    def check_self_collision(self) -> bool:
        """True if the head shares a cell with any other segment."""
        head = self.head
        return any(segment.cell == head for segment in self.segments[1:])

    def check_boundary(self, grid: Grid) -> bool:
        """True if the head has left the arena."""
        return not grid.contains(self.head)

    def wrap_at_boundary(self, grid: Grid) -> None:
        """Fold an out-of-arena head back in from the opposite edge."""
        self.segments[0].cell = grid.wrap(self.head)
        self._refresh_connections()

    def check_food_collision(self, food) -> bool:
        """
        Check whether the head is on `food`.

        A hit schedules one segment of growth for the next move.
        """
        if self.head != food.cell:
            return False
        self.grow_pending = True
        return True

    def occupied_cells(self) -> List[Cell]:
        return self.cells

    def _refresh_connections(self) -> None:
        """Recompute every segment's connection flags from the cell sequence."""
        for segment in self.segments:
            segment.clear_connections()

        for current, following in zip(self.segments, self.segments[1:]):
            current.connect_towards(following.cell)
            following.connect_towards(current.cell)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for rendering."""
        return {
            "segments": [segment.to_dict() for segment in self.segments],
            "direction": int(self.direction),
            "length": len(self.segments),
        }
