"""
Entity capability interfaces for Snake Arcade.

The game loop decides which entities take part in movement, drawing, and
occupancy by checking which of these interfaces they implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, TYPE_CHECKING

if TYPE_CHECKING:
    from ..game.grid import Cell


class Movable(ABC):
    """An entity that advances once per simulation step."""

    @abstractmethod
    def move(self) -> None:
        """Advance the entity by one step."""
        pass


class Drawable(ABC):
    """An entity that exposes a render snapshot."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """
        Get a plain-data snapshot of the entity for rendering.

        Returns:
            Dictionary the renderer can draw from
        """
        pass


class Collidable(ABC):
    """An entity that occupies grid cells."""

    @abstractmethod
    def occupied_cells(self) -> List["Cell"]:
        """
        Get every cell this entity currently covers.

        Returns:
            List of occupied cells
        """
        pass
