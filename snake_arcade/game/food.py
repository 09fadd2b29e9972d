"""
Food entity - position, kind, relocation, and the kind roll.
"""
from typing import Dict, Any, List, Optional, Sequence, Mapping
from enum import IntEnum
import random

from ..core.entity_interface import Drawable, Collidable
from .grid import Cell
from .capabilities import Capabilities, UNCOMMON_FOOD, RARE_FOOD, EPIC_FOOD


class FoodKind(IntEnum):
    """Food tiers, ordered by increasing rarity and value."""
    COMMON = 0
    UNCOMMON = 1
    RARE = 2
    EPIC = 3

    @property
    def label(self) -> str:
        return self.name.lower()


FOOD_VALUES: Dict[FoodKind, int] = {
    FoodKind.COMMON: 1,
    FoodKind.UNCOMMON: 2,
    FoodKind.RARE: 5,
    FoodKind.EPIC: 10,
}

# Rarest first, so a common kind cannot shadow a rare one
KIND_ROLL_ORDER = (
    (FoodKind.EPIC, EPIC_FOOD),
    (FoodKind.RARE, RARE_FOOD),
    (FoodKind.UNCOMMON, UNCOMMON_FOOD),
)


def values_from_config(values: Mapping[str, int]) -> Dict[FoodKind, int]:
    """Map a {'common': 1, ...} table onto FoodKind keys."""
    table = dict(FOOD_VALUES)
    for kind in FoodKind:
        if kind.label in values:
            table[kind] = int(values[kind.label])
    return table


def chances_from_config(chances: Mapping[str, float]) -> Dict[FoodKind, float]:
    """Map a {'rare': 0.1, ...} table onto FoodKind keys."""
    return {kind: float(chances[kind.label]) for kind in FoodKind if kind.label in chances}


def roll_kind(
    capabilities: Capabilities,
    chances: Mapping[FoodKind, float],
    rng: Optional[random.Random] = None
) -> FoodKind:
    """
    Roll the kind of a food item.

    Unlocked kinds are tried rarest first, each with an independent draw
    against its chance. The first success wins; COMMON otherwise.

    Args:
        capabilities: Unlocked upgrades gating each kind
        chances: Probability of each kind once unlocked
        rng: Random source (defaults to the module-level generator)

    Returns:
        The rolled FoodKind
    """
    rng = rng or random
    for kind, upgrade_id in KIND_ROLL_ORDER:
        if not capabilities.has(upgrade_id):
            continue
        if rng.random() < chances.get(kind, 0.0):
            return kind
    return FoodKind.COMMON


class Food(Drawable, Collidable):
    """A food item sitting on one grid cell."""

    def __init__(
        self,
        cell: Cell,
        kind: FoodKind = FoodKind.COMMON,
        values: Optional[Mapping[FoodKind, int]] = None
    ):
        """
        Initialize a food item.

        Args:
            cell: Position on the grid
            kind: Food tier
            values: Kind -> value table (defaults to FOOD_VALUES)
        """
        self.cell = cell
        self._values = dict(values) if values is not None else dict(FOOD_VALUES)
        self.kind = FoodKind.COMMON
        self.value = self._values[FoodKind.COMMON]
        self.assign_kind(kind)

    def assign_kind(self, kind: FoodKind) -> None:
        """Set the kind and its value from the value table."""
        self.kind = kind
        self.value = self._values[kind]

    def relocate(self, free_cells: Sequence[Cell], rng: Optional[random.Random] = None) -> bool:
        """
        Move to a uniformly chosen free cell.

        Args:
            free_cells: Candidate cells (may be empty on a nearly full arena)
            rng: Random source

        Returns:
            False if there was nowhere to go; the food is left in place
        """
        if not free_cells:
            return False
        rng = rng or random
        self.cell = rng.choice(list(free_cells))
        return True

    def occupied_cells(self) -> List[Cell]:
        return [self.cell]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for rendering."""
        return {
            "column": self.cell.column,
            "row": self.cell.row,
            "kind": int(self.kind),
            "kind_name": self.kind.label,
            "value": self.value,
        }

    def __repr__(self) -> str:
        return f"Food({self.cell.column}, {self.cell.row}, {self.kind.label})"
