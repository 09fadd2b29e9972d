"""
Upgrade flags and the rule changes they unlock.
"""
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable

from .config import SnakeConfig

SECOND_FOOD_CHANCE = "second-food-chance"
PORTAL_WALLS = "portal-walls"
UNCOMMON_FOOD = "uncommon-food"
RARE_FOOD = "rare-food"
EPIC_FOOD = "epic-food"
MAX_DIFFICULTY = "max-difficulty"

ALL_UPGRADES = (
    SECOND_FOOD_CHANCE,
    PORTAL_WALLS,
    UNCOMMON_FOOD,
    RARE_FOOD,
    EPIC_FOOD,
    MAX_DIFFICULTY,
)


@dataclass(frozen=True)
class Capabilities:
    """Simulation rules derived from a player's unlocked upgrades."""
    portal_walls: bool = False
    second_food_chance: float = 0.0
    unlocked: FrozenSet[str] = field(default_factory=frozenset)
    max_difficulty: int = 4

    def has(self, upgrade_id: str) -> bool:
        return upgrade_id in self.unlocked

    @classmethod
    def from_upgrades(cls, upgrades: Iterable[str], config: SnakeConfig) -> "Capabilities":
        """
        Build capabilities from upgrade ids.

        Args:
            upgrades: Unlocked upgrade ids (unknown ids are ignored)
            config: Rule configuration supplying chances and limits

        Returns:
            Capabilities for a new session
        """
        unlocked = frozenset(u for u in upgrades if u in ALL_UPGRADES)
        return cls(
            portal_walls=PORTAL_WALLS in unlocked,
            second_food_chance=config.second_food_chance if SECOND_FOOD_CHANCE in unlocked else 0.0,
            unlocked=unlocked,
            max_difficulty=(
                config.difficulty_max_upgraded if MAX_DIFFICULTY in unlocked
                else config.difficulty_max
            ),
        )
