"""
Snake game rule configuration.
"""

from dataclasses import dataclass, field
from typing import Dict, Any


def _default_food_values() -> Dict[str, int]:
    return {"common": 1, "uncommon": 2, "rare": 5, "epic": 10}


def _default_kind_chances() -> Dict[str, float]:
    return {"uncommon": 0.25, "rare": 0.10, "epic": 0.03}


def _default_currency_multipliers() -> Dict[int, int]:
    # Only the hardest tier pays extra
    return {5: 2}


@dataclass
class SnakeConfig:
    """Configuration for the snake simulation."""

    # Arena
    columns: int = 20
    rows: int = 15

    # Timer rate; difficulty decides how many timer ticks make one step
    ticks_per_second: int = 60

    # Spawn
    spawn_column: int = 5
    spawn_row: int = 5
    spawn_length: int = 2

    # Difficulty tiers
    difficulty_min: int = 1
    difficulty_max: int = 4
    difficulty_max_upgraded: int = 5
    default_difficulty: int = 1

    # Food
    max_foods: int = 2
    second_food_chance: float = 0.2
    food_values: Dict[str, int] = field(default_factory=_default_food_values)
    kind_chances: Dict[str, float] = field(default_factory=_default_kind_chances)
    currency_multipliers: Dict[int, int] = field(default_factory=_default_currency_multipliers)

    def step_interval(self, difficulty: int) -> int:
        """Number of timer ticks between simulation steps at `difficulty`."""
        return max(1, self.ticks_per_second // max(1, difficulty))

    def currency_multiplier(self, difficulty: int) -> int:
        """Currency multiplier for a difficulty tier (1 unless listed)."""
        return self.currency_multipliers.get(difficulty, 1)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "columns": self.columns,
            "rows": self.rows,
            "ticks_per_second": self.ticks_per_second,
            "spawn": {
                "column": self.spawn_column,
                "row": self.spawn_row,
                "length": self.spawn_length,
            },
            "difficulty": {
                "min": self.difficulty_min,
                "max": self.difficulty_max,
                "max_upgraded": self.difficulty_max_upgraded,
                "default": self.default_difficulty,
            },
            "food": {
                "max_foods": self.max_foods,
                "second_food_chance": self.second_food_chance,
                "values": dict(self.food_values),
                "kind_chances": dict(self.kind_chances),
                "currency_multipliers": dict(self.currency_multipliers),
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SnakeConfig":
        """Create config from dictionary."""
        spawn = data.get("spawn", {})
        difficulty = data.get("difficulty", {})
        food = data.get("food", {})

        food_values = _default_food_values()
        food_values.update(food.get("values", {}))
        kind_chances = _default_kind_chances()
        kind_chances.update(food.get("kind_chances", {}))
        multipliers = food.get("currency_multipliers")
        if multipliers is None:
            multipliers = _default_currency_multipliers()

        return cls(
            columns=data.get("columns", 20),
            rows=data.get("rows", 15),
            ticks_per_second=data.get("ticks_per_second", 60),
            spawn_column=spawn.get("column", 5),
            spawn_row=spawn.get("row", 5),
            spawn_length=spawn.get("length", 2),
            difficulty_min=difficulty.get("min", 1),
            difficulty_max=difficulty.get("max", 4),
            difficulty_max_upgraded=difficulty.get("max_upgraded", 5),
            default_difficulty=difficulty.get("default", 1),
            max_foods=food.get("max_foods", 2),
            second_food_chance=food.get("second_food_chance", 0.2),
            food_values=food_values,
            kind_chances=kind_chances,
            # YAML may hand back string keys
            currency_multipliers={int(k): int(v) for k, v in multipliers.items()},
        )
