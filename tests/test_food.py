"""
Tests for Food: kinds, values, relocation, and the kind roll.
"""

import random
from unittest.mock import MagicMock

from snake_arcade.game.capabilities import Capabilities, UNCOMMON_FOOD, RARE_FOOD, EPIC_FOOD
from snake_arcade.game.config import SnakeConfig
from snake_arcade.game.food import (
    Food,
    FoodKind,
    FOOD_VALUES,
    roll_kind,
    values_from_config,
    chances_from_config,
)
from snake_arcade.game.grid import Cell, Grid


def fixed_draws(*values):
    """A random source whose random() returns the given values in order."""
    source = MagicMock()
    source.random.side_effect = list(values)
    return source


class TestFoodKinds:
    """Tests for kind -> value assignment."""

    def test_value_table_is_increasing(self):
        """Test values grow with rarity."""
        values = [FOOD_VALUES[kind] for kind in sorted(FoodKind)]

        assert values == [1, 2, 5, 10]
        assert values == sorted(values)

    def test_default_kind(self):
        """Test new food is common and worth 1."""
        food = Food(Cell(3, 3))

        assert food.kind == FoodKind.COMMON
        assert food.value == 1

    def test_assign_kind(self):
        """Test assign_kind updates the value."""
        food = Food(Cell(3, 3))

        food.assign_kind(FoodKind.EPIC)

        assert food.kind == FoodKind.EPIC
        assert food.value == 10

    def test_custom_value_table(self):
        """Test a configured table overrides the defaults."""
        values = values_from_config({"rare": 7})
        food = Food(Cell(0, 0), FoodKind.RARE, values)

        assert food.value == 7
        assert values[FoodKind.COMMON] == 1

    def test_to_dict(self):
        """Test the render snapshot."""
        food = Food(Cell(4, 2), FoodKind.UNCOMMON)

        assert food.to_dict() == {
            "column": 4,
            "row": 2,
            "kind": 1,
            "kind_name": "uncommon",
            "value": 2,
        }


class TestRelocate:
    """Tests for Food.relocate."""

    def test_relocate_picks_free_cell(self, rng):
        """Test relocation lands on one of the given cells."""
        grid = Grid(5, 5)
        occupied = {Cell(0, 0), Cell(1, 0), Cell(2, 0)}
        food = Food(Cell(0, 0))
        free = grid.free_cells(occupied)

        for _ in range(50):
            assert food.relocate(free, rng) is True
            assert food.cell in free
            assert food.cell not in occupied

    def test_relocate_empty_is_noop(self, rng):
        """Test an empty free set leaves the food in place."""
        food = Food(Cell(2, 2))

        assert food.relocate([], rng) is False
        assert food.cell == Cell(2, 2)

    def test_relocate_uniform(self):
        """Test every free cell is reachable."""
        rng = random.Random(7)
        free = [Cell(0, 0), Cell(1, 0), Cell(2, 0)]
        food = Food(Cell(5, 5))
        seen = set()

        for _ in range(200):
            food.relocate(free, rng)
            seen.add(food.cell)

        assert seen == set(free)


class TestRollKind:
    """Tests for the rarest-first kind roll."""

    def setup_method(self):
        self.chances = chances_from_config(SnakeConfig().kind_chances)

    def test_nothing_unlocked_is_common(self):
        """Test only COMMON without upgrades, and no draws are spent."""
        source = fixed_draws()

        assert roll_kind(Capabilities(), self.chances, source) == FoodKind.COMMON
        source.random.assert_not_called()

    def test_rarest_checked_first(self):
        """Test EPIC wins when its draw passes, even if others would too."""
        caps = Capabilities(unlocked=frozenset({UNCOMMON_FOOD, RARE_FOOD, EPIC_FOOD}))

        assert roll_kind(caps, self.chances, fixed_draws(0.0)) == FoodKind.EPIC

    def test_falls_through_to_next_kind(self):
        """Test a failed EPIC draw moves on to RARE, then UNCOMMON."""
        caps = Capabilities(unlocked=frozenset({UNCOMMON_FOOD, RARE_FOOD, EPIC_FOOD}))

        assert roll_kind(caps, self.chances, fixed_draws(0.9, 0.05)) == FoodKind.RARE
        assert roll_kind(caps, self.chances, fixed_draws(0.9, 0.9, 0.1)) == FoodKind.UNCOMMON
        assert roll_kind(caps, self.chances, fixed_draws(0.9, 0.9, 0.9)) == FoodKind.COMMON

    def test_locked_kinds_are_skipped(self):
        """Test a kind needs its upgrade even when the draw would pass."""
        caps = Capabilities(unlocked=frozenset({UNCOMMON_FOOD}))

        assert roll_kind(caps, self.chances, fixed_draws(0.0)) == FoodKind.UNCOMMON

    def test_threshold_is_strict(self):
        """Test a draw equal to the chance fails."""
        caps = Capabilities(unlocked=frozenset({UNCOMMON_FOOD}))

        assert roll_kind(caps, {FoodKind.UNCOMMON: 0.25}, fixed_draws(0.25)) == FoodKind.COMMON
