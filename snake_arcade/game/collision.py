"""
Collision resolution between the snake head, food items, and the arena edge.
"""
from dataclasses import dataclass, field
from typing import List, Sequence

from .grid import Grid
from .snake import Snake
from .food import Food


@dataclass
class CollisionReport:
    """What the snake's head ran into during one step."""
    eaten: List[Food] = field(default_factory=list)
    hit_wall: bool = False
    hit_self: bool = False
    wrapped: bool = False

    @property
    def fatal(self) -> bool:
        return self.hit_wall or self.hit_self


class CollisionResolver:
    """
    Checks the freshly moved head against food and the boundary.

    Food checks run before boundary checks. With portal walls a boundary
    violation folds the head back into the arena instead of ending the run,
    and the folded head is then checked against food and body again.
    """

    def __init__(self, grid: Grid):
        self.grid = grid

    def check_food(self, snake: Snake, foods: Sequence[Food]) -> List[Food]:
        """Return the foods under the head, flagging growth for each hit."""
        return [food for food in foods if snake.check_food_collision(food)]

    def resolve(self, snake: Snake, foods: Sequence[Food], portal_walls: bool = False) -> CollisionReport:
        """
        Resolve the current head position.

        Args:
            snake: Snake that has just moved
            foods: Active food items
            portal_walls: Whether leaving the arena wraps instead of killing

        Returns:
            CollisionReport describing the outcome
        """
        report = CollisionReport()
        report.eaten = self.check_food(snake, foods)
        report.hit_wall = snake.check_boundary(self.grid)
        report.hit_self = snake.check_self_collision()

        if report.hit_wall and portal_walls:
            snake.wrap_at_boundary(self.grid)
            report.hit_wall = False
            report.wrapped = True

            remaining = [food for food in foods if food not in report.eaten]
            report.eaten.extend(self.check_food(snake, remaining))
            report.hit_self = snake.check_self_collision()

        return report
