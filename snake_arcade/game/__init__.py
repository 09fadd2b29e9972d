"""
Snake simulation: grid, snake, food, collision resolution, and the game loop.
"""

from .grid import Cell, Direction, Grid
from .snake import Snake, Segment
from .food import Food, FoodKind, FOOD_VALUES, roll_kind
from .capabilities import Capabilities
from .collision import CollisionResolver, CollisionReport
from .config import SnakeConfig
from .session import GameLoop, Session, SessionState

__all__ = [
    'Cell',
    'Direction',
    'Grid',
    'Snake',
    'Segment',
    'Food',
    'FoodKind',
    'FOOD_VALUES',
    'roll_kind',
    'Capabilities',
    'CollisionResolver',
    'CollisionReport',
    'SnakeConfig',
    'GameLoop',
    'Session',
    'SessionState',
]
