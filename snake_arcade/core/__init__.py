"""
Core abstractions for Snake Arcade.

Provides abstract interfaces that entities, renderers, and event listeners implement.
"""

from .entity_interface import Movable, Drawable, Collidable
from .event_interface import GameEvents
from .renderer_interface import RendererInterface

__all__ = [
    'Movable',
    'Drawable',
    'Collidable',
    'GameEvents',
    'RendererInterface',
]
