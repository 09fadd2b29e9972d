"""
Snake Game Renderer - Pygame-based visualization implementing RendererInterface.
"""

import pygame
from typing import Dict, Any, List, Tuple

from ..core.event_interface import GameEvents
from ..core.renderer_interface import RendererInterface


# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
DARK_GRAY = (30, 30, 40)
GRID_COLOR = (50, 50, 60)
PORTAL_COLOR = (90, 60, 160)
SNAKE_HEAD_COLOR = (0, 220, 100)
SNAKE_BODY_COLOR = (0, 180, 80)
TEXT_COLOR = (220, 220, 220)
DIM_TEXT_COLOR = (150, 150, 150)
GAME_OVER_COLOR = (255, 100, 100)

# Indexed by food kind: common, uncommon, rare, epic
FOOD_COLORS = [
    (220, 50, 50),
    (60, 140, 230),
    (180, 80, 220),
    (250, 200, 40),
]


class SnakeRenderer(RendererInterface):
    """
    Renders the Snake game using Pygame, implementing RendererInterface.

    Segments are drawn as inset squares, bridged towards every side whose
    connection flag is set so the body reads as one continuous shape.
    """

    def __init__(
        self,
        cell_size: int = 25,
        columns: int = 20,
        rows: int = 15
    ):
        """
        Initialize the renderer.

        Args:
            cell_size: Size of each grid cell in pixels
            columns: Grid width in cells
            rows: Grid height in cells
        """
        self._cell_size = cell_size
        self._columns = columns
        self._rows = rows
        self._offset_x = 0
        self._offset_y = 0

    def get_preferred_size(self) -> Tuple[int, int]:
        """Get the preferred render size."""
        return (self._columns * self._cell_size, self._rows * self._cell_size)

    def get_cell_size(self) -> int:
        """Get the current cell size."""
        return self._cell_size

    def set_render_area(self, x: int, y: int, width: int, height: int) -> None:
        """Set the area where this renderer should draw."""
        self._offset_x = x
        self._offset_y = y
        # Adjust cell size to fit the area
        self._cell_size = max(1, min(width // self._columns, height // self._rows))

    def _cell_rect(self, column: int, row: int, inset: int) -> "pygame.Rect":
        return pygame.Rect(
            self._offset_x + column * self._cell_size + inset,
            self._offset_y + row * self._cell_size + inset,
            self._cell_size - inset * 2,
            self._cell_size - inset * 2
        )

    def render(self, game_state: Dict[str, Any], surface: "pygame.Surface") -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Dictionary containing game state
            surface: Pygame surface to draw on
        """
        columns = game_state.get("columns", self._columns)
        rows = game_state.get("rows", self._rows)
        game_width = columns * self._cell_size
        game_height = rows * self._cell_size

        # Draw background
        game_rect = pygame.Rect(self._offset_x, self._offset_y, game_width, game_height)
        pygame.draw.rect(surface, DARK_GRAY, game_rect)

        # Draw grid lines (subtle)
        for x in range(columns + 1):
            start = (self._offset_x + x * self._cell_size, self._offset_y)
            end = (self._offset_x + x * self._cell_size, self._offset_y + game_height)
            pygame.draw.line(surface, GRID_COLOR, start, end)

        for y in range(rows + 1):
            start = (self._offset_x, self._offset_y + y * self._cell_size)
            end = (self._offset_x + game_width, self._offset_y + y * self._cell_size)
            pygame.draw.line(surface, GRID_COLOR, start, end)

        if game_state.get("portal_walls"):
            pygame.draw.rect(surface, PORTAL_COLOR, game_rect, width=2)

        for food in game_state.get("foods", []):
            self._draw_food(surface, food)

        snake = game_state.get("snake", [])
        for i, segment in enumerate(snake):
            self._draw_segment(surface, segment, is_head=(i == 0))

        if snake:
            self._draw_eyes(surface, snake[0], game_state.get("direction", 0))

    def _draw_food(self, surface: "pygame.Surface", food: Dict[str, Any]) -> None:
        kind = min(food.get("kind", 0), len(FOOD_COLORS) - 1)
        center = (
            self._offset_x + food["column"] * self._cell_size + self._cell_size // 2,
            self._offset_y + food["row"] * self._cell_size + self._cell_size // 2,
        )
        pygame.draw.circle(surface, FOOD_COLORS[kind], center, self._cell_size // 2 - 2)

    def _draw_segment(self, surface: "pygame.Surface", segment: Dict[str, Any], is_head: bool) -> None:
        color = SNAKE_HEAD_COLOR if is_head else SNAKE_BODY_COLOR
        inset = max(1, self._cell_size // 8)
        column, row = segment["column"], segment["row"]

        body = self._cell_rect(column, row, inset)
        pygame.draw.rect(surface, color, body, border_radius=6 if is_head else 3)

        for bridge in self._bridges(segment, inset):
            pygame.draw.rect(surface, color, bridge)

    def _bridges(self, segment: Dict[str, Any], inset: int) -> List["pygame.Rect"]:
        """Rects filling the inset gap on each connected side."""
        x = self._offset_x + segment["column"] * self._cell_size
        y = self._offset_y + segment["row"] * self._cell_size
        inner = self._cell_size - inset * 2
        rects = []
        if segment.get("top"):
            rects.append(pygame.Rect(x + inset, y, inner, inset))
        if segment.get("bottom"):
            rects.append(pygame.Rect(x + inset, y + self._cell_size - inset, inner, inset))
        if segment.get("left"):
            rects.append(pygame.Rect(x, y + inset, inset, inner))
        if segment.get("right"):
            rects.append(pygame.Rect(x + self._cell_size - inset, y + inset, inset, inner))
        return rects

    def _draw_eyes(self, surface: "pygame.Surface", head: Dict[str, Any], direction: int):
        """Draw eyes on the snake's head."""
        cx = self._offset_x + head["column"] * self._cell_size + self._cell_size // 2
        cy = self._offset_y + head["row"] * self._cell_size + self._cell_size // 2

        eye_radius = max(2, self._cell_size // 8)
        eye_offset = self._cell_size // 4

        # Position eyes based on direction
        if direction == 0:  # RIGHT
            positions = [(cx + 2, cy - eye_offset), (cx + 2, cy + eye_offset)]
        elif direction == 1:  # DOWN
            positions = [(cx - eye_offset, cy + 2), (cx + eye_offset, cy + 2)]
        elif direction == 2:  # LEFT
            positions = [(cx - 2, cy - eye_offset), (cx - 2, cy + eye_offset)]
        else:  # UP
            positions = [(cx - eye_offset, cy - 2), (cx + eye_offset, cy - 2)]

        for pos in positions:
            pygame.draw.circle(surface, WHITE, pos, eye_radius)
            pygame.draw.circle(surface, BLACK, pos, eye_radius // 2)


class StandaloneRenderer(SnakeRenderer, GameEvents):
    """
    Game renderer with its own window and HUD.
    Used by the play script; redraws on every frame signal.
    """

    def __init__(
        self,
        columns: int = 20,
        rows: int = 15,
        cell_size: int = 30,
        title: str = "Snake Arcade"
    ):
        """
        Initialize standalone renderer with its own window.

        Args:
            columns: Grid width in cells
            rows: Grid height in cells
            cell_size: Size of each cell in pixels
            title: Window title
        """
        super().__init__(cell_size, columns, rows)

        # Calculate window size with padding
        padding = 40
        self.window_width = columns * cell_size + padding * 2
        self.window_height = rows * cell_size + padding * 2 + 90  # Extra for HUD
        self._offset_x = padding
        self._offset_y = padding

        pygame.init()
        self.surface = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption(title)

        self.font = pygame.font.Font(None, 36)
        self.small_font = pygame.font.Font(None, 24)
        self.last_state: Dict[str, Any] = {}
        self.last_result: Dict[str, Any] = {}

    # GameEvents hooks keep the latest snapshot for the next draw
    def on_session_started(self, state: Dict[str, Any]) -> None:
        self.last_state = state
        self.last_result = {}

    def on_frame(self, state: Dict[str, Any]) -> None:
        self.last_state = state

    def on_session_ended(self, result: Dict[str, Any]) -> None:
        self.last_state = result
        self.last_result = result

    def _blit_centered(self, text: str, font, color, y: int) -> None:
        rendered = font.render(text, True, color)
        self.surface.blit(rendered, (self.window_width // 2 - rendered.get_width() // 2, y))

    def draw(self, state: Dict[str, Any], hud_lines: List[str] = (), overlay_lines: List[str] = ()) -> None:
        """
        Draw one complete frame.

        Args:
            state: Game state dictionary
            hud_lines: Status lines drawn under the arena
            overlay_lines: Lines drawn over the arena (menus, game over)
        """
        self.surface.fill(BLACK)
        self.render(state, self.surface)

        self._blit_centered(
            f"Score: {state.get('score', 0)}   High: {state.get('highscore', 0)}",
            self.font, TEXT_COLOR, self.window_height - 85
        )
        y = self.window_height - 55
        for line in hud_lines:
            self._blit_centered(line, self.small_font, DIM_TEXT_COLOR, y)
            y += 22

        if overlay_lines:
            y = self._offset_y + 20
            for i, line in enumerate(overlay_lines):
                color = GAME_OVER_COLOR if i == 0 and self.last_result else TEXT_COLOR
                self._blit_centered(line, self.font if i == 0 else self.small_font, color, y)
                y += 40 if i == 0 else 24

        pygame.display.flip()

    def close(self):
        """Close the renderer and pygame."""
        pygame.quit()
