"""
Game Loop - Session lifecycle and the per-tick order of operations.

An external timer calls GameLoop.on_timer() at a fixed rate (60 Hz). The
difficulty decides how many timer ticks make up one simulation step, so one
timer serves every speed. Each step runs to completion before the next
timer firing; input only writes the snake's buffered direction request.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any
from enum import Enum
import random

from ..core.entity_interface import Movable, Collidable
from ..core.event_interface import GameEvents
from ..progression.profile import PlayerProfile
from ..progression.store import ProfileStore
from .capabilities import Capabilities
from .collision import CollisionResolver, CollisionReport
from .config import SnakeConfig
from .food import Food, roll_kind, values_from_config, chances_from_config
from .grid import Cell, Direction, Grid
from .snake import Snake


class SessionState(Enum):
    """Lifecycle of a play session."""
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


@dataclass
class Session:
    """State of one run, from start until the snake dies or play is stopped."""
    snake: Snake
    foods: List[Food]
    difficulty: int
    state: SessionState = SessionState.RUNNING
    ticks: int = 0
    steps: int = 0
    score: int = 0
    currency_earned: int = 0
    end_reason: Optional[str] = None
    new_highscore: bool = False

    def entities(self) -> list:
        return [self.snake, *self.foods]


class GameLoop:
    """
    Owns the current session and drives it one tick at a time.

    State machine: IDLE -> RUNNING -> ENDED, and start() from ENDED begins a
    fresh session. Listeners implementing GameEvents are told about every
    step's outcome; the loop never calls rendering, audio, or storage code
    directly.
    """

    def __init__(
        self,
        config: Optional[SnakeConfig] = None,
        profile: Optional[PlayerProfile] = None,
        store: Optional[ProfileStore] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the loop.

        Args:
            config: Simulation rules (defaults to SnakeConfig())
            profile: Player profile; loaded from `store` when omitted, or a
                fresh one at the configured default difficulty
            store: Where the profile is written after each session
            rng: Random source for food placement and rolls
        """
        self.config = config or SnakeConfig()
        self.grid = Grid(self.config.columns, self.config.rows)
        self.store = store

        if profile is None:
            if store is not None:
                profile = store.load()
            else:
                profile = PlayerProfile(difficulty=self.config.default_difficulty)
        self.profile = profile

        self.rng = rng or random.Random()
        self.resolver = CollisionResolver(self.grid)
        self.session: Optional[Session] = None
        self._listeners: List[GameEvents] = []

        self._food_values = values_from_config(self.config.food_values)
        self._kind_chances = chances_from_config(self.config.kind_chances)

        self.capabilities = self._load_capabilities()
        self.difficulty = self._clamp_difficulty(self.profile.difficulty)

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, listener: GameEvents) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: GameEvents) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        if self.session is None:
            return SessionState.IDLE
        return self.session.state

    @property
    def running(self) -> bool:
        return self.state == SessionState.RUNNING

    def start(self) -> Session:
        """
        Start a fresh session.

        Does nothing if a session is already running.

        Returns:
            The running session
        """
        if self.running:
            return self.session

        # Upgrades may have been bought since the last session
        self.refresh_capabilities()

        snake = Snake.spawn(
            self.config.spawn_column,
            self.config.spawn_row,
            self.config.spawn_length,
            Direction.RIGHT,
        )
        self.session = Session(snake=snake, foods=[], difficulty=self.difficulty)
        self._spawn_food()

        state = self.get_state()
        for listener in self._listeners:
            listener.on_session_started(state)

        return self.session

    def stop(self) -> None:
        """End the running session early, keeping its score."""
        if self.running:
            self._end("stopped")

    def refresh_capabilities(self) -> Capabilities:
        """
        Re-derive capabilities from the profile's upgrades.

        Call after a purchase. Has no effect while a session is running; the
        running session keeps the rules it started with.
        """
        if not self.running:
            self.capabilities = self._load_capabilities()
            self.difficulty = self._clamp_difficulty(self.difficulty)
        return self.capabilities

    def set_difficulty(self, level: int) -> None:
        """
        Choose the difficulty for the next session.

        Raises:
            ValueError: If the level is outside the unlocked range
        """
        self.refresh_capabilities()
        if not self.config.difficulty_min <= level <= self.capabilities.max_difficulty:
            raise ValueError(
                f"Difficulty must be between {self.config.difficulty_min} "
                f"and {self.capabilities.max_difficulty}, got {level}"
            )
        self.difficulty = level
        self.profile.difficulty = level

    def request_direction(self, direction: Direction) -> bool:
        """
        Forward a steering request to the snake's buffer.

        Returns:
            True if the request was accepted
        """
        if not self.running:
            return False
        return self.session.snake.request_direction(direction)

    # ------------------------------------------------------------------
    # Ticking
    # ------------------------------------------------------------------

    def on_timer(self) -> bool:
        """
        Handle one timer firing.

        The tick counter always advances; a simulation step only runs on
        ticks that are a multiple of the difficulty's step interval.

        Returns:
            True if a simulation step ran
        """
        if not self.running:
            return False

        session = self.session
        session.ticks += 1
        if session.ticks % self.config.step_interval(session.difficulty) != 0:
            return False

        self.step()
        return True

    def step(self) -> Optional[CollisionReport]:
        """
        Run one simulation step: move, resolve collisions, score, signal.

        Returns:
            The collision report, or None if no session is running
        """
        if not self.running:
            return None

        session = self.session
        for entity in session.entities():
            if isinstance(entity, Movable):
                entity.move()

        report = self.resolver.resolve(session.snake, session.foods, self.capabilities.portal_walls)
        for food in report.eaten:
            self._consume(food)

        session.steps += 1

        if report.fatal:
            self._end("wall" if report.hit_wall else "self")
            return report

        if not session.foods:
            self._spawn_food()

        state = self.get_state()
        for listener in self._listeners:
            listener.on_frame(state)

        return report

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _load_capabilities(self) -> Capabilities:
        return Capabilities.from_upgrades(self.profile.unlocked_upgrades, self.config)

    def _clamp_difficulty(self, level: int) -> int:
        return min(max(level, self.config.difficulty_min), self.capabilities.max_difficulty)

    def free_cells(self) -> List[Cell]:
        """Arena cells not covered by the snake or any food."""
        occupied = []
        if self.session is not None:
            for entity in self.session.entities():
                if isinstance(entity, Collidable):
                    occupied.extend(entity.occupied_cells())
        return self.grid.free_cells(occupied)

    def _roll_kind(self):
        return roll_kind(self.capabilities, self._kind_chances, self.rng)

    def _spawn_food(self) -> Optional[Food]:
        """Place a new food on a free cell, if there is one."""
        free = self.free_cells()
        if not free:
            return None
        food = Food(free[0], self._roll_kind(), self._food_values)
        food.relocate(free, self.rng)
        self.session.foods.append(food)
        return food

    def _consume(self, food: Food) -> None:
        """Score an eaten food, then re-roll and move it."""
        session = self.session
        eaten_kind = food.kind
        eaten_value = food.value
        eaten_cell = food.cell

        food.assign_kind(self._roll_kind())

        chance = self.capabilities.second_food_chance
        if chance > 0 and len(session.foods) < self.config.max_foods and self.rng.random() < chance:
            self._spawn_food()

        if not food.relocate(self.free_cells(), self.rng):
            session.foods.remove(food)

        earned = eaten_value * self.config.currency_multiplier(session.difficulty)
        session.score += session.difficulty
        session.currency_earned += earned

        event = {
            "kind": int(eaten_kind),
            "kind_name": eaten_kind.label,
            "value": eaten_value,
            "currency": earned,
            "column": eaten_cell.column,
            "row": eaten_cell.row,
            "score": session.score,
        }
        for listener in self._listeners:
            listener.on_food_consumed(event)

    def _end(self, reason: str) -> None:
        """Freeze the session and write the result to the profile."""
        session = self.session
        session.state = SessionState.ENDED
        session.end_reason = reason
        session.new_highscore = self.profile.record_result(session.score, session.currency_earned)

        if self.store is not None:
            self.store.save(self.profile)

        print(
            f"[Game] Session ended ({reason}): score {session.score}, "
            f"+{session.currency_earned} currency, highscore {self.profile.highscore}"
        )

        result = self.get_state()
        result["reason"] = reason
        result["new_highscore"] = session.new_highscore
        for listener in self._listeners:
            listener.on_session_ended(result)

    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state for rendering.

        Returns:
            Dictionary containing the full read-only snapshot
        """
        state: Dict[str, Any] = {
            "state": self.state.value,
            "columns": self.grid.columns,
            "rows": self.grid.rows,
            "highscore": self.profile.highscore,
            "currency": self.profile.currency,
            "difficulty": self.difficulty,
            "portal_walls": self.capabilities.portal_walls,
            "snake": [],
            "direction": int(Direction.RIGHT),
            "foods": [],
            "score": 0,
            "currency_earned": 0,
            "tick": 0,
            "step": 0,
        }

        session = self.session
        if session is None:
            return state

        snake_state = session.snake.to_dict()
        state.update({
            "snake": snake_state["segments"],
            "direction": snake_state["direction"],
            "foods": [food.to_dict() for food in session.foods],
            "score": session.score,
            "currency_earned": session.currency_earned,
            "difficulty": session.difficulty,
            "tick": session.ticks,
            "step": session.steps,
        })
        return state
