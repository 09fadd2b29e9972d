"""
Game event listener interface for Snake Arcade.

Renderers, audio, and the play script subscribe to tick outcomes by
implementing GameEvents. Every hook is optional.
"""

from typing import Dict, Any


class GameEvents:
    """
    Listener for the outcome of each simulation step.

    Hooks are called synchronously from inside the tick and must not
    mutate the session.
    """

    def on_session_started(self, state: Dict[str, Any]) -> None:
        """
        Called once when a new session enters the running state.

        Args:
            state: Initial game state dictionary
        """
        pass

    def on_food_consumed(self, event: Dict[str, Any]) -> None:
        """
        Called when the snake eats a food item.

        Args:
            event: Dictionary with the eaten kind, value, and cell
        """
        pass

    def on_frame(self, state: Dict[str, Any]) -> None:
        """
        Called once per completed step while the session is running.

        Args:
            state: Game state dictionary ready for rendering
        """
        pass

    def on_session_ended(self, result: Dict[str, Any]) -> None:
        """
        Called once when the session transitions to ended.

        Args:
            result: Final game state plus the finalized score summary
        """
        pass
