"""
Profile Store - Saves and loads the player profile as JSON.
"""
import json
from pathlib import Path

from .profile import PlayerProfile


class ProfileStore:
    """
    Reads and writes a PlayerProfile at a fixed path.

    A missing or unreadable file never stops the game; load() falls back to
    a fresh profile instead.
    """

    def __init__(self, path: str = "save/profile.json", default_difficulty: int = 1):
        """
        Initialize the store.

        Args:
            path: JSON file holding the profile
            default_difficulty: Difficulty given to a fresh profile
        """
        self.path = Path(path)
        self.default_difficulty = default_difficulty

    def defaults(self) -> PlayerProfile:
        """A fresh profile, used when nothing usable is stored."""
        return PlayerProfile(difficulty=self.default_difficulty)

    def load(self) -> PlayerProfile:
        """
        Load the profile.

        Returns:
            The stored profile, or defaults if missing or corrupt
        """
        if not self.path.exists():
            return self.defaults()

        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            print(f"[Profile] Could not read {self.path} ({e}), using defaults")
            return self.defaults()

        if not isinstance(data, dict):
            print(f"[Profile] Unexpected data in {self.path}, using defaults")
            return self.defaults()

        return PlayerProfile.from_dict(data, self.defaults())

    def save(self, profile: PlayerProfile) -> str:
        """
        Save the profile.

        Args:
            profile: Profile to write

        Returns:
            Path to saved file
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(profile.to_dict(), f, indent=2)
        return str(self.path)
