"""
Player profile - the persisted progression record.
"""
import math
from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Set


@dataclass
class PlayerProfile:
    """Highscore, currency, upgrades, and settings carried between sessions."""
    highscore: int = 0
    currency: int = 0
    unlocked_upgrades: Set[str] = field(default_factory=set)
    difficulty: int = 1
    volume: float = 1.0
    muted: bool = False

    def has_upgrade(self, upgrade_id: str) -> bool:
        return upgrade_id in self.unlocked_upgrades

    def record_result(self, score: int, currency_earned: int) -> bool:
        """
        Fold a finished session into the profile.

        Args:
            score: Final session score
            currency_earned: Currency collected during the session

        Returns:
            True if the score set a new highscore
        """
        self.currency += currency_earned
        if score > self.highscore:
            self.highscore = score
            return True
        return False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "highscore": self.highscore,
            "currency": self.currency,
            "unlocked_upgrades": sorted(self.unlocked_upgrades),
            "difficulty": self.difficulty,
            "volume": self.volume,
            "muted": self.muted,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], defaults: Optional["PlayerProfile"] = None) -> "PlayerProfile":
        """
        Create from dictionary.

        Malformed fields fall back to their defaults individually.

        Args:
            data: Stored profile fields
            defaults: Profile supplying fallback values (PlayerProfile() if omitted)
        """
        if defaults is None:
            defaults = cls()

        def _number(value: Any) -> bool:
            # json.load accepts Infinity and NaN
            if isinstance(value, bool):
                return False
            return isinstance(value, int) or (isinstance(value, float) and math.isfinite(value))

        def _int(key: str, default: int) -> int:
            value = data.get(key, default)
            if not _number(value):
                return default
            return max(0, int(value))

        volume = data.get("volume", defaults.volume)
        if not _number(volume):
            volume = defaults.volume

        upgrades = data.get("unlocked_upgrades", [])
        if not isinstance(upgrades, (list, tuple, set)):
            upgrades = []

        muted = data.get("muted", defaults.muted)

        return cls(
            highscore=_int("highscore", defaults.highscore),
            currency=_int("currency", defaults.currency),
            unlocked_upgrades={u for u in upgrades if isinstance(u, str)},
            difficulty=_int("difficulty", defaults.difficulty) or defaults.difficulty,
            volume=float(min(1.0, max(0.0, volume))),
            muted=muted if isinstance(muted, bool) else defaults.muted,
        )
