"""
Sound Player - Synthesized sound effects driven by game events.

Tones are generated with numpy and played through pygame.mixer, so the game
ships without audio assets.
"""
from typing import Dict, Any, Optional

import numpy as np
import pygame

from ..core.event_interface import GameEvents
from ..progression.profile import PlayerProfile


# Base pitch per food kind (common -> epic)
KIND_FREQUENCIES = [440.0, 554.4, 659.3, 880.0]
GAME_OVER_FREQUENCY = 196.0


def synthesize_tone(
    frequency: float,
    duration: float,
    sample_rate: int = 22050,
    fade: float = 0.01
) -> np.ndarray:
    """
    Build a mono sine tone with short linear fades.

    Args:
        frequency: Pitch in Hz
        duration: Length in seconds
        sample_rate: Samples per second
        fade: Fade in/out length in seconds

    Returns:
        int16 sample array
    """
    n_samples = max(1, int(duration * sample_rate))
    t = np.arange(n_samples) / sample_rate
    wave = np.sin(2 * np.pi * frequency * t)

    fade_samples = min(int(fade * sample_rate), n_samples // 2)
    if fade_samples > 0:
        ramp = np.linspace(0.0, 1.0, fade_samples)
        wave[:fade_samples] *= ramp
        wave[-fade_samples:] *= ramp[::-1]

    return (wave * 32767 * 0.5).astype(np.int16)


class SoundPlayer(GameEvents):
    """
    Plays a blip when food is eaten and a low tone when the session ends.

    Volume and mute live on the player profile so they persist with it.
    """

    def __init__(
        self,
        profile: PlayerProfile,
        enabled: bool = True,
        sample_rate: int = 22050,
        tone_duration: float = 0.08
    ):
        """
        Initialize the sound player.

        Args:
            profile: Profile holding volume and mute settings
            enabled: Whether to try opening the mixer at all
            sample_rate: Mixer sample rate
            tone_duration: Length of the eat blip in seconds
        """
        self.profile = profile
        self.sample_rate = sample_rate
        self.channels = 1
        self.tone_duration = tone_duration
        self.available = False
        self._sounds: Dict[str, Any] = {}

        if enabled:
            self._init_mixer()

    def _init_mixer(self) -> None:
        try:
            pygame.mixer.init(frequency=self.sample_rate, size=-16, channels=1)
        except pygame.error as e:
            print(f"[Audio] Mixer unavailable ({e}), sound disabled")
            return

        # The device may open with a different rate or channel count than requested
        mixer_format = pygame.mixer.get_init()
        if mixer_format:
            self.sample_rate, _, self.channels = mixer_format

        self.available = True
        for kind, frequency in enumerate(KIND_FREQUENCIES):
            self._sounds[f"eat_{kind}"] = self._make_sound(frequency, self.tone_duration)
        self._sounds["game_over"] = self._make_sound(GAME_OVER_FREQUENCY, self.tone_duration * 5)

    def _make_sound(self, frequency: float, duration: float):
        samples = synthesize_tone(frequency, duration, self.sample_rate)
        if self.channels > 1:
            samples = np.ascontiguousarray(np.column_stack([samples] * self.channels))
        return pygame.sndarray.make_sound(samples)

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    @property
    def volume(self) -> float:
        return self.profile.volume

    @property
    def muted(self) -> bool:
        return self.profile.muted

    def set_volume(self, volume: float) -> float:
        """Set the volume, clamped to [0, 1]."""
        self.profile.volume = round(min(1.0, max(0.0, volume)), 2)
        return self.profile.volume

    def change_volume(self, delta: float) -> float:
        return self.set_volume(self.profile.volume + delta)

    def toggle_mute(self) -> bool:
        self.profile.muted = not self.profile.muted
        return self.profile.muted

    def effective_volume(self) -> float:
        return 0.0 if self.profile.muted else self.profile.volume

    def play(self, name: str) -> bool:
        """
        Play a named sound at the current volume.

        Returns:
            True if the sound was started
        """
        sound: Optional[Any] = self._sounds.get(name)
        volume = self.effective_volume()
        if not self.available or sound is None or volume <= 0.0:
            return False
        sound.set_volume(volume)
        sound.play()
        return True

    # ------------------------------------------------------------------
    # GameEvents
    # ------------------------------------------------------------------

    def on_food_consumed(self, event: Dict[str, Any]) -> None:
        kind = min(int(event.get("kind", 0)), len(KIND_FREQUENCIES) - 1)
        self.play(f"eat_{kind}")

    def on_session_ended(self, result: Dict[str, Any]) -> None:
        self.play("game_over")
