"""
Audio for Snake Arcade: synthesized effects with volume and mute.
"""

from .sound import SoundPlayer, synthesize_tone

__all__ = [
    'SoundPlayer',
    'synthesize_tone',
]
