"""
Pytest configuration and fixtures for Snake Arcade tests.

This module sets up pygame mocking to allow testing the renderer and
audio without requiring a display, a sound card, or pygame initialization.
"""

import random
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


class MockPygameError(Exception):
    """Stands in for pygame.error so `except pygame.error` works."""


def create_mock_pygame():
    """Create a comprehensive mock of the pygame module."""
    mock_pygame = MagicMock()
    mock_pygame.error = MockPygameError

    # Basic initialization
    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None

    # Display
    mock_surface = MagicMock()
    mock_surface.get_width.return_value = 680
    mock_surface.get_height.return_value = 620
    mock_pygame.display.set_mode.return_value = mock_surface

    # Fonts
    mock_font = MagicMock()
    mock_text = MagicMock()
    mock_text.get_width.return_value = 100
    mock_font.render.return_value = mock_text
    mock_pygame.font.Font.return_value = mock_font

    # Mixer
    mock_pygame.mixer.init.return_value = None
    mock_pygame.mixer.get_init.return_value = (22050, -16, 1)
    mock_pygame.sndarray.make_sound.side_effect = lambda samples: MagicMock(samples=samples)

    # Events
    mock_pygame.event.get.return_value = []

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.K_ESCAPE = 27
    mock_pygame.K_RETURN = 13
    mock_pygame.K_SPACE = 32
    mock_pygame.K_UP = 273
    mock_pygame.K_DOWN = 274
    mock_pygame.K_LEFT = 276
    mock_pygame.K_RIGHT = 275
    mock_pygame.K_w = 119
    mock_pygame.K_a = 97
    mock_pygame.K_s = 115
    mock_pygame.K_d = 100
    mock_pygame.K_m = 109
    mock_pygame.K_1 = 49
    mock_pygame.K_2 = 50
    mock_pygame.K_3 = 51
    mock_pygame.K_4 = 52
    mock_pygame.K_5 = 53
    mock_pygame.K_F1 = 282
    mock_pygame.K_F2 = 283
    mock_pygame.K_F3 = 284
    mock_pygame.K_F4 = 285
    mock_pygame.K_F5 = 286
    mock_pygame.K_F6 = 287
    mock_pygame.K_PLUS = 43
    mock_pygame.K_MINUS = 45
    mock_pygame.K_EQUALS = 61

    # Time
    mock_clock = MagicMock()
    mock_clock.tick.return_value = 16  # ~60fps
    mock_pygame.time.Clock.return_value = mock_clock

    # Rect
    mock_pygame.Rect = MagicMock(side_effect=lambda *args: MagicMock(
        x=args[0] if args else 0,
        y=args[1] if len(args) > 1 else 0,
        width=args[2] if len(args) > 2 else 0,
        height=args[3] if len(args) > 3 else 0,
    ))

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any imports.

    This runs automatically for all tests and ensures pygame
    is mocked before the renderer or audio modules are imported.
    """
    mock_pygame = create_mock_pygame()

    # Store original module if it exists
    original_pygame = sys.modules.get('pygame')

    # Install mock
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    # Restore original (or remove mock)
    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


@pytest.fixture
def reset_pygame_calls(mock_pygame_module):
    """Clear recorded calls on the shared pygame mock."""
    mock_pygame_module.draw.reset_mock()
    mock_pygame_module.mixer.reset_mock()
    mock_pygame_module.sndarray.make_sound.reset_mock()
    mock_pygame_module.mixer.init.side_effect = None
    mock_pygame_module.mixer.get_init.return_value = (22050, -16, 1)
    return mock_pygame_module


@pytest.fixture
def rng():
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def snake_config():
    """Default rule configuration."""
    from snake_arcade.game.config import SnakeConfig

    return SnakeConfig()


@pytest.fixture
def profile():
    """A fresh player profile."""
    from snake_arcade.progression.profile import PlayerProfile

    return PlayerProfile()


@pytest.fixture
def profile_path(tmp_path):
    """Path for a temporary profile file."""
    return tmp_path / "save" / "profile.json"
