#!/usr/bin/env python3
"""
Snake Arcade - Play Script

Controls:
    Arrow Keys or WASD: Steer the snake
    SPACE / Enter: Start a new game
    ESC: Stop the current game, or quit from the menu
    1-5: Choose difficulty (between games)
    M: Toggle mute
    + / -: Volume up / down
    F1-F6: Buy upgrades (between games)

Usage:
    python scripts/play.py
    python scripts/play.py --difficulty 3 --mute
    python scripts/play.py --config my_config.yaml --profile save/alt.json
"""
import sys
import os
import argparse
import warnings
from pathlib import Path
from typing import List

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Suppress pygame messages
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
warnings.filterwarnings('ignore', category=UserWarning, module='pygame')

import pygame

from snake_arcade.audio.sound import SoundPlayer
from snake_arcade.game.grid import Direction
from snake_arcade.game.renderer import StandaloneRenderer
from snake_arcade.game.session import GameLoop, SessionState
from snake_arcade.progression.shop import UPGRADES, purchase
from snake_arcade.progression.store import ProfileStore
from snake_arcade.utils.config_loader import load_config


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Snake Arcade - eat, grow, and don't hit the walls",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/play.py                     # Play with saved settings
  python scripts/play.py --difficulty 3      # Start on difficulty 3
  python scripts/play.py --mute              # Play without sound
"""
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML file overriding config/default.yaml"
    )
    parser.add_argument(
        "--profile",
        type=str,
        default=None,
        help="Profile JSON path (default: from config)"
    )
    parser.add_argument(
        "--difficulty",
        type=int,
        default=None,
        help="Difficulty level for the first game"
    )
    parser.add_argument(
        "--mute",
        action="store_true",
        help="Start muted"
    )

    return parser.parse_args(argv)


DIRECTION_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

DIFFICULTY_KEYS = {
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
    pygame.K_4: 4,
    pygame.K_5: 5,
}

SHOP_KEYS = [pygame.K_F1, pygame.K_F2, pygame.K_F3, pygame.K_F4, pygame.K_F5, pygame.K_F6]


def menu_lines(loop: GameLoop) -> List[str]:
    """Overlay text shown while no game is running."""
    lines = []
    if loop.state == SessionState.ENDED:
        lines.append("GAME OVER")
        if loop.session.new_highscore:
            lines.append(f"New high score: {loop.session.score}!")
        lines.append(f"+{loop.session.currency_earned} coins")
    else:
        lines.append("SNAKE ARCADE")

    lines.append("SPACE to play, ESC to quit")
    lines.append(f"Coins: {loop.profile.currency}")
    for i, upgrade in enumerate(UPGRADES):
        owned = "owned" if loop.profile.has_upgrade(upgrade.id) else f"{upgrade.cost}"
        lines.append(f"F{i + 1}  {upgrade.name} ({owned})")
    return lines


def main(argv=None):
    """Main entry point for play mode."""
    args = parse_args(argv)
    config = load_config(args.config)

    store = ProfileStore(
        args.profile or config.progression.profile_path,
        default_difficulty=config.snake.default_difficulty
    )
    loop = GameLoop(config.snake, store=store)

    if args.difficulty is not None:
        try:
            loop.set_difficulty(args.difficulty)
        except ValueError as e:
            print(f"[Game] {e}")

    renderer = StandaloneRenderer(
        columns=config.snake.columns,
        rows=config.snake.rows,
        cell_size=config.visualization.cell_size,
        title=config.visualization.window_title
    )
    sound = SoundPlayer(
        loop.profile,
        enabled=config.audio.enabled,
        sample_rate=config.audio.sample_rate,
        tone_duration=config.audio.tone_duration
    )
    if args.mute and not loop.profile.muted:
        sound.toggle_mute()

    loop.add_listener(renderer)
    loop.add_listener(sound)

    print("\n" + "=" * 50)
    print("Snake Arcade")
    print("=" * 50)
    print("Controls:")
    print("  Arrow Keys / WASD: Move")
    print("  SPACE: Start   ESC: Stop / Quit")
    print("  1-5: Difficulty   M: Mute   +/-: Volume")
    print("  F1-F6: Buy upgrades between games")
    print("=" * 50 + "\n")

    clock = pygame.time.Clock()
    running = True

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    if loop.running:
                        loop.stop()
                    else:
                        running = False

                elif event.key in DIRECTION_KEYS:
                    loop.request_direction(DIRECTION_KEYS[event.key])

                elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
                    loop.start()

                elif event.key == pygame.K_m:
                    sound.toggle_mute()

                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    sound.change_volume(0.1)

                elif event.key == pygame.K_MINUS:
                    sound.change_volume(-0.1)

                elif not loop.running and event.key in DIFFICULTY_KEYS:
                    try:
                        loop.set_difficulty(DIFFICULTY_KEYS[event.key])
                    except ValueError as e:
                        print(f"[Game] {e}")

                elif not loop.running and event.key in SHOP_KEYS:
                    upgrade = UPGRADES[SHOP_KEYS.index(event.key)]
                    if purchase(loop.profile, upgrade.id):
                        loop.refresh_capabilities()
                        store.save(loop.profile)
                    else:
                        print(f"[Shop] Cannot buy {upgrade.name}")

        # One timer firing per frame
        loop.on_timer()

        state = renderer.last_state or loop.get_state()
        volume = "muted" if sound.muted else f"{int(sound.volume * 100)}%"
        hud = [
            f"Difficulty: {loop.difficulty}   Coins: {loop.profile.currency}   Volume: {volume}",
        ]
        overlay = [] if loop.running else menu_lines(loop)
        renderer.draw(state, hud, overlay)

        clock.tick(config.snake.ticks_per_second)

    store.save(loop.profile)
    renderer.close()
    print(f"\nFinal High Score: {loop.profile.highscore}")


if __name__ == "__main__":
    main()
