# Snake Arcade Source Package
"""
Snake Arcade - Grid-based snake game with a progression layer.

Modules:
- core: Abstract interfaces for entities, renderers, and game event listeners
- game: Tick-driven simulation (grid, snake, food, collisions, session loop)
- progression: Player profile persistence and the upgrade shop
- audio: Synthesized sound effects with volume and mute
- utils: Configuration loading
"""
