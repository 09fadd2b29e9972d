"""
Configuration Loader - Load and validate configuration from YAML.

Supports layered configuration:
- config/default.yaml - Shipped defaults
- an optional user file passed to load_config() - Overrides

User settings override defaults.
"""
import yaml
from pathlib import Path
from typing import Optional, Any, Dict
from dataclasses import dataclass, field, asdict
from copy import deepcopy

from ..game.config import SnakeConfig


@dataclass
class VisualizationConfig:
    """Visualization settings."""
    cell_size: int = 30
    render_fps: int = 60
    window_title: str = "Snake Arcade"


@dataclass
class AudioConfig:
    """Sound effect settings."""
    enabled: bool = True
    sample_rate: int = 22050
    tone_duration: float = 0.08


@dataclass
class ProgressionConfig:
    """Profile persistence settings."""
    profile_path: str = "save/profile.json"


@dataclass
class Config:
    """Complete application configuration."""
    snake: SnakeConfig = field(default_factory=SnakeConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)
    progression: ProgressionConfig = field(default_factory=ProgressionConfig)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "snake": self.snake.to_dict(),
            "visualization": asdict(self.visualization),
            "audio": asdict(self.audio),
            "progression": asdict(self.progression),
        }


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries, with override values taking precedence.

    Args:
        base: Base dictionary
        override: Dictionary with values to override

    Returns:
        Merged dictionary
    """
    result = deepcopy(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = deepcopy(value)

    return result


def _find_config_dir() -> Path:
    """Find the config directory."""
    possible_paths = [
        Path("config"),
        Path(__file__).parent.parent.parent / "config",
        Path.cwd() / "config",
    ]

    for path in possible_paths:
        if path.exists() and path.is_dir():
            return path

    # Fallback to project root config folder
    return Path(__file__).parent.parent.parent / "config"


def _load_yaml_file(path: Path) -> Dict:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        return {}

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    return data if isinstance(data, dict) else {}


def config_from_dict(data: Dict[str, Any]) -> Config:
    """Build a Config from a (merged) settings dictionary."""
    config = Config()

    if 'snake' in data:
        config.snake = SnakeConfig.from_dict(data['snake'] or {})

    if 'visualization' in data:
        config.visualization = _dict_to_dataclass(data['visualization'], VisualizationConfig)

    if 'audio' in data:
        config.audio = _dict_to_dataclass(data['audio'], AudioConfig)

    if 'progression' in data:
        config.progression = _dict_to_dataclass(data['progression'], ProgressionConfig)

    return config


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration.

    Merges the shipped defaults with an optional user file.

    Args:
        config_path: Path to a user config file overriding the defaults

    Returns:
        Config object with all settings
    """
    default_data = _load_yaml_file(_find_config_dir() / "default.yaml")

    user_data: Dict = {}
    if config_path is not None:
        if Path(config_path).exists():
            user_data = _load_yaml_file(Path(config_path))
        else:
            print(f"[Config] {config_path} not found, ignoring")

    merged_data = _deep_merge(default_data, user_data)

    if not merged_data:
        print("[Config] No config file found, using defaults")
        return Config()

    return config_from_dict(merged_data)


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    with open(config_path, 'w') as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
