"""Utilities: configuration loading."""

from .config_loader import Config, load_config, save_config

__all__ = [
    'Config',
    'load_config',
    'save_config',
]
