"""Configuration management for movies."""

from .manager import ConfigManager
from .schema import Settings

__all__ = [
    "ConfigManager",
    "Settings",
]
