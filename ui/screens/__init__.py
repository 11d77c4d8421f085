"""TUI screens for movies."""

from .main import MainScreen
from .help import HelpScreen

__all__ = ["MainScreen", "HelpScreen"]
