"""TUI widgets for movies."""

from .header import Header
from .results import ResultsList, ResultItem
from .details import DetailsPanel
from .footer import Footer

__all__ = ["Header", "ResultsList", "ResultItem", "DetailsPanel", "Footer"]
