"""Header widget with title, search input, and indicators."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.reactive import reactive
from textual.widgets import Input, Static


class Header(Static):
    """Header with title, search input, quality indicator, and timer."""

    quality = reactive("1080p")
    search_time = reactive(0.0)

    def compose(self) -> ComposeResult:
        yield Static("🎬 MOVIES", id="title")
        with Horizontal(id="search-row"):
            yield Static("🔍 ", id="search-icon")
            yield Input(placeholder="Search yts.mx...", id="search-input")
            yield Static(f"◆ {self.quality}", id="quality-indicator")
            yield Static("", id="timer")

    def watch_quality(self, quality: str) -> None:
        """Update quality indicator when it changes."""
        if not self.is_mounted:
            return
        self.query_one("#quality-indicator", Static).update(f"◆ {quality}")

    def watch_search_time(self, time: float) -> None:
        """Update timer display."""
        if not self.is_mounted:
            return
        timer = self.query_one("#timer", Static)
        timer.update(f"⏱ {time:.1f}s" if time > 0 else "")

    def focus_search(self) -> None:
        """Focus the search input."""
        self.query_one("#search-input", Input).focus()

    def set_search_query(self, query: str) -> None:
        """Set the search query."""
        self.query_one("#search-input", Input).value = query
