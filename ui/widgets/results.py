"""Results list widget."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import ListItem, ListView, Static

from core.magnet import find_torrent
from core.models import Movie


class ResultItem(ListItem):
    """A single movie in the list."""

    def __init__(self, movie: Movie, magnet: str, quality: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.movie = movie
        self.magnet = magnet
        self.quality = quality
        self.add_class("result-item")

    def compose(self) -> ComposeResult:
        m = self.movie
        yield Static(f"{m.title} ({m.year})", classes="result-title")
        yield Static(self._meta(), classes="result-meta")
        torrent = find_torrent(m, self.quality)
        if torrent:
            yield Static(f"health: {torrent.health}", classes=f"health-label {torrent.health}")

    def _meta(self) -> str:
        m = self.movie
        parts = [f"★ {m.rating:.1f}"]
        if m.genres:
            parts.append(", ".join(m.genres))
        torrent = find_torrent(m, self.quality)
        if torrent:
            parts.append(torrent.size or "?")
            parts.append(f"{torrent.seeds} ↑  {torrent.peers} ↓")
        return "  ·  ".join(parts)


class ResultsList(Vertical):
    """Scrollable list of movies that have a link for the current quality."""

    class ResultHighlighted(Message):
        """Message when a result is highlighted."""

        def __init__(self, item: ResultItem | None) -> None:
            self.item = item
            super().__init__()

    def compose(self) -> ComposeResult:
        yield Static("Results", id="results-title")
        yield ListView(id="results-list")

    def on_mount(self) -> None:
        """Set up the list view."""
        list_view = self.query_one("#results-list", ListView)
        list_view.can_focus = True

    def set_loading(self) -> None:
        """Show the searching state."""
        self.query_one("#results-list", ListView).clear()
        self.query_one("#results-title", Static).update("Results (searching...)")

    def show(self, entries: list[tuple[Movie, str]], quality: str) -> None:
        """Replace the list with (movie, magnet) entries."""
        list_view = self.query_one("#results-list", ListView)
        list_view.clear()
        for movie, magnet in entries:
            list_view.append(ResultItem(movie, magnet, quality))

        title = self.query_one("#results-title", Static)
        if entries:
            title.update(f"Results ({len(entries)} found)")
            list_view.index = 0
        else:
            title.update(f"Results (no {quality} torrents)")

    @property
    def item_count(self) -> int:
        return len(self.query(ResultItem))

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        """Handle result highlight."""
        if event.item and isinstance(event.item, ResultItem):
            self.post_message(self.ResultHighlighted(event.item))
        else:
            self.post_message(self.ResultHighlighted(None))

    def get_selected(self) -> ResultItem | None:
        """Get the currently selected item."""
        list_view = self.query_one("#results-list", ListView)
        if list_view.highlighted_child and isinstance(
            list_view.highlighted_child, ResultItem
        ):
            return list_view.highlighted_child
        return None

    def focus_list(self) -> None:
        """Focus the results list."""
        self.query_one("#results-list", ListView).focus()
