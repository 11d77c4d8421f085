"""movies TUI Application."""

from pathlib import Path

import pyperclip
from textual.app import App
from textual.widgets import ListView

from core.opener import open_magnet, open_url
from core.options import RunOptions
from core.search import SearchClient
from ui.screens import MainScreen


class MoviesApp(App):
    """Browse yts.mx results and hand magnet links to a torrent client."""

    TITLE = "movies"
    CSS_PATH = Path(__file__).parent / "styles.tcss"

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("enter", "download", "Open magnet"),
        ("y", "copy_magnet", "Copy Magnet"),
        ("o", "open_browser", "Open in Browser"),
        ("j", "cursor_down", "Down"),
        ("k", "cursor_up", "Up"),
        ("g", "cursor_first", "First"),
        ("G", "cursor_last", "Last"),
    ]

    def __init__(
        self,
        options: RunOptions | None = None,
        client: SearchClient | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.options = options or RunOptions()
        self.client = client or SearchClient(self.options.base_url, self.options.timeout)

    def on_mount(self) -> None:
        """Push the main screen on mount."""
        self.push_screen(MainScreen(self.options, self.client))

    def _selected_item(self):
        """Selected result item of the main screen, with a warning if none."""
        if not isinstance(self.screen, MainScreen):
            return None
        item = self.screen.get_selected()
        if item is None:
            self.notify("No movie selected", severity="warning")
        return item

    def action_download(self) -> None:
        """Send the selected magnet link to the torrent client."""
        item = self._selected_item()
        if item is None:
            return

        if open_magnet(item.magnet):
            self.notify(f"Sent to torrent client: {item.movie.title}")
        else:
            self.notify("Failed to open magnet link", severity="error")

    def action_copy_magnet(self) -> None:
        """Copy magnet link to clipboard."""
        item = self._selected_item()
        if item is None:
            return

        try:
            pyperclip.copy(item.magnet)
            self.notify("Magnet link copied to clipboard")
        except pyperclip.PyperclipException as e:
            self.notify(f"Failed to copy: {e}", severity="error")

    def action_open_browser(self) -> None:
        """Open the movie page in the browser."""
        item = self._selected_item()
        if item is None:
            return

        if not open_url(item.movie.url):
            self.notify("No page to open", severity="warning")

    def action_cursor_down(self) -> None:
        """Move cursor down in the list."""
        self._move_cursor(1)

    def action_cursor_up(self) -> None:
        """Move cursor up in the list."""
        self._move_cursor(-1)

    def action_cursor_first(self) -> None:
        """Move cursor to first item."""
        list_view = self._list_view()
        if list_view and list_view.children:
            list_view.index = 0

    def action_cursor_last(self) -> None:
        """Move cursor to last item."""
        list_view = self._list_view()
        if list_view and list_view.children:
            list_view.index = len(list_view.children) - 1

    def _move_cursor(self, delta: int) -> None:
        """Move the cursor by delta positions."""
        list_view = self._list_view()
        if list_view and list_view.children:
            index = (list_view.index or 0) + delta
            list_view.index = max(0, min(index, len(list_view.children) - 1))

    def _list_view(self) -> ListView | None:
        if not isinstance(self.screen, MainScreen):
            return None
        return self.screen.query_one("#results-list", ListView)
