"""Main screen for the movies TUI."""

import dataclasses
import time
from functools import partial

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Input, ListView
from textual.worker import Worker, WorkerState

from core.magnet import movie_magnet
from core.models import Movie
from core.options import RunOptions
from core.opener import open_url
from core.search import SearchClient
from core.watchlist import pick_entry, read_watchlist
from ui.widgets import DetailsPanel, Footer, Header, ResultItem, ResultsList

QUALITIES = ["720p", "1080p", "2160p", "3D"]


class MainScreen(Screen):
    """Main search and results screen."""

    BINDINGS = [
        ("slash", "focus_search", "Search"),
        ("escape", "cancel_search", "Cancel"),
        ("c", "cycle_quality", "Quality"),
        ("w", "watchlist", "Watchlist"),
        ("r", "refresh", "Refresh"),
        ("question_mark", "show_help", "Help"),
    ]

    def __init__(self, options: RunOptions, client: SearchClient, **kwargs) -> None:
        super().__init__(**kwargs)
        self.options = options
        self.client = client
        self.query_state = options.query
        self._movies: list[Movie] = []
        self._search_start_time = 0.0

    def compose(self) -> ComposeResult:
        yield Header(id="header")
        yield ResultsList(id="results-panel")
        yield DetailsPanel(id="details-panel")
        yield Footer(id="footer")

    def on_mount(self) -> None:
        """Focus search on mount, and run the initial query if there is one."""
        header = self.query_one(Header)
        header.quality = self.query_state.quality
        header.focus_search()
        if self.query_state.query_term:
            header.set_search_query(self.query_state.query_term)
            self._start_search(self.query_state.query_term)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle search submission."""
        if event.input.id == "search-input":
            self._start_search(event.value.strip())

    def _start_search(self, term: str) -> None:
        """Run one search in a worker thread."""
        self.query_state = dataclasses.replace(self.query_state, query_term=term)
        self._search_start_time = time.time()
        self._movies = []

        results_list = self.query_one(ResultsList)
        results_list.set_loading()
        results_list.focus_list()

        self.run_worker(
            partial(self.client.search, self.query_state),
            name="search",
            group="search",
            thread=True,
            exclusive=True,
            exit_on_error=False,
        )

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Show results, or the error, once the search worker finishes."""
        if event.worker.name != "search":
            return

        if event.state == WorkerState.SUCCESS:
            self._movies = event.worker.result or []
            self._show_results()
        elif event.state == WorkerState.ERROR:
            self.notify(str(event.worker.error), title="Search failed", severity="error")
            self._show_results()

    def _show_results(self) -> None:
        """Render the movies that have a link for the current quality."""
        quality = self.query_state.quality
        entries = []
        for movie in self._movies:
            magnet = movie_magnet(
                movie, quality, self.options.trackers, self.options.tracker_list
            )
            if magnet:
                entries.append((movie, magnet))

        self.query_one(ResultsList).show(entries, quality)
        self.query_one(Header).search_time = time.time() - self._search_start_time

    def on_results_list_result_highlighted(
        self, event: ResultsList.ResultHighlighted
    ) -> None:
        """Update details panel when a result is highlighted."""
        self.query_one(DetailsPanel).item = event.item

    async def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Enter on a result opens its magnet link."""
        await self.app.run_action("download")

    def action_focus_search(self) -> None:
        """Focus the search input."""
        self.query_one(Header).focus_search()

    def action_cancel_search(self) -> None:
        """Cancel search and return to results."""
        self.query_one(ResultsList).focus_list()

    def action_cycle_quality(self) -> None:
        """Cycle through qualities and search again, since the API filters on it."""
        current = self.query_state.quality
        idx = QUALITIES.index(current) if current in QUALITIES else -1
        quality = QUALITIES[(idx + 1) % len(QUALITIES)]
        self.query_state = dataclasses.replace(self.query_state, quality=quality)
        self.query_one(Header).quality = quality
        self._start_search(self.query_state.query_term)

    def action_watchlist(self) -> None:
        """Search a random entry of the configured watchlist."""
        if not self.options.watchlist:
            self.notify("No watchlist configured", severity="warning")
            return

        records = read_watchlist(self.options.watchlist)
        if not records:
            self.notify("No movies in watchlist.", severity="warning")
            return

        entry = pick_entry(records)
        self.query_one(Header).set_search_query(entry.search_term)
        self.notify(f"Searching for {entry.search_term}")
        if self.options.preview:
            open_url(entry.url)
        self._start_search(entry.search_term)

    def action_refresh(self) -> None:
        """Refresh the current search."""
        self._start_search(self.query_state.query_term)

    def action_show_help(self) -> None:
        """Show the help overlay."""
        from .help import HelpScreen

        self.app.push_screen(HelpScreen())

    def get_selected(self) -> ResultItem | None:
        """Get the currently selected result."""
        return self.query_one(ResultsList).get_selected()
