"""Details panel widget."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.widgets import Static

from ui.widgets.results import ResultItem


class DetailsPanel(Static):
    """Panel showing details of the selected movie."""

    item: reactive[ResultItem | None] = reactive(None)

    def compose(self) -> ComposeResult:
        yield Static("Select a movie to view details", id="details-title")
        with Vertical(id="details-grid"):
            with Horizontal():
                yield Static("Rating", classes="detail-label")
                yield Static("-", classes="detail-value", id="detail-rating")
                yield Static("Runtime", classes="detail-label")
                yield Static("-", classes="detail-value", id="detail-runtime")
            with Horizontal():
                yield Static("Language", classes="detail-label")
                yield Static("-", classes="detail-value", id="detail-language")
                yield Static("Qualities", classes="detail-label")
                yield Static("-", classes="detail-value", id="detail-qualities")
        yield Static("", id="detail-summary")
        yield Static("", id="magnet-preview")

    def watch_item(self, item: ResultItem | None) -> None:
        """Update display when the selection changes."""
        if item is None:
            self._clear_display()
            return

        movie = item.movie
        self.query_one("#details-title", Static).update(f"{movie.title} ({movie.year})")
        self.query_one("#detail-rating", Static).update(f"{movie.rating:.1f}")
        self.query_one("#detail-runtime", Static).update(
            f"{movie.runtime} min" if movie.runtime else "-"
        )
        self.query_one("#detail-language", Static).update(movie.language or "-")
        self.query_one("#detail-qualities", Static).update(
            ", ".join(movie.qualities) or "-"
        )
        self.query_one("#detail-summary", Static).update(movie.summary)

        # Show truncated magnet preview
        magnet = item.magnet
        preview = magnet[:60] + "..." if len(magnet) > 60 else magnet
        self.query_one("#magnet-preview", Static).update(f"Magnet: {preview}")

    def _clear_display(self) -> None:
        """Clear the details display."""
        self.query_one("#details-title", Static).update("Select a movie to view details")
        for field in ("rating", "runtime", "language", "qualities"):
            self.query_one(f"#detail-{field}", Static).update("-")
        self.query_one("#detail-summary", Static).update("")
        self.query_one("#magnet-preview", Static).update("")
