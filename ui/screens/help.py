"""Help overlay screen."""

from textual.app import ComposeResult
from textual.containers import Center, Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Static

SECTIONS = [
    (
        "Navigation",
        [
            ("↑ / k", "Move selection up"),
            ("↓ / j", "Move selection down"),
            ("g / G", "Jump to first / last result"),
        ],
    ),
    (
        "Actions",
        [
            ("Enter", "Open magnet link in torrent client"),
            ("y", "Copy magnet link to clipboard"),
            ("o", "Open movie page in browser"),
            ("w", "Search a random watchlist entry"),
            ("r", "Refresh search results"),
        ],
    ),
    (
        "Search",
        [
            ("/", "Focus search input"),
            ("Esc", "Return to results"),
            ("c", "Cycle quality: 720p → 1080p → 2160p → 3D"),
        ],
    ),
    ("General", [("?", "Show this help"), ("q", "Quit")]),
]


class HelpScreen(ModalScreen):
    """Modal help screen with keybinding reference."""

    BINDINGS = [
        ("escape", "dismiss", "Close"),
        ("question_mark", "dismiss", "Close"),
        ("q", "dismiss", "Close"),
    ]

    def compose(self) -> ComposeResult:
        with Center(id="help-overlay"):
            with Vertical(id="help-container"):
                yield Static("🎬 MOVIES HELP", id="help-title")
                for title, rows in SECTIONS:
                    with Vertical(classes="help-section"):
                        yield Static(title, classes="help-section-title")
                        for key, desc in rows:
                            yield Horizontal(
                                Static(key, classes="help-key"),
                                Static(desc, classes="help-desc"),
                                classes="help-row",
                            )
                yield Static("Press Esc or ? to close", id="help-close-hint")

    def action_dismiss(self) -> None:
        """Close the help screen."""
        self.app.pop_screen()
