#!/usr/bin/env python3
"""movies TUI entry point."""

import argparse

from textual.logging import TextualHandler

from core.log import setup_logging
from core.options import RunOptions
from main import load_settings
from ui.app import MoviesApp


def main():
    """Run the movies TUI."""
    parser = argparse.ArgumentParser(prog="movies-tui", description="Browse yts.mx in the terminal")
    parser.add_argument("query", nargs="*", help="Initial search")
    parser.add_argument("-qual", "--quality", metavar="QUALITY", help="720p, 1080p, 2160p, or 3D")
    parser.add_argument("-l", "--watchlist", metavar="FILE", help="Letterboxd watchlist export for 'w'")
    parser.add_argument("--preview", action="store_true", help="Open watchlist picks on letterboxd")
    parser.add_argument("--config", metavar="PATH", help="Settings file to use")
    args = parser.parse_args()

    # stderr belongs to the screen while the app runs
    setup_logging(handler=TextualHandler())
    settings = load_settings(args.config)
    options = RunOptions.resolve(
        settings,
        query_term=" ".join(args.query),
        quality=args.quality,
        watchlist=args.watchlist,
        preview=args.preview,
    )
    app = MoviesApp(options)
    app.run()


if __name__ == "__main__":
    main()
