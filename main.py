#!/usr/bin/env python3
"""movies: search yts.mx for torrents and print magnet links."""

import argparse
import dataclasses
import logging
import random
import sys
from collections.abc import Callable
from typing import TextIO

import yaml

from core.config import ConfigManager, Settings
from core.errors import ConfigError, SearchError
from core.log import setup_logging
from core.opener import open_magnet, open_url
from core.options import RunOptions
from core.presenter import present_results
from core.search import SearchClient
from core.watchlist import pick_entry, read_watchlist

logger = logging.getLogger("movies")

KNOWN_COMMANDS = {"search", "config", "-h", "--help"}


def load_settings(path: str | None) -> Settings:
    """Load settings, exiting with a message when the file is broken."""
    try:
        return ConfigManager(path).load()
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        sys.exit(1)


def run_search(
    options: RunOptions,
    client: SearchClient | None = None,
    out: TextIO | None = None,
    rng: random.Random | None = None,
    opener: Callable[[str], bool] = open_magnet,
    url_opener: Callable[[str], bool] = open_url,
) -> int:
    """Run the whole pipeline once. Returns the process exit status."""
    out = out or sys.stdout
    query = options.query

    if options.watchlist:
        records = read_watchlist(options.watchlist)
        if not records:
            print("No movies in watchlist.", file=out)
            return 0

        entry = pick_entry(records, rng)
        query = dataclasses.replace(query, query_term=entry.search_term)
        print("Searching for", entry.search_term, file=out)

        if options.preview:
            url_opener(entry.url)

    client = client or SearchClient(options.base_url, options.timeout)
    try:
        movies = client.search(query)
    except SearchError as e:
        logger.error("Search failed: %s", e)
        return 1

    printed = present_results(
        movies,
        query.quality,
        trackers=options.trackers,
        tracker_list=options.tracker_list,
        open_first=options.open_first,
        out=out,
        opener=opener,
    )
    if not printed:
        logger.info("No %s torrents in %d results", query.quality, len(movies))
    return 0


def cmd_search(args) -> int:
    """Handle the search command."""
    settings = load_settings(args.config)
    options = RunOptions.resolve(
        settings,
        query_term=args.query,
        minimum_rating=args.rating,
        quality=args.quality,
        genre=args.genre,
        sort_by=args.sort,
        order_by=args.order,
        limit=args.limit,
        with_rt_ratings=args.rt_ratings,
        disable_trackers=args.disable_trackers,
        open_first=args.open,
        # a stored watchlist only feeds the TUI; the CLI needs --watchlist
        watchlist=args.watchlist or "",
        preview=args.preview,
    )
    return run_search(options)


def cmd_config(args) -> int:
    """Handle the config command - show or change stored defaults."""
    manager = ConfigManager(args.config)

    if args.action == "path":
        print(manager.config_path)
        return 0

    try:
        if args.action == "show":
            settings = manager.load()
            print(yaml.dump(settings.to_dict(), default_flow_style=False, sort_keys=False), end="")
        elif args.action == "set":
            if args.key is None or args.value is None:
                print("Usage: movies config set KEY VALUE", file=sys.stderr)
                return 2
            manager.set(args.key, args.value)
            print(f"Set {args.key} in {manager.config_path}")
        elif args.action == "unset":
            if args.key is None:
                print("Usage: movies config unset KEY", file=sys.stderr)
                return 2
            if manager.unset(args.key):
                print(f"Unset {args.key}")
            else:
                print(f"'{args.key}' is not set")
                return 1
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="movies",
        description="movies: search yts.mx for torrents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", metavar="PATH", help="Settings file to use")
    common.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug logging on stderr"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Search command (default behavior)
    search_parser = subparsers.add_parser(
        "search", parents=[common], help="Search for movies"
    )
    search_parser.add_argument("-q", "--query", metavar="QUERY", help="QUERY to search")
    search_parser.add_argument(
        "-r", "--rating", type=int, metavar="RATING",
        help="minimum imdb user RATING to filter by: 0 to 9 inclusive",
    )
    search_parser.add_argument(
        "-qual", "--quality", metavar="QUALITY",
        help="file QUALITY to filter by: 720p, 1080p, 2160p, or 3D (default: 1080p)",
    )
    search_parser.add_argument(
        "-g", "--genre", metavar="GENRE",
        help="imdb GENRE from https://www.imdb.com/genre/ to filter by",
    )
    search_parser.add_argument(
        "-s", "--sort", metavar="VALUE",
        help="VALUE to sort by: title, year, rating, peers, seeds, download_count, like_count, or date_added",
    )
    search_parser.add_argument(
        "-o", "--order", metavar="ORDER", help="ORDER to order results by: desc or asc"
    )
    search_parser.add_argument(
        "-n", "--limit", type=int, metavar="N", help="Number of results (API default: 20)"
    )
    search_parser.add_argument(
        "--rt-ratings", action="store_true", default=None,
        help="ask for Rotten Tomatoes ratings",
    )
    search_parser.add_argument(
        "-dt", "--disable-trackers", action="store_true",
        help="disables trackers in generated magnet links",
    )
    search_parser.add_argument(
        "--open", action="store_true", help="opens the first search result magnet link"
    )
    search_parser.add_argument(
        "-l", "--watchlist", metavar="FILE",
        help="retrieves a random film from a letterboxd watchlist and searches it",
    )
    search_parser.add_argument(
        "--preview", action="store_true",
        help="opens the movie on letterboxd if searching from the watchlist",
    )
    search_parser.set_defaults(func=cmd_search)

    # Config command
    config_parser = subparsers.add_parser(
        "config", parents=[common], help="Show or change stored defaults"
    )
    config_parser.add_argument("action", choices=["show", "path", "set", "unset"])
    config_parser.add_argument("key", nargs="?", help="Setting name")
    config_parser.add_argument("value", nargs="?", help="New value")
    config_parser.set_defaults(func=cmd_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Anything that isn't a known command is a search
    if not argv or argv[0] not in KNOWN_COMMANDS:
        argv.insert(0, "search")

    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
