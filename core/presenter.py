"""Plain-text rendering of search results."""

import sys
from collections.abc import Callable, Iterable, Sequence
from typing import TextIO

from .magnet import TRACKERS, movie_magnet
from .models import Movie
from .opener import open_magnet


def format_entry(movie: Movie, magnet: str) -> str:
    return f"{movie.title} ({movie.year})\n-- {magnet}\n"


def present_results(
    movies: Iterable[Movie],
    quality: str,
    *,
    trackers: bool = True,
    tracker_list: Sequence[str] = TRACKERS,
    open_first: bool = False,
    out: TextIO | None = None,
    opener: Callable[[str], bool] = open_magnet,
) -> int:
    """Print each movie that has a link for ``quality``.

    Order is the API's. Entries are separated by a blank line; movies
    without a link leave no trace. With ``open_first`` the first printed
    link is handed to ``opener``. Returns the number of entries printed.
    """
    out = out or sys.stdout
    printed = 0
    for movie in movies:
        magnet = movie_magnet(movie, quality, trackers, tracker_list)
        if not magnet:
            continue

        if printed:
            out.write("\n")
        out.write(format_entry(movie, magnet))

        if open_first and printed == 0:
            opener(magnet)
        printed += 1
    return printed
