"""Core module for movies: YTS search and magnet links."""

from .errors import ConfigError, MoviesError, SearchError, WatchlistError
from .magnet import TRACKERS, movie_magnet
from .models import ListResponse, Movie, Torrent
from .query import Query
from .search import SearchClient
from .watchlist import WatchlistRecord, pick_entry, read_watchlist

__all__ = [
    "ConfigError",
    "MoviesError",
    "SearchError",
    "WatchlistError",
    "TRACKERS",
    "movie_magnet",
    "ListResponse",
    "Movie",
    "Torrent",
    "Query",
    "SearchClient",
    "WatchlistRecord",
    "pick_entry",
    "read_watchlist",
]
