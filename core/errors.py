"""Exceptions raised by the movies core."""


class MoviesError(Exception):
    """Base class for all movies errors."""


class SearchError(MoviesError):
    """The listing API could not be reached or returned an unreadable body."""


class WatchlistError(MoviesError):
    """A watchlist export could not be read."""


class ConfigError(MoviesError):
    """Invalid configuration key or value."""
