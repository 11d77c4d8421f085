"""Letterboxd watchlist exports."""

import csv
import logging
import random
from dataclasses import dataclass
from pathlib import Path

from .errors import WatchlistError

logger = logging.getLogger(__name__)

COLUMNS = 4


@dataclass(frozen=True)
class WatchlistRecord:
    """One watchlist row: date added, title, year, detail page."""

    date_added: str
    title: str
    year: str
    url: str

    @property
    def search_term(self) -> str:
        return f"{self.title} {self.year}"


def load_watchlist(path: str | Path) -> list[WatchlistRecord]:
    """Read a watchlist CSV into records, in file order.

    Raises WatchlistError if the file can't be read, isn't well-formed CSV,
    or its rows don't carry the same number (at least four) of columns.
    """
    try:
        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f, strict=True))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise WatchlistError(f"{path}: {e}") from e

    records = []
    width = None
    for line, row in enumerate(rows, 1):
        if not row:
            continue
        if width is None:
            width = len(row)
        if len(row) != width:
            raise WatchlistError(
                f"{path}: record on line {line}: wrong number of fields"
            )
        if len(row) < COLUMNS:
            raise WatchlistError(
                f"{path}: record on line {line}: expected {COLUMNS} fields, got {len(row)}"
            )
        records.append(WatchlistRecord(*row[:COLUMNS]))
    return records


def read_watchlist(path: str | Path) -> list[WatchlistRecord]:
    """Like load_watchlist, but a failure is logged and yields no records."""
    try:
        return load_watchlist(path)
    except WatchlistError as e:
        logger.error("Could not read watchlist: %s", e)
        return []


def pick_entry(
    records: list[WatchlistRecord], rng: random.Random | None = None
) -> WatchlistRecord:
    """Pick one record at random."""
    if not records:
        raise WatchlistError("watchlist is empty")
    rng = rng or random.Random()
    return records[rng.randrange(len(records))]
