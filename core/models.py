"""Data models for the YTS listing API."""

from dataclasses import dataclass, field
from typing import Any


def _int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def _float(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


@dataclass(frozen=True)
class Torrent:
    """One downloadable variant of a movie."""

    hash: str
    quality: str
    size: str = ""
    size_bytes: int = 0
    type: str = ""
    seeds: int = 0
    peers: int = 0

    @property
    def health(self) -> str:
        """Calculate health based on seed/peer ratio."""
        if self.seeds == 0:
            return "dead"
        ratio = self.seeds / max(self.peers, 1)
        if self.seeds > 100 and ratio > 2:
            return "excellent"
        if self.seeds > 20 and ratio > 1:
            return "good"
        if self.seeds > 5:
            return "fair"
        return "poor"

    @classmethod
    def from_dict(cls, data: dict) -> "Torrent":
        return cls(
            hash=str(data.get("hash", "")),
            quality=str(data.get("quality", "")),
            size=str(data.get("size", "")),
            size_bytes=_int(data.get("size_bytes")),
            type=str(data.get("type", "")),
            seeds=_int(data.get("seeds")),
            peers=_int(data.get("peers")),
        )


@dataclass(frozen=True)
class Movie:
    """A movie returned by the listing API."""

    id: int
    title: str
    year: int
    url: str = ""
    title_long: str = ""
    imdb_code: str = ""
    rating: float = 0.0
    runtime: int = 0
    summary: str = ""
    genres: tuple[str, ...] = ()
    language: str = ""
    torrents: tuple[Torrent, ...] = ()

    @property
    def qualities(self) -> list[str]:
        """Quality labels of the torrents, in API order."""
        return [t.quality for t in self.torrents]

    @classmethod
    def from_dict(cls, data: dict) -> "Movie":
        return cls(
            id=_int(data.get("id")),
            title=str(data.get("title", "")),
            year=_int(data.get("year")),
            url=str(data.get("url", "")),
            title_long=str(data.get("title_long", "")),
            imdb_code=str(data.get("imdb_code", "")),
            rating=_float(data.get("rating")),
            runtime=_int(data.get("runtime")),
            summary=str(data.get("summary", "")),
            genres=tuple(data.get("genres") or ()),
            language=str(data.get("language", "")),
            torrents=tuple(
                Torrent.from_dict(t)
                for t in data.get("torrents") or ()
                if isinstance(t, dict)
            ),
        )


@dataclass
class ListData:
    """The ``data`` object of a list_movies response."""

    movie_count: int = 0
    limit: int = 0
    page_number: int = 0
    movies: list[Movie] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "ListData":
        return cls(
            movie_count=_int(data.get("movie_count")),
            limit=_int(data.get("limit")),
            page_number=_int(data.get("page_number")),
            movies=[
                Movie.from_dict(m) for m in data.get("movies") or [] if isinstance(m, dict)
            ],
        )


@dataclass
class ListResponse:
    """Envelope of a list_movies response."""

    status: str = ""
    status_message: str = ""
    data: ListData = field(default_factory=ListData)

    @classmethod
    def from_dict(cls, payload: Any) -> "ListResponse":
        """Build from decoded JSON. Anything that isn't an object is empty."""
        if not isinstance(payload, dict):
            return cls()
        data = payload.get("data")
        return cls(
            status=str(payload.get("status", "")),
            status_message=str(payload.get("status_message", "")),
            data=ListData.from_dict(data) if isinstance(data, dict) else ListData(),
        )
