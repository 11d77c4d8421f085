import sys
from pathlib import Path

import pytest

# Ensure root path is available for imports
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from core.models import Movie  # noqa: E402

HASH_720 = "A" * 40
HASH_1080 = "B" * 40


def movie_payload(
    title: str = "Arrival",
    year: int = 2016,
    torrents: list[dict] | None = None,
    **extra,
) -> dict:
    if torrents is None:
        torrents = [
            {"hash": HASH_720, "quality": "720p", "size": "1.1 GB", "seeds": 50, "peers": 5},
            {"hash": HASH_1080, "quality": "1080p", "size": "2.2 GB", "seeds": 150, "peers": 10},
        ]
    data = {
        "id": 1,
        "url": f"https://yts.mx/movies/{title.lower().replace(' ', '-')}-{year}",
        "title": title,
        "year": year,
        "rating": 7.9,
        "runtime": 116,
        "summary": "A linguist works with the military to communicate with alien lifeforms.",
        "genres": ["Drama", "Sci-Fi"],
        "language": "en",
        "torrents": torrents,
    }
    data.update(extra)
    return data


@pytest.fixture
def make_movie():
    def _make(**kwargs) -> Movie:
        return Movie.from_dict(movie_payload(**kwargs))

    return _make


@pytest.fixture
def list_payload():
    def _make(movies: list[dict]) -> dict:
        return {
            "status": "ok",
            "status_message": "Query was successful",
            "data": {
                "movie_count": len(movies),
                "limit": 20,
                "page_number": 1,
                "movies": movies,
            },
        }

    return _make


@pytest.fixture
def watchlist_file(tmp_path):
    def _make(text: str) -> Path:
        path = tmp_path / "watchlist.csv"
        path.write_text(text, encoding="utf-8")
        return path

    return _make
