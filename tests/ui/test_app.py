import pytest
from textual.worker import WorkerFailed

from core.errors import SearchError
from core.options import RunOptions
from core.query import Query
from ui.app import MoviesApp
from ui.widgets import ResultsList


class FakeClient:
    def __init__(self, movies=None, error: Exception | None = None):
        self.movies = movies or []
        self.error = error
        self.queries: list[Query] = []

    def search(self, query: Query):
        self.queries.append(query)
        if self.error:
            raise self.error
        return self.movies


async def _settle(app, pilot) -> None:
    await pilot.pause()
    try:
        await app.workers.wait_for_complete()
    except WorkerFailed:
        pass
    await pilot.pause()
    await pilot.pause()


@pytest.mark.asyncio
async def test_initial_query_shows_movies_with_link(make_movie):
    old = make_movie(title="Old Film", torrents=[{"hash": "C" * 40, "quality": "720p"}])
    client = FakeClient([make_movie(title="Arrival"), old])
    app = MoviesApp(RunOptions(query=Query(query_term="Arrival"), trackers=False), client=client)

    async with app.run_test() as pilot:
        await _settle(app, pilot)

        results = app.screen.query_one(ResultsList)
        assert results.item_count == 1
        assert client.queries[0].query_term == "Arrival"


@pytest.mark.asyncio
async def test_cycle_quality_searches_again(make_movie):
    client = FakeClient([make_movie(title="Arrival")])
    app = MoviesApp(RunOptions(query=Query(query_term="Arrival")), client=client)

    async with app.run_test() as pilot:
        await _settle(app, pilot)
        app.screen.action_cycle_quality()
        await _settle(app, pilot)

        assert [q.quality for q in client.queries] == ["1080p", "2160p"]
        assert client.queries[1].query_term == "Arrival"


@pytest.mark.asyncio
async def test_search_error_keeps_app_running():
    client = FakeClient(error=SearchError("Network error: boom"))
    app = MoviesApp(RunOptions(query=Query(query_term="Heat")), client=client)

    async with app.run_test() as pilot:
        await _settle(app, pilot)

        assert app.is_running
        assert app.screen.query_one(ResultsList).item_count == 0


@pytest.mark.asyncio
async def test_result_shows_health_of_chosen_torrent(make_movie):
    dead = make_movie(
        title="Dead Film", torrents=[{"hash": "D" * 40, "quality": "1080p", "seeds": 0}]
    )
    client = FakeClient([make_movie(title="Arrival"), dead])
    app = MoviesApp(RunOptions(query=Query(query_term="film")), client=client)

    async with app.run_test() as pilot:
        await _settle(app, pilot)

        labels = list(app.screen.query(".health-label"))
        assert [label.has_class("excellent") for label in labels] == [True, False]
        assert labels[1].has_class("dead")
