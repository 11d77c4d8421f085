import json

import pytest
import requests

from core.errors import SearchError
from core.query import Query
from core.search import BASE_URL, TIMEOUT, SearchClient
from tests.conftest import movie_payload


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, text: str | None = None):
        self._payload = payload
        self.status_code = status_code
        self._text = text

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._payload


class FakeSession:
    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self._response = response
        self._error = error
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self._error:
            raise self._error
        return self._response


def test_search_builds_url_and_decodes_movies(list_payload):
    session = FakeSession(FakeResponse(list_payload([movie_payload()])))
    client = SearchClient(session=session)

    movies = client.search(Query(query_term="Arrival 2016", minimum_rating=7))

    call = session.calls[0]
    assert call["url"] == (
        f"{BASE_URL}?quality=1080p&minimum_rating=7&query_term=Arrival+2016"
    )
    assert call["timeout"] == TIMEOUT == 10
    assert "User-Agent" in call["headers"]

    assert len(movies) == 1
    movie = movies[0]
    assert movie.title == "Arrival"
    assert movie.year == 2016
    assert movie.genres == ("Drama", "Sci-Fi")
    assert movie.qualities == ["720p", "1080p"]


def test_url_always_carries_query_separator():
    client = SearchClient()

    assert client.url_for(Query(quality="")) == f"{BASE_URL}?"
    assert client.url_for(Query()) == f"{BASE_URL}?quality=1080p"

def test_fetch_returns_envelope(list_payload):
    session = FakeSession(FakeResponse(list_payload([movie_payload(), movie_payload(title="Heat")])))

    response = SearchClient(session=session).fetch(Query())

    assert response.status == "ok"
    assert response.data.movie_count == 2
    assert response.data.page_number == 1
    assert [m.title for m in response.data.movies] == ["Arrival", "Heat"]


@pytest.mark.parametrize(
    "payload",
    [
        {"data": {"movies": []}},
        {"data": {"movie_count": 0}},
        {},
        [],
        None,
        {"data": None},
    ],
)
def test_empty_or_partial_envelope_gives_no_movies(payload):
    session = FakeSession(FakeResponse(payload))

    assert SearchClient(session=session).search(Query()) == []


def test_non_2xx_body_is_still_decoded(list_payload):
    session = FakeSession(FakeResponse(list_payload([movie_payload()]), status_code=500))

    movies = SearchClient(session=session).search(Query())

    assert [m.title for m in movies] == ["Arrival"]


def test_error_status_is_logged(caplog):
    payload = {"status": "error", "status_message": "Invalid quality", "data": {}}
    session = FakeSession(FakeResponse(payload))

    with caplog.at_level("WARNING"):
        movies = SearchClient(session=session).search(Query(quality="8K"))

    assert movies == []
    assert "Invalid quality" in caplog.text


def test_network_failure_raises_search_error():
    session = FakeSession(error=requests.ConnectionError("connection refused"))

    with pytest.raises(SearchError, match="Network error"):
        SearchClient(session=session).search(Query())


def test_timeout_raises_search_error():
    session = FakeSession(error=requests.Timeout("read timed out"))

    with pytest.raises(SearchError):
        SearchClient(session=session).search(Query())


def test_undecodable_body_raises_search_error():
    session = FakeSession(FakeResponse(text="<html>Cloudflare</html>"))

    with pytest.raises(SearchError, match="decode"):
        SearchClient(session=session).search(Query())


def test_custom_base_url_and_timeout():
    session = FakeSession(FakeResponse({}))
    client = SearchClient("https://yts.example/api/list.json", timeout=3, session=session)

    client.search(Query(quality=""))

    assert session.calls[0]["url"] == "https://yts.example/api/list.json"
    assert session.calls[0]["timeout"] == 3


def test_uses_requests_session_get(mocker, list_payload):
    get = mocker.patch.object(
        requests.Session, "get", return_value=FakeResponse(list_payload([]))
    )

    assert SearchClient().search(Query()) == []
    get.assert_called_once()
