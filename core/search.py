"""Search client for the YTS listing API."""

import logging

import requests

from .errors import SearchError
from .models import ListResponse, Movie
from .query import Query

logger = logging.getLogger(__name__)

BASE_URL = "https://yts.mx/api/v2/list_movies.json"
HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
}
TIMEOUT = 10


class SearchClient:
    """Issues list_movies requests and decodes the response envelope."""

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def url_for(self, query: Query) -> str:
        """Full request URL for a query."""
        return f"{self.base_url}?{query.encode()}"

    def fetch(self, query: Query) -> ListResponse:
        """Run one request and return the decoded envelope.

        The body is decoded whatever the HTTP status. Raises SearchError on
        transport failures and bodies that are not JSON.
        """
        url = self.url_for(query)
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, headers=HEADERS, timeout=self.timeout)
        except requests.RequestException as e:
            raise SearchError(f"Network error: {e}") from e

        if not resp.ok:
            logger.info("Listing API answered HTTP %s", resp.status_code)

        try:
            payload = resp.json()
        except ValueError as e:
            raise SearchError(f"Could not decode response: {e}") from e

        response = ListResponse.from_dict(payload)
        if response.status and response.status != "ok":
            logger.warning(
                "Listing API status %r: %s", response.status, response.status_message
            )
        logger.debug(
            "Got %d of %d movies (page %d)",
            len(response.data.movies),
            response.data.movie_count,
            response.data.page_number,
        )
        return response

    def search(self, query: Query) -> list[Movie]:
        """Search and return the movies in API order."""
        return self.fetch(query).data.movies
