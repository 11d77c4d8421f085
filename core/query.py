"""Search query for the YTS listing API."""

from dataclasses import dataclass, fields
from urllib.parse import urlencode

DEFAULT_QUALITY = "1080p"

# Field name -> API parameter name, in request order.
PARAMS = {
    "limit": "limit",
    "quality": "quality",
    "minimum_rating": "minimum_rating",
    "query_term": "query_term",
    "genre": "genre",
    "sort_by": "sort_by",
    "order_by": "order_by",
    "with_rt_ratings": "with_rt_ratings",
}


@dataclass
class Query:
    """Filter and sort options for one search.

    Empty strings, zeros and False mean "unset" and are left out of the
    request. Values are forwarded as-is; the API is the only validator.
    """

    limit: int = 0
    quality: str = DEFAULT_QUALITY
    minimum_rating: int = 0
    query_term: str = ""
    genre: str = ""
    sort_by: str = ""
    order_by: str = ""
    with_rt_ratings: bool = False

    def to_params(self) -> dict[str, str]:
        """Serialize every set field into API parameters."""
        params = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if not value:
                continue
            if isinstance(value, bool):
                value = "true"
            params[PARAMS[f.name]] = str(value)
        return params

    def encode(self) -> str:
        """URL-encoded query string of the set fields."""
        return urlencode(self.to_params())
