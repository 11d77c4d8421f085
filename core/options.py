"""Resolved options for one run."""

from dataclasses import dataclass, field

from .config import Settings
from .magnet import TRACKERS
from .query import Query
from .search import BASE_URL, TIMEOUT


@dataclass(frozen=True)
class RunOptions:
    """Everything one invocation needs, resolved once from settings and flags."""

    query: Query = field(default_factory=Query)
    base_url: str = BASE_URL
    timeout: float = TIMEOUT
    trackers: bool = True
    tracker_list: tuple[str, ...] = TRACKERS
    open_first: bool = False
    watchlist: str = ""
    preview: bool = False

    @classmethod
    def resolve(cls, settings: Settings, **flags) -> "RunOptions":
        """Merge flags over settings. Flags left as None fall back to settings."""

        def pick(name, default):
            value = flags.get(name)
            return default if value is None else value

        query = Query(
            limit=pick("limit", settings.limit),
            quality=pick("quality", settings.quality),
            minimum_rating=pick("minimum_rating", 0),
            query_term=pick("query_term", ""),
            genre=pick("genre", ""),
            sort_by=pick("sort_by", ""),
            order_by=pick("order_by", ""),
            with_rt_ratings=pick("with_rt_ratings", False),
        )
        return cls(
            query=query,
            base_url=settings.base_url,
            timeout=settings.timeout,
            trackers=not (flags.get("disable_trackers") or settings.disable_trackers),
            tracker_list=tuple(settings.trackers),
            open_first=bool(flags.get("open_first")),
            watchlist=pick("watchlist", settings.watchlist),
            preview=bool(flags.get("preview")),
        )
