"""Configuration schema for movies."""

from dataclasses import dataclass, field, fields

from ..errors import ConfigError
from ..magnet import TRACKERS
from ..query import DEFAULT_QUALITY
from ..search import BASE_URL, TIMEOUT


@dataclass
class Settings:
    """User defaults, overridden by command-line flags."""

    base_url: str = BASE_URL
    timeout: float = TIMEOUT
    quality: str = DEFAULT_QUALITY
    disable_trackers: bool = False
    trackers: list[str] = field(default_factory=lambda: list(TRACKERS))
    watchlist: str = ""  # path to a Letterboxd watchlist export
    limit: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary for YAML serialization."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Create from dictionary (YAML deserialization). Unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key in known and value is not None:
                values[key] = coerce(key, value)
        return cls(**values)


def _bool(value) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off", ""):
        return False
    raise ValueError(f"not a boolean: {value!r}")


def _trackers(value) -> list[str]:
    if isinstance(value, str):
        return [t.strip() for t in value.split(",") if t.strip()]
    return [str(t) for t in value]


_COERCE = {
    "base_url": str,
    "timeout": float,
    "quality": str,
    "disable_trackers": _bool,
    "trackers": _trackers,
    "watchlist": str,
    "limit": int,
}


def coerce(key: str, value):
    """Convert a raw value to the type of setting ``key``."""
    if key not in _COERCE:
        raise ConfigError(f"Unknown setting '{key}'")
    try:
        return _COERCE[key](value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value for '{key}': {e}") from e
