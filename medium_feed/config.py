from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_FEED_URL = "https://medium.com/feed/@chemicalstan15"
DEFAULT_RELAY_PREFIX = "https://api.allorigins.win/raw?url="
DEFAULT_PROFILE_URL = "https://medium.com/@chemicalstan15"
DEFAULT_SURFACE_ID = "blog-posts"


@dataclass(slots=True)
class FeedConfig:
    """Runtime configuration for the blog feed pipeline."""

    feed_url: str = DEFAULT_FEED_URL
    relay_prefix: str = DEFAULT_RELAY_PREFIX
    profile_url: str = DEFAULT_PROFILE_URL
    display_limit: int = 6
    surface_id: str = DEFAULT_SURFACE_ID
    request_timeout: float = 10.0

    def __post_init__(self) -> None:
        if self.display_limit <= 0:
            raise ValueError("display_limit must be a positive integer")

    @classmethod
    def from_env(cls) -> "FeedConfig":
        import os

        return cls(
            feed_url=os.getenv("MEDIUM_FEED_URL") or DEFAULT_FEED_URL,
            relay_prefix=os.getenv("MEDIUM_FEED_RELAY_PREFIX") or DEFAULT_RELAY_PREFIX,
            profile_url=os.getenv("MEDIUM_FEED_PROFILE_URL") or DEFAULT_PROFILE_URL,
            display_limit=_parse_int(os.getenv("MEDIUM_FEED_DISPLAY_LIMIT"), "MEDIUM_FEED_DISPLAY_LIMIT", default=6),
            surface_id=os.getenv("MEDIUM_FEED_SURFACE_ID") or DEFAULT_SURFACE_ID,
            request_timeout=_parse_float(os.getenv("MEDIUM_FEED_TIMEOUT"), "MEDIUM_FEED_TIMEOUT", default=10.0),
        )


def _parse_int(value: Optional[str], name: str, default: int) -> int:
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer if set") from None


def _parse_float(value: Optional[str], name: str, default: float) -> float:
    if value is None or value.strip() == "":
        return default
    try:
        parsed = float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number if set") from None
    if parsed <= 0:
        raise ValueError(f"{name} must be greater than zero")
    return parsed
