from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True, slots=True)
class Article:
    """A single post taken from the syndication feed."""

    title: str
    link: str
    published_at: Optional[datetime]
    raw_description: str = ""
    engagement_score: int = 0

    @property
    def has_valid_date(self) -> bool:
        return self.published_at is not None
