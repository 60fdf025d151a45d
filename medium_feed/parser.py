"""Conversion of RSS markup into :class:`~medium_feed.models.Article` records."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
from typing import List, Mapping, Optional
import xml.sax

import feedparser

from .models import Article

logger = logging.getLogger(__name__)

UNTITLED = "Untitled"


def parse_feed(xml_text: str) -> List[Article]:
    """Return the feed's entries in document order.

    Structurally malformed documents produce an empty list. Missing fields fall
    back to ``"Untitled"`` for the title and ``""`` for the link and
    description; a missing or unreadable date becomes ``None``. Descriptions
    are kept as the feed wrote them, neither sanitized nor URI-resolved.
    """
    # feedparser resolves str input that looks like a URL or path.
    feed = feedparser.parse(xml_text.encode("utf-8"), resolve_relative_uris=False, sanitize_html=False)
    if _is_malformed(feed):
        logger.error("Error parsing XML: %s", feed.get("bozo_exception"))
        return []
    articles: List[Article] = []
    for entry in feed.entries or []:
        description = _text(entry, "summary")
        articles.append(
            Article(
                title=_text(entry, "title") or UNTITLED,
                link=_parse_link(entry),
                published_at=_parse_published(entry),
                raw_description=description,
                engagement_score=extract_engagement_score(description),
            )
        )
    return articles


def extract_engagement_score(description: str) -> int:
    # Medium does not publish clap counts in the RSS description.
    return 0


def _is_malformed(feed: Mapping[str, object]) -> bool:
    if not feed.get("bozo"):
        return False
    return isinstance(feed.get("bozo_exception"), xml.sax.SAXException)


def _text(entry: Mapping[str, object], key: str) -> str:
    value = entry.get(key)
    return value if isinstance(value, str) else ""


def _parse_link(entry: Mapping[str, object]) -> str:
    # entry.link falls back to a permalink <guid>; links only holds real <link> elements.
    for link in entry.get("links") or []:
        if link.get("rel", "alternate") == "alternate" and link.get("href"):
            return link["href"]
    return ""


def _parse_published(entry: Mapping[str, object]) -> Optional[datetime]:
    for key in ("published_parsed", "updated_parsed"):
        parsed = entry.get(key)
        if parsed:
            try:
                return datetime(*parsed[:6], tzinfo=timezone.utc)
            except (TypeError, ValueError):
                continue
    return None
