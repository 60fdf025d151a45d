"""HTML card rendering for ranked articles."""

from __future__ import annotations

from datetime import datetime
import re
from typing import Optional, Sequence

from .models import Article

NO_ARTICLES_MESSAGE = "No articles found. Please check back soon!"
NO_ARTICLES_MARKUP = f'<div class="blog-error">{NO_ARTICLES_MESSAGE}</div>'
FALLBACK_MESSAGE = "Unable to load articles at the moment."
DATE_UNAVAILABLE = "Date unavailable"

_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}
_ESCAPE_RE = re.compile(r"[&<>\"']")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def escape_html(text: str) -> str:
    return _ESCAPE_RE.sub(lambda match: _ESCAPES[match.group(0)], text)


def format_date(value: Optional[datetime]) -> str:
    """Format like ``Jan 5, 2024`` (en-US short month, day without padding)."""
    if value is None:
        return DATE_UNAVAILABLE
    return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"


def render_card(article: Article) -> str:
    return (
        '<div class="blog-post">'
        f"<h3>{escape_html(article.title)}</h3>"
        '<div class="blog-post-meta">'
        f'<span><i class="fa fa-calendar"></i> {format_date(article.published_at)}</span>'
        "</div>"
        '<div class="blog-post-link">'
        f'<a href="{escape_html(article.link)}" target="_blank" rel="noopener noreferrer">Read Article</a>'
        "</div>"
        "</div>"
    )


def render_articles(articles: Sequence[Article], limit: int) -> str:
    if not articles:
        return NO_ARTICLES_MARKUP
    return "".join(render_card(article) for article in articles[:limit])


def render_fallback(profile_url: str) -> str:
    return (
        '<div class="blog-error">'
        f"<p>{FALLBACK_MESSAGE}</p>"
        f'<p>Visit my <a href="{escape_html(profile_url)}" target="_blank" '
        'style="color: #cc005f; text-decoration: underline;">Medium profile</a> directly.</p>'
        "</div>"
    )
