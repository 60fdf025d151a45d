from __future__ import annotations

from typing import Iterable, List, Tuple

from .models import Article


def rank_by_recency(articles: Iterable[Article]) -> List[Article]:
    """Newest first; equal dates keep their input order and undated articles go last."""
    return sorted(articles, key=_sort_key, reverse=True)


def _sort_key(article: Article) -> Tuple[int, float]:
    if not article.has_valid_date:
        return (0, 0.0)
    return (1, article.published_at.timestamp())
