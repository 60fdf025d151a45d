from __future__ import annotations

import enum
import logging
from typing import Optional

from .config import FeedConfig
from .display import DisplayContext
from .fetcher import FetchFailure, RelayFetcher
from .parser import parse_feed
from .ranker import rank_by_recency
from .renderer import render_articles, render_fallback

logger = logging.getLogger(__name__)


class PipelineState(enum.Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    PARSING = "parsing"
    RANKING = "ranking"
    RENDERING = "rendering"
    DONE = "done"
    FAILED = "failed"


class FeedPipeline:
    """Fetches the feed, ranks its articles and writes cards to the display surface.

    A pipeline runs once. Failures never escape ``run()``: a missing surface is
    logged and skipped, anything else ends in the fallback message.
    """

    def __init__(
        self,
        config: Optional[FeedConfig],
        display: DisplayContext,
        fetcher: Optional[RelayFetcher] = None,
    ) -> None:
        self.config = config or FeedConfig.from_env()
        self.display = display
        self.fetcher = fetcher or RelayFetcher(self.config.relay_prefix, timeout=self.config.request_timeout)
        self.state = PipelineState.IDLE
        self.failure_reason: Optional[str] = None

    def run(self) -> PipelineState:
        if self.state is not PipelineState.IDLE:
            raise RuntimeError("FeedPipeline instances can only be run once")
        try:
            surface = self.display.find_surface(self.config.surface_id)
        except Exception as exc:
            logger.exception("Display context failed looking up %s", self.config.surface_id)
            return self._mark_failed(str(exc))
        if surface is None:
            logger.warning("Blog container not found: %s", self.config.surface_id)
            self.state = PipelineState.DONE
            return self.state
        try:
            markup = self._build_markup()
        except FetchFailure as exc:
            logger.error("Error fetching blog posts from %s: %s", exc.url, exc)
            return self._fail(surface, str(exc))
        except Exception as exc:
            logger.exception("Unexpected error while loading blog posts")
            return self._fail(surface, str(exc))
        try:
            self.display.set_content(surface, markup)
        except Exception as exc:
            logger.exception("Display context failed writing %s", self.config.surface_id)
            return self._mark_failed(str(exc))
        self.state = PipelineState.DONE
        return self.state

    def _build_markup(self) -> str:
        self.state = PipelineState.FETCHING
        xml_text = self.fetcher.fetch(self.config.feed_url)
        self.state = PipelineState.PARSING
        articles = parse_feed(xml_text)
        self.state = PipelineState.RANKING
        ranked = rank_by_recency(articles)
        self.state = PipelineState.RENDERING
        logger.info("Rendering %d of %d articles", min(len(ranked), self.config.display_limit), len(ranked))
        return render_articles(ranked, self.config.display_limit)

    def _fail(self, surface: object, reason: str) -> PipelineState:
        self._mark_failed(reason)
        try:
            self.display.set_content(surface, render_fallback(self.config.profile_url))
        except Exception:
            logger.exception("Display context failed writing the fallback message")
        return self.state

    def _mark_failed(self, reason: str) -> PipelineState:
        self.state = PipelineState.FAILED
        self.failure_reason = reason
        return self.state


def load_blog_posts(display: DisplayContext, config: Optional[FeedConfig] = None) -> PipelineState:
    """Run a fresh pipeline once against ``display``."""
    return FeedPipeline(config=config, display=display).run()
