"""Medium blog feed package initializer."""

from .config import FeedConfig
from .display import DisplayContext, HtmlDocumentDisplay, InMemoryDisplay
from .fetcher import FetchFailure
from .models import Article
from .pipeline import FeedPipeline, PipelineState, load_blog_posts

__all__ = [
    "Article",
    "DisplayContext",
    "FeedConfig",
    "FeedPipeline",
    "FetchFailure",
    "HtmlDocumentDisplay",
    "InMemoryDisplay",
    "PipelineState",
    "load_blog_posts",
]
