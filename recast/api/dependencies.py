"""FastAPI dependencies for API routers."""

from recast.rss.fetcher import FeedFetcher


def get_fetcher() -> FeedFetcher:
    """Dependency for FastAPI routes to get a feed fetcher.

    Returns:
        FeedFetcher configured from the application settings
    """
    return FeedFetcher()
