"""RSS postdating module for recast."""

from .codec import FeedChannel, FeedItem, parse_feed, serialize_feed
from .fetcher import FeedFetcher
from .handler import handle_rss
from .models import FetchedFeed, RawQuery, ValidatedQuery
from .postdate import postdate_channel, postdate_item
from .query import MIN_DELAY, validate_query

__all__ = [
    "MIN_DELAY",
    "FeedChannel",
    "FeedFetcher",
    "FeedItem",
    "FetchedFeed",
    "RawQuery",
    "ValidatedQuery",
    "handle_rss",
    "parse_feed",
    "postdate_channel",
    "postdate_item",
    "serialize_feed",
    "validate_query",
]
