"""Request handling for the postdating proxy."""

import logging
from datetime import datetime, timedelta

from fastapi import Response

from recast.errors import FeedParseError, QueryParseError

from .codec import parse_feed, serialize_feed
from .fetcher import FeedFetcher
from .models import RawQuery
from .postdate import postdate_channel
from .query import validate_query

logger = logging.getLogger(__name__)


async def handle_rss(
    raw: RawQuery, fetcher: FeedFetcher, now: datetime | None = None
) -> Response:
    """Fetch, postdate and re-serialize the feed named by a request.

    This function:
    1. Validates the url and delay parameters
    2. Fetches the origin feed once (no retries)
    3. Parses it and postdates every item, dropping items not yet due
    4. Serializes the result, forwarding the origin Content-Type if present

    Args:
        raw: Query parameters as received
        fetcher: Fetcher used to load the origin feed
        now: Instant to compare postdated items against (defaults to now)

    Returns:
        A 200 response carrying the rewritten feed

    Raises:
        QueryParseError: If the query is invalid
        FeedLoadError: If the origin feed cannot be fetched or read
        FeedParseError: If the origin response is not an RSS feed
    """
    try:
        query = validate_query(raw)
    except QueryParseError as exc:
        logger.warning(
            "failed to parse query (url=%r, delay=%r): %s", raw.url, raw.delay, exc
        )
        raise

    fetched = await fetcher.fetch(query.url)

    try:
        channel = parse_feed(fetched.content)
    except FeedParseError as exc:
        logger.warning(
            "failed to parse feed %s: %s",
            query.url,
            exc,
            extra={"feed_url": query.url},
        )
        raise

    received = len(channel.items)
    postdate_channel(channel, query.delay, now)
    logger.info(
        "postdated feed %s: %d of %d items due",
        query.url,
        len(channel.items),
        received,
        extra={
            "feed_url": query.url,
            "delay_hours": query.delay // timedelta(hours=1),
            "items_in": received,
            "items_out": len(channel.items),
        },
    )

    headers = {}
    if fetched.content_type is not None:
        headers["content-type"] = fetched.content_type
    return Response(content=serialize_feed(channel), status_code=200, headers=headers)
