"""Postdated feed endpoint for recast."""

from fastapi import APIRouter, Depends, Query

from recast.api.dependencies import get_fetcher
from recast.rss.fetcher import FeedFetcher
from recast.rss.handler import handle_rss
from recast.rss.models import RawQuery

router = APIRouter(tags=["rss"])


@router.get("/rss")
async def get_postdated_feed(
    url: str | None = Query(default=None, description="Percent-encoded feed URL"),
    delay: str | None = Query(default=None, description="Delay in whole hours (>= 1)"),
    fetcher: FeedFetcher = Depends(get_fetcher),
):
    """
    Republish a remote RSS feed with every item postdated by ``delay`` hours.

    Items whose postdated time is still in the future are left out.

    Query Parameters:
        - url: Percent-encoded URL of the origin feed
        - delay: Integer number of hours, at least 1

    Returns:
        The rewritten feed, with the origin's Content-Type when it sent one.
        400 if the query is invalid, 500 if the feed cannot be loaded or parsed.
    """
    return await handle_rss(RawQuery(url=url, delay=delay), fetcher)
