"""Fetching origin feeds over HTTP."""

import asyncio
import logging

import httpx

from recast.config import Settings, get_settings
from recast.errors import FeedLoadError

from .models import FetchedFeed

logger = logging.getLogger(__name__)


class FeedFetcher:
    """Performs a single GET against an origin feed and reads its body.

    No retries are attempted. Each network phase is bounded by
    ``fetch_timeout_seconds``, the whole fetch by ``fetch_deadline_seconds``
    and the body by ``max_feed_bytes``.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the fetcher.

        Args:
            settings: Settings to read fetch limits from (defaults to get_settings())
            transport: Optional httpx transport, used to stub the origin in tests
        """
        self._settings = settings or get_settings()
        self._transport = transport

    async def fetch(self, url: str) -> FetchedFeed:
        """Fetch a feed.

        Args:
            url: Absolute http(s) URL of the origin feed

        Returns:
            FetchedFeed with the body and the Content-Type header, if any

        Raises:
            FeedLoadError: If the request fails, the body cannot be read,
                the body is larger than allowed, or the whole fetch takes
                longer than ``fetch_deadline_seconds``
        """
        deadline = self._settings.fetch_deadline_seconds
        try:
            return await asyncio.wait_for(self._fetch(url), timeout=deadline)
        except asyncio.TimeoutError as exc:
            logger.warning("feed %s not received within %ss", url, deadline)
            raise FeedLoadError(f"feed not received within {deadline}s") from exc

    async def _fetch(self, url: str) -> FetchedFeed:
        settings = self._settings

        async with httpx.AsyncClient(
            timeout=settings.fetch_timeout_seconds,
            follow_redirects=settings.follow_redirects,
            headers={"User-Agent": settings.user_agent},
            transport=self._transport,
        ) as client:
            try:
                request = client.build_request("GET", url)
                response = await client.send(request, stream=True)
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                logger.warning(
                    "failed to load feed %s: %s", url, exc, extra={"feed_url": url}
                )
                raise FeedLoadError(str(exc) or type(exc).__name__) from exc

            try:
                content_type = response.headers.get("content-type")
                content = await self._read_body(response, url)
            except httpx.HTTPError as exc:
                logger.warning(
                    "failed to read feed %s: %s", url, exc, extra={"feed_url": url}
                )
                raise FeedLoadError(str(exc) or type(exc).__name__) from exc
            finally:
                await response.aclose()

        logger.info(
            "fetched feed %s (status=%s, %d bytes)",
            url,
            response.status_code,
            len(content),
        )
        return FetchedFeed(content=content, content_type=content_type)

    async def _read_body(self, response: httpx.Response, url: str) -> bytes:
        """Read a streamed body, enforcing the size limit."""
        limit = self._settings.max_feed_bytes
        chunks: list[bytes] = []
        size = 0

        async for chunk in response.aiter_bytes():
            size += len(chunk)
            if size > limit:
                logger.warning("feed %s exceeds %d bytes", url, limit)
                raise FeedLoadError(f"response body exceeds {limit} bytes")
            chunks.append(chunk)

        return b"".join(chunks)
