"""Postdating of feed items.

Each item's ``pubDate`` is shifted later by the requested delay. Items whose
shifted date has not yet passed are withheld, so a subscriber sees every item
exactly ``delay`` after the origin published it.
"""

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime, parsedate_to_datetime

from .codec import FeedChannel, FeedItem


def parse_pub_date(value: str | None) -> datetime | None:
    """Parse an RFC 2822 date into an aware datetime, or None if invalid.

    Dates without zone information (``-0000``) are taken to be UTC.
    """
    if not value:
        return None
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def display_date(value: datetime) -> str:
    """Render a datetime as ``YYYY-MM-DD HH:MM:SS +HH:MM``."""
    offset = int(value.utcoffset().total_seconds())
    sign = "+" if offset >= 0 else "-"
    hours, minutes = divmod(abs(offset) // 60, 60)
    return f"{value:%Y-%m-%d %H:%M:%S} {sign}{hours:02d}:{minutes:02d}"


def shift_after_delay(
    published: datetime, delay: timedelta, now: datetime
) -> datetime | None:
    """Return ``published + delay`` if it is strictly before ``now``.

    Returns None when the shifted date is not yet due or is not representable.
    """
    try:
        shifted = published + delay
    except OverflowError:
        return None
    return shifted if shifted < now else None


def postdate_item(item: FeedItem, delay: timedelta, now: datetime) -> FeedItem | None:
    """Postdate a single item in place.

    Args:
        item: The item to rewrite
        delay: How far to shift the publication date
        now: The instant the shifted date is compared against

    Returns:
        The rewritten item, or None if it must be dropped
    """
    published = parse_pub_date(item.pub_date)
    if published is None:
        return None

    shifted = shift_after_delay(published, delay, now)
    if shifted is None:
        return None

    item.pub_date = format_datetime(shifted)

    description = item.description
    if description is not None:
        item.description = (
            f"(originally published on {display_date(published)}) {description}"
        )

    return item


def postdate_channel(
    channel: FeedChannel, delay: timedelta, now: datetime | None = None
) -> FeedChannel:
    """Postdate every item of a channel, dropping the ones not yet due.

    Surviving items keep their relative order; channel metadata is untouched.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    survivors = []
    for item in channel.items:
        postdated = postdate_item(item, delay, now)
        if postdated is not None:
            survivors.append(postdated)

    channel.set_items(survivors)
    return channel
