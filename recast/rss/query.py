"""Validation of the ``url`` and ``delay`` query parameters."""

import re
from datetime import timedelta
from urllib.parse import unquote

from recast.errors import QueryParseError

from .models import RawQuery, ValidatedQuery

MIN_DELAY = timedelta(hours=1)
MAX_DELAY_HOURS = timedelta.max // timedelta(hours=1)

# A '%' that does not start a two-digit hex escape
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_INTEGER = re.compile(r"[+-]?[0-9]+")


def decode_url(raw: str) -> str:
    """Percent-decode a URL, rejecting malformed escapes.

    Args:
        raw: The percent-encoded URL

    Returns:
        The decoded URL

    Raises:
        QueryParseError: If an escape is malformed or decodes to invalid UTF-8
    """
    if match := _BAD_ESCAPE.search(raw):
        raise QueryParseError(
            f"invalid url encoding: malformed percent-escape at position {match.start()}"
        )
    try:
        url = unquote(raw, errors="strict")
    except UnicodeDecodeError as exc:
        raise QueryParseError(f"invalid url encoding: {exc}") from exc
    if not url:
        raise QueryParseError("url must not be empty")
    return url


def parse_delay(raw: str) -> timedelta:
    """Parse a whole number of hours into a delay of at least ``MIN_DELAY``.

    Delays too long for ``timedelta`` are clamped to ``timedelta.max``; no
    item can be postdated that far, so such a feed comes back empty.

    Raises:
        QueryParseError: If the value is not an integer or is below the minimum
    """
    if not _INTEGER.fullmatch(raw):
        cause = (
            "cannot parse integer from empty string"
            if not raw
            else "invalid digit found in string"
        )
        raise QueryParseError(f"delay must be an integer: {cause}")

    hours = int(raw)
    if hours < MIN_DELAY // timedelta(hours=1):
        raise QueryParseError(
            f"delay must be at least {MIN_DELAY // timedelta(hours=1)} hour(s)"
        )
    if hours > MAX_DELAY_HOURS:
        return timedelta.max
    return timedelta(hours=hours)


def validate_query(raw: RawQuery) -> ValidatedQuery:
    """Decode and validate the raw query parameters of a proxy request.

    Args:
        raw: Query parameters as received

    Returns:
        The validated request

    Raises:
        QueryParseError: If either parameter is missing or invalid
    """
    if raw.url is None:
        raise QueryParseError("missing url parameter")
    if raw.delay is None:
        raise QueryParseError("missing delay parameter")

    return ValidatedQuery(url=decode_url(raw.url), delay=parse_delay(raw.delay))
