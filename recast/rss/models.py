"""Pydantic models for proxy requests and fetched feeds."""

from datetime import timedelta

from pydantic import BaseModel, ConfigDict


class RawQuery(BaseModel):
    """Query parameters exactly as received; absent parameters are None."""

    url: str | None = None
    delay: str | None = None


class ValidatedQuery(BaseModel):
    """A decoded and validated proxy request."""

    model_config = ConfigDict(frozen=True)

    url: str
    delay: timedelta


class FetchedFeed(BaseModel):
    """Raw origin response body and its content type, if any."""

    content: bytes
    content_type: str | None = None
