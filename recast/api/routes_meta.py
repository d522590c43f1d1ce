"""Liveness, readiness and greeting endpoints beside the feed proxy."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from recast import __version__

router = APIRouter(tags=["meta"])


@router.get("/healthz")
async def liveness():
    """Answer as long as the event loop is serving requests."""
    return {"ok": True}


@router.get("/readyz")
async def readiness():
    """Report readiness and the running version.

    The proxy holds no connections, caches or other warm-up state, so it is
    ready as soon as it can answer.
    """
    return {"ok": True, "version": __version__}


@router.get("/hello/{name}", response_class=PlainTextResponse)
async def hello(name: str):
    return f"Hello, {name}!"
