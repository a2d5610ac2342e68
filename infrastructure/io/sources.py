"""Asynchronous reading of taxonomy text resources (HTTP or local files)."""

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

import httpx

logger = logging.getLogger(__name__)


def is_remote(location: str) -> bool:
    return location.startswith(("http://", "https://"))


async def read_source(location: str, client: httpx.AsyncClient | None = None) -> str:
    """
    Read one taxonomy resource as UTF-8 text.

    Args:
        location: http(s) URL or filesystem path
        client: Shared AsyncClient for remote locations (required for URLs)

    Raises:
        httpx.HTTPError: On transport errors or non-2xx responses
        FileNotFoundError: If a local path does not exist
    """
    if is_remote(location):
        if client is None:
            raise ValueError(f"An HTTP client is required to fetch {location}")
        resp = await client.get(location)
        resp.raise_for_status()
        logger.debug("Fetched %s (%d bytes)", location, len(resp.content))
        return resp.content.decode("utf-8")

    path = Path(location)
    if not path.exists():
        raise FileNotFoundError(f"Taxonomy file not found: {path}")
    return await asyncio.to_thread(path.read_text, encoding="utf-8")


async def read_sources(
    locations: Sequence[str],
    *,
    timeout_s: float = 10.0,
    client: httpx.AsyncClient | None = None,
) -> list[str]:
    """
    Read all resources concurrently; results keep the order of `locations`.

    A client is created (and closed) here when none is given and any location is remote.
    """
    if client is not None or not any(is_remote(loc) for loc in locations):
        return list(await asyncio.gather(*(read_source(loc, client) for loc in locations)))

    async with httpx.AsyncClient(timeout=timeout_s, follow_redirects=True) as owned:
        return list(await asyncio.gather(*(read_source(loc, owned) for loc in locations)))
