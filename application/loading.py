"""Load taxonomy sources into a store, turning any failure into a permanent not-ready state."""

import logging

import httpx

from domain.taxonomy.store import TaxonomyStore
from infrastructure.config.models import EngineConfig
from infrastructure.io.sources import read_sources

logger = logging.getLogger(__name__)


async def load_taxonomy(
    store: TaxonomyStore,
    cfg: EngineConfig,
    *,
    client: httpx.AsyncClient | None = None,
) -> bool:
    """
    Fetch every configured source and publish the taxonomy into `store`.

    Errors while fetching or parsing are logged and leave the store FAILED; they
    are not retried. Calling this on a store that already started loading raises
    TaxonomyLoadError.

    Returns:
        True if the store is ready afterwards
    """
    store.begin_load()
    locations = cfg.resolved_locations()
    logger.info("Loading taxonomy from %d source(s): %s", len(locations), ", ".join(locations))

    try:
        blocks = await read_sources(locations, timeout_s=cfg.timeout_s, client=client)
        store.load_blocks(blocks)
    except Exception:
        logger.exception("Failed to load taxonomy; comparisons will be unavailable")
        store.mark_failed()
        return False

    return store.is_ready()
