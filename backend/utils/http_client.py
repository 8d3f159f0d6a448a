import logging

import httpx

from config import settings

logger = logging.getLogger(__name__)

_client: httpx.AsyncClient | None = None


def get_client() -> httpx.AsyncClient:
    global _client
    if _client is None:
        _client = httpx.AsyncClient(
            base_url=settings.restcountries_base_url,
            timeout=settings.request_timeout_seconds,
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            headers={"Accept": "application/json"},
        )
        logger.debug("Created shared HTTP client for %s", settings.restcountries_base_url)
    return _client


async def close_client():
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
