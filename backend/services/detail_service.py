import logging

import httpx

from models.country import CountryDetail, CountrySummary
from services.render_service import render_detail

logger = logging.getLogger(__name__)


async def fetch_detail(client: httpx.AsyncClient, code: str) -> CountryDetail | None:
    """Fetch the full record for one country by its 3-letter code.

    Returns None on any failure; the detail block is optional content and
    callers fall back to the summary.
    """
    if not code:
        return None

    try:
        response = await client.get(f"/alpha/{code}")
        if not response.is_success:
            logger.debug("Detail request for %s returned %s", code, response.status_code)
            return None

        data = response.json()
        if isinstance(data, list):
            data = data[0] if data else None
        if not isinstance(data, dict):
            logger.debug("Detail response for %s had no record", code)
            return None

        return CountryDetail.from_api(data)

    except (httpx.HTTPError, ValueError, AttributeError, TypeError) as e:
        # Includes records whose nested values do not have the expected shape.
        logger.debug("Detail request for %s failed: %s", code, e)
        return None


async def build_detail_view(client: httpx.AsyncClient, country: CountrySummary) -> str:
    """Detail markup for a card: summary fields always, extra block when the fetch succeeds."""
    detail = await fetch_detail(client, country.alpha3_code)
    return render_detail(country, detail)
