"""
Pytest configuration and fixtures for Country Directory tests.

Provides sample upstream payloads, an httpx client backed by a mock
transport, a temporary preference store, a fully wired application
context and an ASGI test client.
"""

import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from controllers.context import AppContext
from models.country import CountrySummary
from services.preference_store import PreferenceStore

BASE_URL = "https://restcountries.test/v3.1"


def _country(common, official, cca2, cca3, capital, region, population, png=True):
    flags = {"svg": f"https://flags.test/{cca2.lower()}.svg"}
    if png:
        flags["png"] = f"https://flags.test/{cca2.lower()}.png"
    record = {
        "name": {"common": common, "official": official},
        "cca2": cca2,
        "cca3": cca3,
        "region": region,
        "population": population,
        "flags": flags,
    }
    if capital is not None:
        record["capital"] = capital
    return record


# ============================================================================
# Upstream payloads
# ============================================================================

@pytest.fixture
def countries_payload() -> list[dict]:
    """Bulk listing in upstream order (deliberately unsorted)."""
    return [
        _country("United States", "United States of America", "US", "USA", ["Washington, D.C."], "Americas", 329484123),
        _country("Germany", "Federal Republic of Germany", "DE", "DEU", ["Berlin"], "Europe", 83240525),
        _country("Testland", "Republic of Testland", "TL", "TST", [], "Oceania", 1000, png=False),
        _country("France", "French Republic", "FR", "FRA", ["Paris"], "Europe", 67391582),
        _country("Antarctica", "Antarctica", "AQ", "ATA", None, "Antarctic", 1000),
        _country("Åland Islands", "Åland Islands", "AX", "ALA", ["Mariehamn"], "Europe", 29458),
    ]


@pytest.fixture
def france_detail_payload() -> list[dict]:
    """Per-country response: a single-element array."""
    return [{
        **_country("France", "French Republic", "FR", "FRA", ["Paris"], "Europe", 67391582),
        "independent": True,
        "languages": {"fra": "French"},
        "subregion": "Western Europe",
        "currencies": {"EUR": {"name": "Euro", "symbol": "€"}},
        "timezones": ["UTC-10:00", "UTC+01:00"],
        "area": 551695.0,
        "demonyms": {"eng": {"f": "French", "m": "French"}},
        "idd": {"root": "+3", "suffixes": ["3"]},
        "translations": {"deu": {"official": "Französische Republik", "common": "Frankreich"},
                         "ita": {"official": "Repubblica francese", "common": "Francia"}},
        "altSpellings": ["FR", "French Republic", "République française"],
        "borders": ["AND", "BEL", "DEU"],
        "maps": {"googleMaps": "https://goo.gl/maps/g7QxxSFsWyTPKuzd7"},
    }]


@pytest.fixture
def upstream(countries_payload, france_detail_payload):
    """
    Routing table for the mock transport.

    Tests can replace entries (or set them to an exception instance) to
    simulate failures; every request seen is recorded in ``requests``.
    """
    class Upstream:
        def __init__(self):
            self.requests: list[httpx.Request] = []
            self.routes: dict = {
                "/v3.1/all": httpx.Response(200, json=countries_payload),
                "/v3.1/alpha/FRA": httpx.Response(200, json=france_detail_payload),
            }

        def __call__(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            route = self.routes.get(request.url.path)
            if route is None:
                return httpx.Response(404, json={"status": 404, "message": "Not Found"})
            if isinstance(route, Exception):
                raise route
            # Fresh copy per request so routes can be served repeatedly.
            return httpx.Response(route.status_code, headers=route.headers, content=route.content)

        def paths(self) -> list[str]:
            return [r.url.path for r in self.requests]

    return Upstream()


@pytest_asyncio.fixture
async def http_client(upstream):
    async with httpx.AsyncClient(transport=httpx.MockTransport(upstream), base_url=BASE_URL) as client:
        yield client


# ============================================================================
# Application fixtures
# ============================================================================

@pytest.fixture
def store(tmp_path) -> PreferenceStore:
    return PreferenceStore(tmp_path / "preferences.json")


@pytest.fixture
def summaries(countries_payload) -> list[CountrySummary]:
    return [CountrySummary.from_api(c) for c in countries_payload]


@pytest_asyncio.fixture
async def context(http_client, store) -> AppContext:
    """Wired context with the dataset already loaded."""
    ctx = AppContext(client=http_client, store=store, hover_delay_ms=750)
    await ctx.directory.load()
    return ctx


@pytest_asyncio.fixture
async def client(context):
    """
    Provide HTTP test client.

    The lifespan handler does not run under ASGITransport, so the loaded
    test context is installed on app.state directly.
    """
    from main import app

    app.state.context = context
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client
    app.state.context = None
