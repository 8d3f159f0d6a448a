import logging
import unicodedata
from collections.abc import Iterable, Iterator

import httpx

from models.country import CountrySummary

logger = logging.getLogger(__name__)

SUMMARY_FIELDS = ("name", "cca2", "cca3", "capital", "region", "flags", "population")


class LoadFailure(Exception):
    """The bulk country listing could not be fetched or decoded."""


def _collation_key(name: str) -> tuple[str, str]:
    # Accent- and case-insensitive primary key, raw name as tie-breaker.
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), name


def sort_by_name(countries: Iterable[CountrySummary]) -> list[CountrySummary]:
    return sorted(countries, key=lambda c: _collation_key(c.common_name))


class Dataset:
    """The loaded country list. Replaced wholesale on publish, never edited."""

    def __init__(self):
        self._countries: tuple[CountrySummary, ...] = ()
        self._by_code: dict[str, CountrySummary] = {}

    def publish(self, countries: Iterable[CountrySummary]) -> None:
        self._countries = tuple(countries)
        self._by_code = {c.alpha3_code: c for c in self._countries if c.alpha3_code}

    def clear(self) -> None:
        self.publish(())

    @property
    def countries(self) -> list[CountrySummary]:
        return list(self._countries)

    def get_by_code(self, code: str) -> CountrySummary | None:
        return self._by_code.get(code.upper())

    def __len__(self) -> int:
        return len(self._countries)

    def __iter__(self) -> Iterator[CountrySummary]:
        return iter(self._countries)


async def fetch_all(client: httpx.AsyncClient) -> list[CountrySummary]:
    """Fetch every country summary, sorted by common name.

    Raises LoadFailure on transport errors, non-success responses and
    payloads that are not a JSON array.
    """
    try:
        response = await client.get("/all", params={"fields": ",".join(SUMMARY_FIELDS)})
    except httpx.HTTPError as e:
        raise LoadFailure(f"Request failed: {e}") from e

    if not response.is_success:
        raise LoadFailure(f"HTTP error: {response.status_code}")

    try:
        raw = response.json()
    except ValueError as e:
        raise LoadFailure(f"Invalid JSON: {e}") from e
    if not isinstance(raw, list):
        raise LoadFailure("Expected a JSON array of countries")

    return sort_by_name(CountrySummary.from_api(c) for c in raw if isinstance(c, dict))
