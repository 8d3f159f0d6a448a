from collections.abc import Callable, Iterable

from models.country import CountrySummary
from models.query import FilterQuery, FilterResult, SearchField
from utils.formatting import found_status, showing_status


def _contains(value: str | None, query: str) -> bool:
    return bool(value) and query in value.lower()


def _match_name(c: CountrySummary, q: str) -> bool:
    return _contains(c.common_name, q) or _contains(c.official_name, q)


def _match_code(c: CountrySummary, q: str) -> bool:
    return _contains(c.alpha2_code, q) or _contains(c.alpha3_code, q)


def _match_continent(c: CountrySummary, q: str) -> bool:
    return _contains(c.region, q)


def _match_capital(c: CountrySummary, q: str) -> bool:
    return _contains(c.capital_city, q)


_MATCHERS: dict[str, Callable[[CountrySummary, str], bool]] = {
    SearchField.NAME.value: _match_name,
    SearchField.CODE.value: _match_code,
    SearchField.CONTINENT.value: _match_continent,
    SearchField.CAPITAL.value: _match_capital,
}


def matches(country: CountrySummary, field: str, query: str) -> bool:
    """Whether a normalized query matches the country on the given field."""
    matcher = _MATCHERS.get(field)
    if matcher is None:
        return False
    return matcher(country, query)


def filter_countries(countries: Iterable[CountrySummary], query: FilterQuery) -> FilterResult:
    countries = list(countries)
    text = query.normalized_text

    if not text:
        return FilterResult(countries=countries, status=showing_status(len(countries)))

    field = query.field.value if isinstance(query.field, SearchField) else query.field
    filtered = [c for c in countries if matches(c, field, text)]
    return FilterResult(countries=filtered, status=found_status(len(filtered), text))
