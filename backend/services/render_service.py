"""HTML rendering for the card grid, the detail view and the full page."""

from collections.abc import Sequence
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from models.country import CountryDetail, CountrySummary
from utils.formatting import format_number, or_na

TEMPLATES_PATH = Path(__file__).resolve().parent.parent / "templates"

env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_PATH)),
    autoescape=select_autoescape(["html"]),
)
env.filters["grouped"] = format_number
env.filters["or_na"] = or_na


def card_id(country: CountrySummary, position: int) -> str:
    """Stable identity of a rendered card: the 3-letter code when there is one."""
    return country.alpha3_code or f"card-{position}"


def index_cards(countries: Sequence[CountrySummary]) -> dict[str, CountrySummary]:
    return {card_id(c, i): c for i, c in enumerate(countries)}


def render_cards(countries: Sequence[CountrySummary]) -> str:
    """Markup for one card per country, in input order.

    An empty sequence renders a single full-width "No countries found." row.
    Pure: the input is only read.
    """
    cards = [{"card_id": cid, "country": c} for cid, c in index_cards(countries).items()]
    return env.get_template("_cards.html").render(countries=cards)


def render_detail(country: CountrySummary, detail: CountryDetail | None) -> str:
    return env.get_template("_detail.html").render(country=country, detail=detail)


def render_page(**context) -> str:
    return env.get_template("index.html").render(**context)
