from collections.abc import Callable, Sequence

from models.country import CountrySummary
from models.query import SearchField
from services.render_service import index_cards, render_cards

MODAL_OPEN_CLASS = "modal-open"
LIGHT_MODE_CLASS = "light-mode"


class PageSurface:
    """In-memory page state: what a browser would hold in its DOM."""

    def __init__(self):
        self.status_text = ""
        self.grid_html = ""
        self.cards: dict[str, CountrySummary] = {}
        self.body_classes: set[str] = set()
        self.search_text = ""
        self.search_field = SearchField.NAME.value
        self.theme_toggle_checked = False
        self.focused: str | None = None
        # Called with the new card index after every grid replacement.
        self.render_listeners: list[Callable[[dict[str, CountrySummary]], None]] = []

    def set_status(self, text: str) -> None:
        self.status_text = text

    def render_grid(self, countries: Sequence[CountrySummary]) -> None:
        # Full replacement, no diffing.
        self.cards = index_cards(countries)
        self.grid_html = render_cards(countries)
        for listener in self.render_listeners:
            listener(self.cards)

    def add_class(self, name: str) -> None:
        self.body_classes.add(name)

    def remove_class(self, name: str) -> None:
        self.body_classes.discard(name)

    def snapshot(self) -> dict:
        return {
            "status_text": self.status_text,
            "grid_html": self.grid_html,
            "cards": list(self.cards),
            "body_classes": sorted(self.body_classes),
            "search_text": self.search_text,
            "search_field": self.search_field,
            "theme_toggle_checked": self.theme_toggle_checked,
            "focused": self.focused,
        }
