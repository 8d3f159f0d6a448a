import logging

import httpx

from controllers.base_controller import BaseController
from controllers.modal import ModalController
from controllers.page import PageSurface
from models.query import FilterQuery
from services import country_service
from services.country_service import Dataset, LoadFailure
from services.detail_service import build_detail_view
from services.filter_service import filter_countries
from utils.formatting import showing_status

logger = logging.getLogger(__name__)

SEARCH_INPUT_ID = "searchInput"
SEARCH_TYPE_ID = "searchType"


class DirectoryController(BaseController):
    """Loads the dataset and wires the search box, field selector, clear control and card clicks."""

    name = "directory"

    def __init__(
        self,
        dataset: Dataset,
        page: PageSurface,
        modal: ModalController,
        client: httpx.AsyncClient,
    ):
        self.dataset = dataset
        self.page = page
        self.modal = modal
        self.client = client
        super().__init__()

    def register(self):
        return {
            "search_input": self.on_search_input,
            "field_change": self.on_field_change,
            "clear_click": self.on_clear,
            "card_click": self.on_card_click,
        }

    async def load(self) -> Dataset | None:
        self.page.set_status("Loading countries...")
        try:
            countries = await country_service.fetch_all(self.client)
        except LoadFailure as e:
            logger.error("Failed to load countries: %s", e)
            self.dataset.clear()
            self.page.set_status("Failed to load countries. Please try again.")
            return None

        self.dataset.publish(countries)
        self.page.render_grid(self.dataset.countries)
        self.page.set_status(showing_status(len(self.dataset)))
        logger.info("Loaded %d countries", len(self.dataset))
        return self.dataset

    def apply_filter(self, text: str, field: str) -> None:
        query = FilterQuery(text=text, field=field)
        # Page inputs change only once the query is known to be valid.
        self.page.search_text = query.text
        self.page.search_field = query.field
        result = filter_countries(self.dataset, query)
        self.page.render_grid(result.countries)
        self.page.set_status(result.status)

    def on_search_input(self, text: str) -> None:
        self.apply_filter(text, self.page.search_field)
        self.page.focused = SEARCH_INPUT_ID

    def on_field_change(self, field: str) -> None:
        self.apply_filter(self.page.search_text, field)
        self.page.focused = SEARCH_TYPE_ID

    def on_clear(self) -> None:
        self.page.search_text = ""
        self.page.render_grid(self.dataset.countries)
        self.page.set_status(showing_status(len(self.dataset)))
        self.page.focused = SEARCH_INPUT_ID

    async def on_card_click(self, card: str) -> None:
        country = self.page.cards.get(card)
        if country is None:
            logger.warning("Click on unknown card %s", card)
            return
        content = await build_detail_view(self.client, country)
        self.modal.open(content)
