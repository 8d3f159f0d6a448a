import httpx

from controllers.directory import DirectoryController
from controllers.hover_preview import FlagOverlay, HoverPreviewController
from controllers.modal import ModalController
from controllers.page import PageSurface
from controllers.theme import ThemeController
from services.country_service import Dataset
from services.preference_store import PreferenceStore
from utils.http_client import get_client


class AppContext:
    """Owns the process-wide singletons and the controllers that share them."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        store: PreferenceStore | None = None,
        hover_delay_ms: int | None = None,
    ):
        self.client = client or get_client()
        self.store = store or PreferenceStore()
        self.dataset = Dataset()
        self.page = PageSurface()
        self.overlay = FlagOverlay()

        self.modal = ModalController(self.page)
        self.directory = DirectoryController(self.dataset, self.page, self.modal, self.client)
        self.hover = HoverPreviewController(self.overlay, lambda: self.page.cards, hover_delay_ms)
        self.page.render_listeners.append(self.hover.retain)
        self.theme = ThemeController(self.page, self.store)

        self.controllers = {
            c.name: c for c in (self.directory, self.hover, self.modal, self.theme)
        }

    def snapshot(self) -> dict:
        return {
            **self.page.snapshot(),
            "modal": self.modal.snapshot(),
            "overlay": self.overlay.snapshot(),
        }
