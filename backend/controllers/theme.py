import logging

from config import settings
from controllers.base_controller import BaseController
from controllers.page import LIGHT_MODE_CLASS, PageSurface
from models.preferences import ThemePreference
from services.preference_store import PreferenceStore

logger = logging.getLogger(__name__)


class ThemeController(BaseController):
    name = "theme"

    def __init__(self, page: PageSurface, store: PreferenceStore, key: str | None = None):
        self.page = page
        self.store = store
        self.key = key or settings.theme_storage_key
        self.theme = ThemePreference.from_stored(store.get(self.key))
        self._apply()
        super().__init__()

    def register(self):
        return {"toggle_change": self.toggle}

    def _apply(self) -> None:
        if self.theme is ThemePreference.LIGHT:
            self.page.add_class(LIGHT_MODE_CLASS)
        else:
            self.page.remove_class(LIGHT_MODE_CLASS)
        self.page.theme_toggle_checked = self.theme is ThemePreference.DARK

    def toggle(self) -> ThemePreference:
        self.theme = self.theme.toggled()
        self._apply()
        self.store.set(self.key, self.theme.value)
        logger.info("Theme switched to %s", self.theme.value)
        return self.theme
