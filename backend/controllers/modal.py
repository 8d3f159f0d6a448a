import logging

from controllers.base_controller import BaseController
from controllers.page import MODAL_OPEN_CLASS, PageSurface

logger = logging.getLogger(__name__)

ESCAPE_KEY = "Escape"


class Modal:
    """The single detail overlay. Content is replaced on every open."""

    def __init__(self):
        self.content = ""
        self.is_open = False


class ModalController(BaseController):
    name = "modal"

    def __init__(self, page: PageSurface):
        self.page = page
        self.modal: Modal | None = None
        super().__init__()

    def register(self):
        return {
            "close_click": self.close,
            "backdrop_click": self.on_backdrop_click,
            "keydown": self.on_keydown,
        }

    @property
    def is_open(self) -> bool:
        return self.modal is not None and self.modal.is_open

    def _ensure_modal(self) -> Modal:
        if self.modal is None:
            self.modal = Modal()
            logger.debug("Modal constructed")
        return self.modal

    def open(self, content: str) -> None:
        modal = self._ensure_modal()
        modal.content = content
        modal.is_open = True
        self.page.add_class(MODAL_OPEN_CLASS)

    def close(self) -> None:
        if self.modal is None:
            return
        self.modal.is_open = False
        self.page.remove_class(MODAL_OPEN_CLASS)

    def on_backdrop_click(self, target: str = "backdrop") -> None:
        # Clicks inside the content panel bubble up with target="panel".
        if target == "backdrop":
            self.close()

    def on_keydown(self, key: str) -> None:
        if self.is_open and key == ESCAPE_KEY:
            self.close()

    def snapshot(self) -> dict | None:
        if self.modal is None:
            return None
        return {"is_open": self.modal.is_open, "content": self.modal.content}
