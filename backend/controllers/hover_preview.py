"""Sustained-hover flag preview.

Each card gets its own small state machine (idle -> pending -> showing) and
all cards share one full-screen overlay, so at most one preview is visible.
Leaving a card always hides the overlay, whatever state the card was in.
"""

import asyncio
import logging
from collections.abc import Callable
from enum import Enum

from config import settings
from controllers.base_controller import BaseController
from models.country import CountrySummary

logger = logging.getLogger(__name__)


class HoverState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SHOWING = "showing"


class FlagOverlay:
    def __init__(self):
        self.background_image = ""
        self.active = False
        self.owner: str | None = None

    def show(self, url: str, owner: str) -> None:
        self.background_image = url
        self.active = True
        self.owner = owner
        logger.debug("show flag overlay: %s", url)

    def hide(self) -> None:
        self.active = False
        self.owner = None

    def snapshot(self) -> dict:
        return {"active": self.active, "background_image": self.background_image}


class HoverSession:
    def __init__(self, preview_url: str):
        self.preview_url = preview_url
        self.state = HoverState.IDLE
        self.timer: asyncio.TimerHandle | None = None

    def cancel(self) -> None:
        if self.timer is not None:
            self.timer.cancel()
            self.timer = None
        self.state = HoverState.IDLE


class HoverPreviewController(BaseController):
    name = "hover"

    def __init__(
        self,
        overlay: FlagOverlay,
        cards: Callable[[], dict[str, CountrySummary]],
        delay_ms: int | None = None,
    ):
        self.overlay = overlay
        self._cards = cards
        self.delay_ms = settings.hover_preview_delay_ms if delay_ms is None else delay_ms
        self.sessions: dict[str, HoverSession] = {}
        super().__init__()

    def register(self):
        return {
            "mouseenter": self.start,
            "focus": self.start,
            "mouseleave": self.end,
            "blur": self.end,
        }

    def state_of(self, card: str) -> HoverState:
        session = self.sessions.get(card)
        return session.state if session else HoverState.IDLE

    def start(self, card: str) -> None:
        country = self._cards().get(card)
        url = country.flag_image_url if country else ""
        if not url:
            return

        session = self.sessions.get(card)
        if session is None:
            session = self.sessions[card] = HoverSession(url)
        session.cancel()
        session.preview_url = url

        loop = asyncio.get_running_loop()
        session.timer = loop.call_later(self.delay_ms / 1000, self._elapsed, card)
        session.state = HoverState.PENDING

    def end(self, card: str) -> None:
        session = self.sessions.pop(card, None)
        if session is not None:
            session.cancel()
        self.overlay.hide()

    def _elapsed(self, card: str) -> None:
        session = self.sessions.get(card)
        if session is None or session.state is not HoverState.PENDING:
            return
        session.timer = None

        previous = self.overlay.owner
        if previous and previous != card and previous in self.sessions:
            self.sessions[previous].state = HoverState.IDLE

        self.overlay.show(session.preview_url, owner=card)
        session.state = HoverState.SHOWING

    def retain(self, cards: dict[str, CountrySummary]) -> None:
        """Drop sessions for cards that are no longer rendered."""
        for card in [c for c in self.sessions if c not in cards]:
            self.sessions.pop(card).cancel()
            if self.overlay.owner == card:
                self.overlay.hide()
