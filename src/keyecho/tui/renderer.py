"""Renderer implementation over the Textual widget tree."""

import logging
from typing import TYPE_CHECKING, Optional

from textual.css.query import NoMatches
from textual.widget import Widget
from textual.widgets import Button, Static

from keyecho.models import Difficulty, OverlayKind
from keyecho.protocols import Target

from .layouts import key_id
from .widgets import DifficultyBar, KeyboardLayout, KeyButton

if TYPE_CHECKING:
    from keyecho.tui.app import KeyEchoApp

logger = logging.getLogger(__name__)

# Widget IDs of the single-widget targets
WIDGET_IDS: dict[Target, str] = {
    Target.ROUND: "round",
    Target.FIELD: "field",
    Target.MESSAGE: "message",
    Target.START: "start",
    Target.REPEAT: "repeat",
    Target.NEW_GAME: "new",
    Target.DIGIT_KEYS: "digit-keys",
    Target.LETTER_KEYS: "letter-keys",
}

# Widgets that carry the success/failure overlay classes
OVERLAY_IDS = ("field", "message")


class TUIRenderer:
    """
    Translates controller commands into widget updates.

    Implements the Renderer protocol structurally. KEYBOARD and DIFFICULTY
    address groups of widgets; every other target maps to one widget ID.
    """

    def __init__(self, app: "KeyEchoApp"):
        self.app = app

    def set_text(self, target: Target, text: str) -> None:
        widget = self._widget(target)
        if isinstance(widget, Button):
            widget.label = text
        elif isinstance(widget, Static):
            widget.update(text)
        else:
            logger.warning(f"Target {target.value} does not hold text")

    def set_visible(self, target: Target, visible: bool) -> None:
        self._widget(target).display = visible

    def set_enabled(self, target: Target, enabled: bool) -> None:
        if target == Target.KEYBOARD:
            for layout in self.app.query(KeyboardLayout):
                for key in layout.keys:
                    key.disabled = not enabled
        elif target == Target.DIFFICULTY:
            self.app.query_one(DifficultyBar).set_locked(not enabled)
        else:
            self._widget(target).disabled = not enabled

    def set_highlight(self, symbol: str, on: bool) -> None:
        try:
            key = self.app.query_one(f"#{key_id(symbol)}", KeyButton)
        except NoMatches:
            logger.warning(f"No key for symbol {symbol!r}")
            return
        key.set_active(on)

    def show_overlay(self, kind: Optional[OverlayKind]) -> None:
        for widget_id in OVERLAY_IDS:
            widget = self.app.query_one(f"#{widget_id}")
            for overlay in OverlayKind:
                widget.set_class(overlay == kind, overlay.value)

    def mark_difficulty(self, difficulty: Difficulty) -> None:
        self.app.query_one(DifficultyBar).mark(difficulty)

    def _widget(self, target: Target) -> Widget:
        return self.app.query_one(f"#{WIDGET_IDS[target]}")
