"""Service for keeping the status bar in sync with the game."""

import logging
from typing import TYPE_CHECKING

from keyecho.models import GamePhase
from keyecho.protocols import GameEvent, GameObserver
from keyecho.tui.widgets import StatusBar

if TYPE_CHECKING:
    from keyecho.tui.app import KeyEchoApp

logger = logging.getLogger(__name__)


class TUIService(GameObserver):
    """
    Observes the game controller and updates the status bar and sub-title.

    Widget updates done directly by the controller go through the
    TUIRenderer; this service only handles the summary views that the
    controller knows nothing about.
    """

    def __init__(self, app: "KeyEchoApp"):
        """
        Initialize the TUI service.

        Args:
            app: The KeyEchoApp instance
        """
        self.app = app
        logger.info("TUIService initialized")

    def on_game_event(self, event: GameEvent, **kwargs) -> None:
        """
        Handle game state machine events.

        Args:
            event: The type of game event
            **kwargs: Event data; always includes `phase` and `round_number`
        """
        try:
            phase: GamePhase = kwargs["phase"]
            round_number: int = kwargs["round_number"]
            self._update_status_bar(phase, round_number)

            if event == GameEvent.GAME_WON:
                self.app.notify("All rounds complete!", title="Game won")
            elif event == GameEvent.MISMATCH_FATAL:
                self.app.notify("Back to round 1", severity="warning")

        except Exception as e:
            logger.error(f"Error handling game event {event}: {e}")

    def _update_status_bar(self, phase: GamePhase, round_number: int) -> None:
        status = self.app.query_one(StatusBar)
        status.update_state(self.app.controller.difficulty, phase, round_number)
        self.app.sub_title = f"{self.app.controller.difficulty.value.title()} - Round {round_number}"
