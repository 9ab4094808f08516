"""Observer protocol for game state changes."""

from typing import Protocol, runtime_checkable

from .events import GameEvent


@runtime_checkable
class GameObserver(Protocol):
    """
    Observer that receives game state machine events.

    Lets the TUI status bar (and tests) follow the game without the
    controller knowing about them.
    """

    def on_game_event(self, event: GameEvent, **kwargs) -> None:
        """
        Handle a game event.

        Args:
            event: The type of game event
            **kwargs: Event payload. Every event carries `phase` and `round_number`;
                      SYMBOL_ACCEPTED and mismatches also carry `symbol`;
                      DIFFICULTY_CHANGED carries `difficulty`.

        Threading:
            Called on the event loop thread. Implementations should be
            lightweight and non-blocking.

        Error Handling:
            Exceptions are caught and logged by the controller's
            ObserverManager; they never interrupt a transition.
        """
        ...
