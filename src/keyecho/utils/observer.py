"""Observer list used by the game controller to publish GameEvents."""

import logging
import threading
from typing import Any

logger = logging.getLogger(__name__)


class ObserverManager[T: object]:
    """
    Ordered set of observers with fault-isolated fan-out.

    Observers are called in registration order. A failing observer is
    logged and skipped, so the status bar (or a test spy) can never break a
    game transition. The list is guarded by a lock and snapshotted before
    each fan-out, which lets an observer unregister itself from inside its
    callback.

    Example:
        ```python
        observers = ObserverManager[GameObserver](observer_type_name="game")
        observers.register(tui_service)
        observers.notify("on_game_event", GameEvent.ROUND_WON, round_number=2)
        ```
    """

    def __init__(self, observer_type_name: str = "observer"):
        self._kind = observer_type_name
        self._items: list[T] = []
        self._guard = threading.Lock()

    def register(self, observer: T) -> None:
        """Add `observer`; registering twice has no effect."""
        with self._guard:
            if observer in self._items:
                return
            self._items.append(observer)
        logger.debug(f"{self._kind} observer added: {observer!r}")

    def unregister(self, observer: T) -> None:
        with self._guard:
            try:
                self._items.remove(observer)
            except ValueError:
                logger.warning(f"{self._kind} observer was not registered: {observer!r}")
                return
        logger.debug(f"{self._kind} observer removed: {observer!r}")

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """Invoke `callback_name(*args, **kwargs)` on each observer."""
        with self._guard:
            snapshot = tuple(self._items)

        for observer in snapshot:
            callback = getattr(observer, callback_name, None)
            if callback is None:
                logger.error(f"{self._kind} observer {observer!r} has no method '{callback_name}'")
                continue
            try:
                callback(*args, **kwargs)
            except Exception:
                logger.exception(f"{self._kind} observer {observer!r} raised in {callback_name}")

    def clear(self) -> None:
        with self._guard:
            self._items.clear()

    def __contains__(self, observer: object) -> bool:
        with self._guard:
            return observer in self._items

    def __len__(self) -> int:
        with self._guard:
            return len(self._items)
