"""Timed presentation: sequence playback and success/failure overlays.

Both run on the asyncio event loop and suspend only on the injected sleep
function, which tests replace with an instant fake.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Optional

from keyecho.models import OverlayKind, SoundEvent
from keyecho.protocols import Renderer, SoundPlayer, Target

logger = logging.getLogger(__name__)

SleepFn = Callable[[float], Awaitable[None]]

# Fixed timings (seconds)
LEAD_IN_SECONDS = 1.0  # Pause between pressing start and the first key
KEY_ON_SECONDS = 0.5  # How long each key stays highlighted
KEY_GAP_SECONDS = 0.5  # Dark gap before the next key
OVERLAY_SECONDS = 3.0  # Success/failure overlay duration


class SequencePlayer:
    """
    Plays a sequence back to the player, one key at a time.

    Strictly sequential: each key is highlighted, its sound played, the
    highlight cleared, and a gap waited before the next key starts. The
    new-game control is disabled for the whole playback.

    Mutual exclusion with input and with a second playback is enforced by
    the controller's phase, not here.
    """

    def __init__(self, renderer: Renderer, sound: SoundPlayer, sleep: SleepFn = asyncio.sleep):
        self._renderer = renderer
        self._sound = sound
        self._sleep = sleep

    async def demonstrate(self, sequence: Iterable[str]) -> None:
        """Highlight every symbol of `sequence` in order; returns when done."""
        self._renderer.set_enabled(Target.NEW_GAME, False)

        for symbol in sequence:
            self._renderer.set_highlight(symbol, True)
            self._sound.play(SoundEvent.KEYBOARD)
            await self._sleep(KEY_ON_SECONDS)
            self._renderer.set_highlight(symbol, False)
            await self._sleep(KEY_GAP_SECONDS)

        self._renderer.set_enabled(Target.NEW_GAME, True)


class OverlayTracker:
    """
    Tracks the timed success/failure overlay as asyncio tasks.

    Callers fire an overlay and move on. Each overlay runs to completion;
    when a newer overlay was started in the meantime, the older one finishes
    without clearing it.
    """

    def __init__(
        self,
        renderer: Renderer,
        sleep: SleepFn = asyncio.sleep,
        duration: float = OVERLAY_SECONDS,
    ):
        self._renderer = renderer
        self._sleep = sleep
        self._duration = duration
        self._generation = 0
        self._active: Optional[OverlayKind] = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def active(self) -> Optional[OverlayKind]:
        """The overlay currently shown, if any."""
        return self._active

    @property
    def pending(self) -> int:
        """Number of overlay timers still running."""
        return len(self._tasks)

    def flash(self, kind: OverlayKind) -> asyncio.Task:
        """
        Show `kind` now and schedule its removal.

        Must be called from a running event loop.

        Returns:
            The task that clears the overlay once its duration has elapsed
        """
        self._generation += 1
        self._active = kind
        self._renderer.show_overlay(kind)

        task = asyncio.get_running_loop().create_task(self._expire(self._generation))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        logger.debug(f"Overlay {kind.value} shown for {self._duration}s")
        return task

    async def wait(self) -> None:
        """Wait until every scheduled overlay has expired."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def _expire(self, generation: int) -> None:
        await self._sleep(self._duration)
        if generation == self._generation:
            self._active = None
            self._renderer.show_overlay(None)
