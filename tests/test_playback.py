"""Tests for sequence playback and overlay timing."""

import asyncio
from unittest.mock import call

import pytest

from keyecho.core import OverlayTracker, SequencePlayer
from keyecho.core.playback import KEY_GAP_SECONDS, KEY_ON_SECONDS, OVERLAY_SECONDS
from keyecho.models import OverlayKind, SoundEvent
from keyecho.protocols import Target


class GatedSleep:
    """Sleep that only returns once the test opens its gate."""

    def __init__(self):
        self.gates: list[asyncio.Event] = []
        self.durations: list[float] = []

    async def __call__(self, seconds: float) -> None:
        gate = asyncio.Event()
        self.gates.append(gate)
        self.durations.append(seconds)
        await gate.wait()


@pytest.mark.unit
@pytest.mark.asyncio
class TestSequencePlayer:
    """Test SequencePlayer.demonstrate."""

    async def test_demonstration_order(self, renderer, sound, sleep, timeline):
        player = SequencePlayer(renderer, sound, sleep)

        await player.demonstrate(("3", "7"))

        assert timeline.mock_calls == [
            call.renderer.set_enabled(Target.NEW_GAME, False),
            call.renderer.set_highlight("3", True),
            call.sound.play(SoundEvent.KEYBOARD),
            call.sleep(KEY_ON_SECONDS),
            call.renderer.set_highlight("3", False),
            call.sleep(KEY_GAP_SECONDS),
            call.renderer.set_highlight("7", True),
            call.sound.play(SoundEvent.KEYBOARD),
            call.sleep(KEY_ON_SECONDS),
            call.renderer.set_highlight("7", False),
            call.sleep(KEY_GAP_SECONDS),
            call.renderer.set_enabled(Target.NEW_GAME, True),
        ]

    async def test_repeated_symbol_is_highlighted_twice(self, renderer, sound, sleep):
        player = SequencePlayer(renderer, sound, sleep)

        await player.demonstrate(("5", "5"))

        assert renderer.set_highlight.call_args_list == [
            call("5", True), call("5", False), call("5", True), call("5", False),
        ]
        assert sound.play.call_count == 2

    async def test_total_playback_time(self, renderer, sound, sleep):
        player = SequencePlayer(renderer, sound, sleep)

        await player.demonstrate(tuple("1234"))

        total = sum(c.args[0] for c in sleep.await_args_list)
        assert total == pytest.approx(4 * (KEY_ON_SECONDS + KEY_GAP_SECONDS))


@pytest.mark.unit
@pytest.mark.asyncio
class TestOverlayTracker:
    """Test OverlayTracker."""

    async def test_flash_shows_then_clears(self, renderer, sleep):
        overlay = OverlayTracker(renderer, sleep)

        task = overlay.flash(OverlayKind.SUCCESS)
        assert overlay.active == OverlayKind.SUCCESS
        renderer.show_overlay.assert_called_once_with(OverlayKind.SUCCESS)

        await task

        assert overlay.active is None
        assert renderer.show_overlay.call_args_list[-1] == call(None)
        sleep.assert_awaited_once_with(OVERLAY_SECONDS)

    async def test_newer_overlay_not_cleared_by_older_timer(self, renderer):
        gated = GatedSleep()
        overlay = OverlayTracker(renderer, gated)

        first = overlay.flash(OverlayKind.FAILURE)
        await asyncio.sleep(0)
        second = overlay.flash(OverlayKind.SUCCESS)
        await asyncio.sleep(0)
        assert overlay.pending == 2

        gated.gates[0].set()
        await first

        assert overlay.active == OverlayKind.SUCCESS
        assert call(None) not in renderer.show_overlay.call_args_list

        gated.gates[1].set()
        await second

        assert overlay.active is None
        assert renderer.show_overlay.call_args_list[-1] == call(None)

    async def test_wait_drains_all_timers(self, renderer, sleep):
        overlay = OverlayTracker(renderer, sleep)
        overlay.flash(OverlayKind.FAILURE)
        overlay.flash(OverlayKind.FAILURE)

        await overlay.wait()

        assert overlay.pending == 0
        assert overlay.active is None

    async def test_custom_duration(self, renderer, sleep):
        overlay = OverlayTracker(renderer, sleep, duration=0.25)

        await overlay.flash(OverlayKind.SUCCESS)

        sleep.assert_awaited_once_with(0.25)


@pytest.mark.unit
def test_flash_requires_running_loop(renderer, sleep):
    overlay = OverlayTracker(renderer, sleep)
    with pytest.raises(RuntimeError):
        overlay.flash(OverlayKind.SUCCESS)
