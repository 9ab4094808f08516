"""Smoke tests for the TUI using Textual's test framework.

These tests verify that the TUI can launch, render, and drive a round
through the real widgets without crashing. Sound is a mock and every
sleep is instant.
"""

import random
from unittest.mock import AsyncMock, Mock

import pytest
from textual.widgets import Button

from keyecho.models import AppConfig, Difficulty, GamePhase, SoundEvent
from keyecho.protocols import SoundPlayer
from keyecho.tui import KeyEchoApp
from keyecho.tui.widgets import DifficultyBar, KeyboardLayout, KeyButton, StatusBar


@pytest.fixture
def app():
    """App with instant timing and a mocked sound player."""
    return KeyEchoApp(
        config=AppConfig(sound_enabled=False),
        sound=Mock(spec=SoundPlayer),
        rng=random.Random(99),
        sleep=AsyncMock(),
    )


async def start_round(app, pilot) -> None:
    app.action_start_round()
    await app.workers.wait_for_complete()
    await pilot.pause()


@pytest.mark.integration
@pytest.mark.asyncio
class TestTUILaunch:
    """Test that the TUI launches and renders the idle screen."""

    async def test_mounts_widgets(self, app):
        async with app.run_test(size=(120, 50)) as pilot:
            await pilot.pause()

            assert app.query_one(DifficultyBar) is not None
            assert app.query_one(StatusBar) is not None
            assert len(app.query(KeyButton)) == 36
            assert app.controller.phase == GamePhase.IDLE

    async def test_idle_screen(self, app):
        async with app.run_test(size=(120, 50)) as pilot:
            await pilot.pause()

            assert app.query_one("#digit-keys").display
            assert not app.query_one("#letter-keys").display
            assert not app.query_one("#repeat").display
            assert not app.query_one("#new").display
            assert all(key.disabled for key in app.query(KeyButton))
            assert app.query_one("#difficulty-easy").has_class("selected")

    async def test_keyboard_layouts(self, app):
        async with app.run_test(size=(120, 50)) as pilot:
            await pilot.pause()

            digits = app.query_one("#digit-keys", KeyboardLayout)
            letters = app.query_one("#letter-keys", KeyboardLayout)

            assert [key.symbol for key in digits.keys] == list("1234567890")
            assert len(letters.keys) == 26
            assert all(key.disabled for key in digits.keys + letters.keys)

    async def test_difficulty_button(self, app):
        async with app.run_test(size=(120, 50)) as pilot:
            app.query_one("#difficulty-hard", Button).press()
            await pilot.pause()

            assert app.controller.difficulty == Difficulty.HARD
            assert app.query_one("#digit-keys").display
            assert app.query_one("#letter-keys").display
            assert app.query_one("#difficulty-hard").has_class("selected")
            assert not app.query_one("#difficulty-easy").has_class("selected")


@pytest.mark.integration
@pytest.mark.asyncio
class TestTUIRound:
    """Test playing a round through the widgets."""

    async def test_start_enables_keyboard(self, app):
        async with app.run_test(size=(120, 50)) as pilot:
            await start_round(app, pilot)

            assert app.controller.phase == GamePhase.AWAITING_INPUT
            assert not any(key.disabled for key in app.query(KeyButton))
            assert not any(key.has_class("active") for key in app.query(KeyButton))
            assert app.query_one(DifficultyBar).query(Button).first().disabled
            assert "YOUR TURN" in app.query_one(StatusBar).summary

    async def test_typed_keys_win_round(self, app):
        async with app.run_test(size=(120, 50)) as pilot:
            await start_round(app, pilot)

            await pilot.press(*[s.lower() for s in app.controller.state.sequence])
            await pilot.pause()

            assert app.controller.phase == GamePhase.ROUND_WON
            assert app.controller.current_round == 2
            assert str(app.query_one("#start", Button).label) == "next"
            app.sound.play.assert_any_call(SoundEvent.WIN_ROUND)

    async def test_onscreen_keys(self, app):
        async with app.run_test(size=(120, 50)) as pilot:
            await start_round(app, pilot)
            first = app.controller.state.sequence[0]

            app.query_one(f"#key-{first}", KeyButton).press()
            await pilot.pause()

            assert app.controller.state.cursor == 1

    async def test_wrong_key_shows_failure(self, app):
        async with app.run_test(size=(120, 50)) as pilot:
            await start_round(app, pilot)
            expected = app.controller.state.sequence[0]
            wrong = next(s for s in "1234567890" if s != expected)

            await pilot.press(wrong)
            await pilot.pause()

            assert app.controller.state.error_budget == 0
            app.sound.play.assert_any_call(SoundEvent.ERROR)

    async def test_new_game_binding(self, app):
        async with app.run_test(size=(120, 50)) as pilot:
            await start_round(app, pilot)

            await pilot.press("ctrl+n")
            await pilot.pause()

            assert app.controller.phase == GamePhase.IDLE
            assert app.query_one("#start").display

    async def test_repeat_button(self, app):
        async with app.run_test(size=(120, 50)) as pilot:
            await start_round(app, pilot)

            app.query_one("#repeat", Button).press()
            await app.workers.wait_for_complete()
            await pilot.pause()

            assert app.controller.state.repeats_used == 1
            assert app.query_one("#repeat", Button).disabled


@pytest.mark.integration
@pytest.mark.asyncio
async def test_save_difficulty(tmp_path):
    config_path = tmp_path / "config.json"
    app = KeyEchoApp(
        config=AppConfig(sound_enabled=False),
        sound=Mock(spec=SoundPlayer),
        config_path=config_path,
        sleep=AsyncMock(),
    )

    async with app.run_test(size=(120, 50)) as pilot:
        app.controller.select_difficulty(Difficulty.MEDIUM)
        app.action_save_difficulty()
        await pilot.pause()

    assert AppConfig.load_or_default(config_path).default_difficulty == Difficulty.MEDIUM


@pytest.mark.integration
@pytest.mark.asyncio
async def test_save_difficulty_keeps_session_overrides_off_disk(tmp_path):
    config_path = tmp_path / "config.json"
    AppConfig(sound_enabled=True).save(config_path)

    # Same shape as `keyecho --mute --sounds-dir ...`
    session = AppConfig.load_or_default(config_path).model_copy(
        update={"sound_enabled": False, "sounds_dir": tmp_path}
    )
    app = KeyEchoApp(
        config=session,
        sound=Mock(spec=SoundPlayer),
        config_path=config_path,
        sleep=AsyncMock(),
    )

    async with app.run_test(size=(120, 50)) as pilot:
        app.controller.select_difficulty(Difficulty.HARD)
        await pilot.press("ctrl+d")
        await pilot.pause()

    stored = AppConfig.load_or_default(config_path)
    assert stored.default_difficulty == Difficulty.HARD
    assert stored.sound_enabled is True
    assert stored.sounds_dir is None
