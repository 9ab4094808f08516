"""Textual front end for the keyecho memory game."""

import asyncio
import logging
import random
from pathlib import Path
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Static

from keyecho.core import GameController
from keyecho.core.playback import SleepFn
from keyecho.models import AppConfig, Difficulty, InputOutcome
from keyecho.protocols import SoundPlayer

from .decorators import handle_action_errors
from .layouts import DIGIT_ROWS, LETTER_ROWS
from .renderer import TUIRenderer
from .services import TUIService
from .widgets import DifficultyBar, KeyButton, KeyboardLayout, StatusBar

logger = logging.getLogger(__name__)


class KeyEchoApp(App):
    """
    Terminal UI for keyecho.

    A thin presentation layer: the GameController owns all game state and
    drives the widgets through TUIRenderer. This class only wires Textual
    events to controller entry points.

    Playback (start / repeat) runs as a worker so the UI keeps rendering
    the highlights while the controller sleeps between keys.
    """

    TITLE = "keyecho"

    CSS = """
    Screen {
        align-horizontal: center;
    }

    #board {
        width: 100%;
        height: auto;
        align-horizontal: center;
    }

    #round {
        width: 100%;
        content-align: center middle;
        text-style: bold;
        margin: 1 0 0 0;
    }

    #field {
        width: 60;
        height: 3;
        border: round $primary;
        content-align: center middle;
        text-style: bold;
    }

    #message {
        width: 100%;
        height: 1;
        content-align: center middle;
    }

    #field.success, #message.success {
        color: $success;
        border: round $success;
    }

    #field.failure, #message.failure {
        color: $error;
        border: round $error;
    }

    #message.success, #message.failure {
        border: none;
    }

    #options {
        height: auto;
        align-horizontal: center;
        margin: 1 0;
    }

    #options > Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+n", "new_game", "New Game", show=True),
        Binding("ctrl+s", "start_round", "Start/Next", show=True),
        Binding("ctrl+r", "repeat", "Repeat", show=True),
        Binding("ctrl+d", "save_difficulty", "Save Level", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        config: AppConfig,
        sound: SoundPlayer,
        config_path: Optional[Path] = None,
        rng: Optional[random.Random] = None,
        sleep: SleepFn = asyncio.sleep,
    ):
        """
        Initialize the Textual UI application.

        Args:
            config: Application settings (game settings are read once here)
            sound: Sound collaborator handed to the controller
            config_path: Settings file used by "save level" (None for the default)
            rng: Random source for sequences
            sleep: Awaitable sleep used for playback and overlays
        """
        super().__init__()
        self.config = config
        self.config_path = config_path
        self.sound = sound

        self.tui_renderer = TUIRenderer(self)
        self.controller = GameController.from_config(
            config, self.tui_renderer, sound, rng=rng, sleep=sleep
        )
        self.tui_service = TUIService(self)
        self.controller.register_observer(self.tui_service)
        logger.info("KeyEchoApp created")

    def compose(self) -> ComposeResult:
        """Create the main layout."""
        yield Header()
        yield DifficultyBar()

        with Vertical(id="board"):
            yield Static("Round: 1", id="round")
            yield Static("", id="field")
            yield Static("", id="message")
            yield KeyboardLayout(DIGIT_ROWS, id="digit-keys")
            yield KeyboardLayout(LETTER_ROWS, id="letter-keys")

        with Horizontal(id="options"):
            yield Button("New Game", id="new", variant="warning")
            yield Button("start", id="start", variant="primary")
            yield Button("Repeat", id="repeat")

        yield StatusBar(sound_enabled=self.config.sound_enabled)
        yield Footer()

    def on_mount(self) -> None:
        """Render the initial screen once the widgets exist."""
        self.controller.present()
        logger.info("TUI mounted")

    def on_unmount(self) -> None:
        logger.info("TUI unmounted")

    # =================================================================
    # Input
    # =================================================================

    def on_key(self, event: events.Key) -> None:
        """Forward typed characters to the controller."""
        if not event.character or len(event.character) != 1:
            return

        outcome = self.controller.on_physical_key(event.character)
        if outcome != InputOutcome.IGNORED:
            event.stop()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Route button presses by widget ID."""
        button = event.button
        button_id = button.id

        if not button_id:
            return

        if isinstance(button, KeyButton):
            self.controller.on_control_activated(button.symbol)
        elif button_id.startswith("difficulty-"):
            self.controller.select_difficulty(Difficulty(button_id.removeprefix("difficulty-")))
        elif button_id == "start":
            self.action_start_round()
        elif button_id == "repeat":
            self.action_repeat()
        elif button_id == "new":
            self.action_new_game()

    # =================================================================
    # Actions
    # =================================================================

    def action_start_round(self) -> None:
        """Start (or advance to) the next round."""
        self.run_worker(self.controller.start_round(), group="playback")

    def action_repeat(self) -> None:
        """Replay the current sequence."""
        self.run_worker(self.controller.repeat_sequence(), group="playback")

    def action_new_game(self) -> None:
        self.controller.new_game()

    @handle_action_errors("save difficulty")
    def action_save_difficulty(self) -> None:
        """Store the selected difficulty as the default for future sessions."""
        # self.config carries command line overrides; only the level is persisted
        stored = AppConfig.load_or_default(self.config_path)
        stored.default_difficulty = self.controller.difficulty
        stored.save(self.config_path)
        self.notify(f"Default level set to {self.controller.difficulty.value}")
