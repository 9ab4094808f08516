"""Difficulty selector."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Static

from keyecho.models import Difficulty


def difficulty_button_id(difficulty: Difficulty) -> str:
    return f"difficulty-{difficulty.value}"


class DifficultyBar(Horizontal):
    """
    One button per difficulty tier.

    The selected tier carries the `selected` class. While a game is in
    progress the whole bar is locked (buttons disabled).
    """

    DEFAULT_CSS = """
    DifficultyBar {
        height: auto;
        align-horizontal: center;
        padding: 1 0 0 0;
    }

    DifficultyBar > Static {
        width: auto;
        padding: 1 2 0 0;
        text-style: bold;
    }

    DifficultyBar > Button.selected {
        background: $accent;
        text-style: bold;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("DIFFICULTY LEVEL")
        for difficulty in Difficulty:
            yield Button(difficulty.value.title(), id=difficulty_button_id(difficulty))

    def mark(self, difficulty: Difficulty) -> None:
        """Highlight the selected tier."""
        for tier in Difficulty:
            button = self.query_one(f"#{difficulty_button_id(tier)}", Button)
            button.set_class(tier == difficulty, "selected")

    def set_locked(self, locked: bool) -> None:
        """Disable (or re-enable) every tier button."""
        for button in self.query(Button):
            button.disabled = locked
