"""Virtual keyboard widgets."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button

from keyecho.tui.layouts import key_id


class KeyButton(Button):
    """A single on-screen key. Its symbol is the input it produces."""

    DEFAULT_CSS = """
    KeyButton {
        min-width: 5;
        width: 5;
        margin: 0 1 0 0;
    }

    KeyButton.active {
        background: $warning;
        color: $text;
        text-style: bold;
    }
    """

    def __init__(self, symbol: str) -> None:
        super().__init__(symbol, id=key_id(symbol), classes="key")
        self.symbol = symbol

    def set_active(self, active: bool) -> None:
        """Toggle the playback highlight."""
        self.set_class(active, "active")


class KeyboardLayout(Vertical):
    """
    Rows of KeyButtons.

    Presses are not handled here; KeyButton's Button.Pressed bubbles up
    to the app, which forwards the symbol to the game controller.
    """

    DEFAULT_CSS = """
    KeyboardLayout {
        height: auto;
        align-horizontal: center;
        margin: 1 0 0 0;
    }

    KeyboardLayout > Horizontal {
        height: auto;
        width: auto;
    }
    """

    def __init__(self, rows: list[str], id: str) -> None:
        super().__init__(id=id)
        self._rows = rows

    def compose(self) -> ComposeResult:
        for index, row in enumerate(self._rows):
            with Horizontal(classes=f"keyboard-row row-{index + 1}"):
                for symbol in row:
                    yield KeyButton(symbol)

    @property
    def keys(self) -> list[KeyButton]:
        return list(self.query(KeyButton))
