"""Status bar showing difficulty, round, phase and sound state."""

from textual.widgets import Static

from keyecho.models import Difficulty, GamePhase

PHASE_LABELS: dict[GamePhase, str] = {
    GamePhase.IDLE: "⏸ READY",
    GamePhase.DEMONSTRATING: "👀 WATCH",
    GamePhase.AWAITING_INPUT: "⌨ YOUR TURN",
    GamePhase.ROUND_WON: "✔ ROUND WON",
    GamePhase.GAME_WON: "★ GAME WON",
}


class StatusBar(Static):
    """Single-line summary of the game state."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $panel;
        color: $text;
        padding: 0 1;
    }

    StatusBar.input_phase {
        background: $success;
    }

    StatusBar.watch_phase {
        background: $warning;
    }
    """

    def __init__(self, sound_enabled: bool = True) -> None:
        super().__init__()
        self._difficulty = Difficulty.EASY
        self._phase = GamePhase.IDLE
        self._round = 1
        self._sound_enabled = sound_enabled
        self._update_display()

    @property
    def summary(self) -> str:
        """The plain text currently displayed."""
        return self._compose_text()

    def update_state(self, difficulty: Difficulty, phase: GamePhase, round_number: int) -> None:
        self._difficulty = difficulty
        self._phase = phase
        self._round = round_number
        self._update_display()

    def _compose_text(self) -> str:
        parts = [
            PHASE_LABELS[self._phase],
            f"Level: {self._difficulty.value.title()}",
            f"Round {self._round}",
            "🔊 Sound" if self._sound_enabled else "🔇 Muted",
        ]
        return " | ".join(parts)

    def _update_display(self) -> None:
        self.set_class(self._phase == GamePhase.AWAITING_INPUT, "input_phase")
        self.set_class(self._phase == GamePhase.DEMONSTRATING, "watch_phase")
        self.update(self._compose_text())
