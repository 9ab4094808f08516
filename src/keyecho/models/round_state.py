"""Round state for the game controller.

RoundState is a plain dataclass rather than a Pydantic model: it is
mutated on every keypress and never serialized. The controller owns the
only live instance; everything else sees RoundSnapshot copies.
"""

from dataclasses import dataclass, field
from typing import Optional

from .enums import Difficulty

MAX_ROUNDS = 5
ERROR_BUDGET = 1


@dataclass(frozen=True, slots=True)
class RoundSnapshot:
    """Immutable copy of the round state at one point in time."""

    current_round: int
    max_rounds: int
    sequence: tuple[str, ...]
    user_progress: tuple[str, ...]
    error_budget: int
    difficulty: Difficulty
    repeats_used: int
    game_won: bool

    @property
    def cursor(self) -> int:
        """Index of the next expected symbol."""
        return len(self.user_progress)


@dataclass(slots=True)
class RoundState:
    """
    Mutable game state: round number, target sequence and player progress.

    Invariants:
    - len(user_progress) <= len(sequence)
    - user_progress is always a prefix of sequence (mismatches are never stored)
    """

    difficulty: Difficulty = Difficulty.EASY
    current_round: int = 1
    max_rounds: int = MAX_ROUNDS
    sequence: tuple[str, ...] = ()
    user_progress: list[str] = field(default_factory=list)
    error_budget: int = ERROR_BUDGET
    repeats_used: int = 0
    game_won: bool = False

    @property
    def cursor(self) -> int:
        """Index of the next expected symbol."""
        return len(self.user_progress)

    @property
    def expected_symbol(self) -> Optional[str]:
        """The symbol the player must enter next, or None once complete."""
        if self.cursor < len(self.sequence):
            return self.sequence[self.cursor]
        return None

    @property
    def is_complete(self) -> bool:
        """True once the whole sequence has been reproduced."""
        return bool(self.sequence) and self.cursor == len(self.sequence)

    @property
    def is_final_round(self) -> bool:
        return self.current_round >= self.max_rounds

    def begin_round(self, sequence: tuple[str, ...]) -> None:
        """Install a freshly generated sequence and refill the error budget."""
        self.sequence = tuple(sequence)
        self.user_progress.clear()
        self.error_budget = ERROR_BUDGET
        self.repeats_used = 0

    def rewind(self) -> None:
        """Clear player progress so the same sequence can be entered again."""
        self.user_progress.clear()

    def accept(self, symbol: str) -> None:
        """
        Record a correct symbol.

        Raises:
            ValueError: If the symbol does not match the expected one
        """
        if symbol != self.expected_symbol:
            raise ValueError(
                f"Symbol {symbol!r} does not match expected {self.expected_symbol!r}"
            )
        self.user_progress.append(symbol)

    def reset(self) -> None:
        """Go back to round 1 (difficulty is kept)."""
        self.current_round = 1
        self.sequence = ()
        self.user_progress.clear()
        self.error_budget = ERROR_BUDGET
        self.repeats_used = 0
        self.game_won = False

    def snapshot(self) -> RoundSnapshot:
        """Return an immutable copy safe to hand to callers."""
        return RoundSnapshot(
            current_round=self.current_round,
            max_rounds=self.max_rounds,
            sequence=self.sequence,
            user_progress=tuple(self.user_progress),
            error_budget=self.error_budget,
            difficulty=self.difficulty,
            repeats_used=self.repeats_used,
            game_won=self.game_won,
        )
