"""Enumerations for the keyecho game."""

from enum import Enum


class Difficulty(str, Enum):
    """Difficulty tiers (alphabet and visible keyboard layout)."""

    EASY = "easy"  # Digits only
    MEDIUM = "medium"  # Letters only
    HARD = "hard"  # Digits and letters


class GamePhase(str, Enum):
    """Phases of the game state machine."""

    IDLE = "idle"  # Before the first round or after a full reset
    DEMONSTRATING = "demonstrating"  # Sequence playback, all input suppressed
    AWAITING_INPUT = "awaiting_input"  # Keyboard active, reading player symbols
    ROUND_WON = "round_won"  # Round complete, waiting for "next"
    GAME_WON = "game_won"  # Final round complete


class InputOutcome(str, Enum):
    """Result of feeding one symbol to the controller."""

    IGNORED = "ignored"  # Keyboard disabled or key filtered out
    ACCEPTED = "accepted"  # Correct symbol, sequence not finished yet
    ROUND_WON = "round_won"
    GAME_WON = "game_won"
    MISMATCH_FIRST_OFFENSE = "mismatch_first_offense"  # Budget spent, round continues
    MISMATCH_FATAL = "mismatch_fatal"  # Budget exhausted, full reset


class PhysicalKeyPolicy(str, Enum):
    """Which difficulties accept typed (physical) keys."""

    PER_DIFFICULTY = "per_difficulty"  # Every tier, filtered by its own alphabet
    HARD_ONLY = "hard_only"  # Typing only accepted on Hard


class SoundEvent(str, Enum):
    """Named sound cues."""

    KEYBOARD = "keyboard"
    WIN = "win"
    WIN_ROUND = "win-round"
    ERROR = "error"
    FAIL = "fail"


class OverlayKind(str, Enum):
    """Timed success/failure overlay shown after a result."""

    SUCCESS = "success"
    FAILURE = "failure"
