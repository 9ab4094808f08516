"""Data models for the keyecho game."""

from .config import AppConfig
from .enums import Difficulty, GamePhase, InputOutcome, OverlayKind, PhysicalKeyPolicy, SoundEvent
from .round_state import MAX_ROUNDS, RoundSnapshot, RoundState

__all__ = [
    # Models
    "AppConfig",
    "RoundSnapshot",
    "RoundState",
    "MAX_ROUNDS",
    # Enums
    "Difficulty",
    "GamePhase",
    "InputOutcome",
    "OverlayKind",
    "PhysicalKeyPolicy",
    "SoundEvent",
]
