"""Core game logic: sequence generation, playback and the state machine."""

from .game_controller import GameController
from .playback import OverlayTracker, SequencePlayer
from .sequence import ALPHABETS, alphabet_for, generate_sequence, sequence_length

__all__ = [
    "ALPHABETS",
    "GameController",
    "OverlayTracker",
    "SequencePlayer",
    "alphabet_for",
    "generate_sequence",
    "sequence_length",
]
