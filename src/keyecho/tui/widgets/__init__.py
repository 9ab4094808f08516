"""Reusable UI widgets for the TUI."""

from .difficulty_bar import DifficultyBar, difficulty_button_id
from .keyboard import KeyButton, KeyboardLayout
from .status_bar import StatusBar

__all__ = [
    "DifficultyBar",
    "KeyButton",
    "KeyboardLayout",
    "StatusBar",
    "difficulty_button_id",
]
