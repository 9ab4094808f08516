"""Protocols for the collaborators the game controller drives.

The controller never touches widgets or audio devices directly. It issues
commands through these two protocols, which the Textual UI and the
sounddevice player implement (and tests replace with mocks).
"""

from enum import Enum
from typing import Optional, Protocol, runtime_checkable

from keyecho.models import Difficulty, OverlayKind, SoundEvent


class Target(str, Enum):
    """Addressable parts of the game screen."""

    ROUND = "round"              # "Round: N" label
    FIELD = "field"              # Player progress so far
    MESSAGE = "message"          # Result / error message line
    START = "start"              # Start / next button
    REPEAT = "repeat"            # Repeat-the-sequence button
    NEW_GAME = "new"             # New game button
    KEYBOARD = "keyboard"        # All on-screen keys
    DIFFICULTY = "difficulty"    # Difficulty selector
    DIGIT_KEYS = "digit_keys"    # Digit keyboard layout
    LETTER_KEYS = "letter_keys"  # Letter keyboard layout


@runtime_checkable
class Renderer(Protocol):
    """Presentation commands issued by the game controller."""

    def set_text(self, target: Target, text: str) -> None:
        """Replace the text of a label or button."""
        ...

    def set_visible(self, target: Target, visible: bool) -> None:
        """Show or hide a part of the screen."""
        ...

    def set_enabled(self, target: Target, enabled: bool) -> None:
        """Enable or disable a control (or group of controls)."""
        ...

    def set_highlight(self, symbol: str, on: bool) -> None:
        """Toggle the 'active' highlight on the key labelled `symbol`."""
        ...

    def show_overlay(self, kind: Optional[OverlayKind]) -> None:
        """Show a success/failure overlay, or clear it when `kind` is None."""
        ...

    def mark_difficulty(self, difficulty: Difficulty) -> None:
        """Mark the selected difficulty in the selector."""
        ...


@runtime_checkable
class SoundPlayer(Protocol):
    """Fire-and-forget sound playback keyed by event name."""

    def play(self, event: SoundEvent) -> None:
        """Start playing the cue for `event` without waiting for it to end."""
        ...
