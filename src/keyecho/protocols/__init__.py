"""Protocol definitions for the game controller's collaborators and observers.

- Events: GameEvent emitted on every state machine transition
- Observers: GameObserver for components that follow the game
- Collaborators: Renderer and SoundPlayer, driven by the controller
"""

from .collaborators import Renderer, SoundPlayer, Target
from .events import GameEvent
from .observers import GameObserver

__all__ = [
    # Collaborators
    "Renderer",
    "SoundPlayer",
    "Target",
    # Events
    "GameEvent",
    # Observers
    "GameObserver",
]
