"""Domain events emitted by the game controller.

Observers receive the event plus keyword arguments describing it
(see GameObserver.on_game_event for the payload of each event).
"""

from enum import Enum


class GameEvent(Enum):
    """Events from the game state machine."""

    GAME_RESET = "game_reset"                          # State back to round 1
    DIFFICULTY_CHANGED = "difficulty_changed"          # Tier switched while idle
    ROUND_STARTED = "round_started"                    # New sequence generated
    DEMONSTRATION_STARTED = "demonstration_started"    # Playback began (start or repeat)
    DEMONSTRATION_FINISHED = "demonstration_finished"  # Playback done, keyboard live
    SYMBOL_ACCEPTED = "symbol_accepted"                # Correct symbol entered
    MISMATCH_FIRST_OFFENSE = "mismatch_first_offense"  # Wrong symbol, budget consumed
    MISMATCH_FATAL = "mismatch_fatal"                  # Wrong symbol, game restarted
    ROUND_WON = "round_won"                            # Sequence complete, more rounds left
    GAME_WON = "game_won"                              # Final sequence complete
