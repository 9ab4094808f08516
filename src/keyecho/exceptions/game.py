"""Game API misuse errors.

These cover invalid arguments passed by code, not wrong keypresses.
"""

from .base import KeyEchoError


class InvalidRoundError(KeyEchoError, ValueError):
    """A round number outside 1..N was requested."""

    def __init__(self, round_number: int):
        super().__init__(
            user_message=f"Invalid round number: {round_number}",
            technical_message=f"Round numbers start at 1, got {round_number}",
        )
        self.round_number = round_number
