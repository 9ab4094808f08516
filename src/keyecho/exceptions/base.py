"""Root of the keyecho exception hierarchy.

Every keyecho error carries two texts: what the player is told
(`user_message`, plus an optional `recovery_hint`) and what goes to the log
(`technical_message`). The CLI catches KeyEchoError once at the top and
prints the former; handlers log the latter.

A wrong keypress is not an error. The controller reports it as an
InputOutcome.
"""

from typing import Optional


class KeyEchoError(Exception):
    """Base exception for all keyecho errors."""

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        """
        Args:
            user_message: Short explanation suitable for the terminal
            technical_message: Detail for the log file (defaults to user_message)
            recoverable: True when the player can fix the cause and retry
            recovery_hint: What to do about it
        """
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message if technical_message else user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
