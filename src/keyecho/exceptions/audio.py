"""Audio-related exceptions.

- AudioError: Base class for sound problems
- AudioDeviceError: Output device could not be opened or used
- SoundLoadError: A sound override file could not be decoded
"""

from pathlib import Path

from .base import KeyEchoError


class AudioError(KeyEchoError):
    """Sound playback or loading failed."""
    pass


class AudioDeviceError(AudioError):
    """Audio device initialization or operation failed."""

    def __init__(self, user_message: str, device_id: int | None = None, **kwargs):
        """
        Initialize audio device error.

        Args:
            user_message: User-friendly error message
            device_id: The device ID that failed (if applicable)
        """
        kwargs.setdefault(
            "recovery_hint",
            "Run 'keyecho sounds list' to see available devices, or start with --mute.",
        )
        kwargs.setdefault("recoverable", True)
        super().__init__(user_message, **kwargs)
        self.device_id = device_id


class SoundLoadError(AudioError):
    """A sound file from the sounds directory could not be loaded."""

    def __init__(self, path: Path, reason: str):
        """
        Initialize sound load error.

        Args:
            path: The file that failed to load
            reason: Why loading failed
        """
        super().__init__(
            user_message=f"Could not load sound file '{path.name}'",
            technical_message=f"Failed to load {path}: {reason}",
            recoverable=True,
            recovery_hint=(
                f"Replace or remove {path}. Supported formats: WAV, FLAC, OGG. "
                "Without the file the built-in cue is used."
            ),
        )
        self.path = path
        self.reason = reason
