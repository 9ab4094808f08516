"""
Error handling helpers shared by the CLI and the TUI.

| Problem | Raised as |
|---------|-----------|
| Config file is not valid JSON | `ConfigFileInvalidError` |
| Config value out of range / wrong type | `ConfigValidationError` (via `wrap_pydantic_error`) |
| Output device missing or busy | `AudioDeviceError` (via `wrap_audio_device_error`) |
| Sound override cannot be decoded | `SoundLoadError` |

Usage:
- `@handle_errors(operation_name="save difficulty", user_notification=self.notify, re_raise=False)`
  keeps a TUI action from taking the game down.
- `with ErrorContext("load sound cues", logger): ...` logs a failure with the
  operation name before it propagates.
"""

import logging
from functools import wraps
from typing import Callable, Optional, TypeVar

from .audio import AudioDeviceError
from .base import KeyEchoError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# PortAudio error fragments and what they mean to a player
_DEVICE_PROBLEMS: list[tuple[tuple[str, ...], str]] = [
    (("-9996", "Invalid device", "No output device matching"), "is not available"),
    (("-9985", "unavailable", "busy"), "is already in use by another application"),
    (("-9997", "Invalid sample rate"), "does not support the configured sample rate"),
]


def handle_errors(
    *,
    operation_name: str,
    user_notification: Optional[Callable[[str], None]] = None,
    fallback_value: Optional[T] = None,
    re_raise: bool = True,
    log_level: int = logging.ERROR,
) -> Callable:
    """
    Wrap a function so failures are logged and optionally shown to the user.

    Args:
        operation_name: What the function does, for log lines ("save difficulty")
        user_notification: Called with a display message on failure
        fallback_value: Returned instead of raising when re_raise is False
        re_raise: Propagate the exception after logging and notifying
        log_level: Level used for the log record
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                if isinstance(e, KeyEchoError):
                    logger.log(log_level, f"{operation_name} failed: {e.technical_message}")
                    display = e.get_full_message()
                else:
                    logger.log(log_level, f"{operation_name} failed unexpectedly: {e}", exc_info=True)
                    display = f"Could not {operation_name}: {e}"

                if user_notification is not None:
                    user_notification(display)
                if re_raise:
                    raise
                return fallback_value

        return wrapper
    return decorator


class ErrorContext:
    """
    Log any exception raised inside the block, tagged with an operation name.

    The exception propagates unless `re_raise=False`, in which case it is
    kept on `.error` for the caller to inspect.
    """

    def __init__(
        self,
        operation: str,
        log: Optional[logging.Logger] = None,
        re_raise: bool = True,
    ):
        self.operation = operation
        self.log = log or logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self) -> "ErrorContext":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_val is None:
            return False

        self.error = exc_val
        if isinstance(exc_val, KeyEchoError):
            self.log.error(f"Could not {self.operation}: {exc_val.technical_message}")
        else:
            self.log.error(f"Could not {self.operation}", exc_info=exc_val)
        return not self.re_raise


def wrap_pydantic_error(error: Exception, file_path: str) -> KeyEchoError:
    """
    Turn a pydantic validation failure on the settings file into a config error.

    Broken JSON becomes ConfigFileInvalidError; bad values become
    ConfigValidationError naming the field (or every field when several fail).
    """
    from pydantic import ValidationError

    if not isinstance(error, ValidationError):
        return ConfigValidationError(field="unknown", value=None, error_msg=str(error), file_path=file_path)

    details = error.errors()
    syntax = [d for d in details if d.get("type") == "json_invalid"]
    if syntax:
        reason = syntax[0].get("ctx", {}).get("error") or syntax[0].get("msg", str(error))
        return ConfigFileInvalidError(file_path, str(reason))

    def field_name(detail) -> str:
        return ".".join(str(part) for part in detail.get("loc", ())) or "unknown"

    if len(details) == 1:
        detail = details[0]
        return ConfigValidationError(
            field=field_name(detail),
            value=detail.get("input"),
            error_msg=detail.get("msg", "invalid value"),
            file_path=file_path,
        )

    summary = "\n".join(f"  - {field_name(d)}: {d.get('msg', 'invalid value')}" for d in details)
    return ConfigValidationError(
        field="multiple fields",
        value=None,
        error_msg=f"{len(details)} invalid settings:\n{summary}",
        file_path=file_path,
    )


def wrap_audio_device_error(error: Exception, device_id: Optional[int] = None) -> KeyEchoError:
    """Describe a sounddevice/PortAudio failure in player terms."""
    raw = str(error)
    device = "The default sound output" if device_id is None else f"Sound output {device_id}"

    problem = next(
        (text for fragments, text in _DEVICE_PROBLEMS if any(f in raw for f in fragments)),
        None,
    )
    user_msg = f"{device} {problem}." if problem else f"{device} failed: {raw}"

    return AudioDeviceError(
        user_message=user_msg,
        technical_message=f"PortAudio error for device {device_id}: {raw}",
        device_id=device_id,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Split an exception into the message and hint shown to the player.

    Returns:
        (message, recovery hint or None)
    """
    if isinstance(error, KeyEchoError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None
