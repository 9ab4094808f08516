"""Errors raised while reading or validating the settings file."""

from typing import Any

from .base import KeyEchoError

# Extra hint lines keyed by a fragment of the offending field name
_FIELD_HINTS = {
    "audio_device": "Run 'keyecho sounds list' to see valid device IDs",
    "difficulty": "Valid difficulties: easy, medium, hard",
    "policy": "Valid policies: per_difficulty, hard_only",
}


class ConfigurationError(KeyEchoError):
    """Settings could not be loaded."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """The settings file is not usable JSON."""

    def __init__(self, file_path: str, parse_error: str):
        reason = parse_error.lower()
        if "empty" in reason:
            headline = "Configuration file is empty"
            hint = f"Delete {file_path} or run 'keyecho config reset'"
        elif "trailing comma" in reason:
            headline = "Configuration file has a trailing comma"
            hint = f"JSON does not allow a comma after the last item. Fix {file_path}"
        else:
            headline = "Configuration file has invalid syntax"
            hint = (
                f"Fix the JSON in {file_path} (unbalanced braces and unquoted "
                "strings are the usual suspects), or run 'keyecho config reset'."
            )

        super().__init__(
            user_message=headline,
            technical_message=f"Cannot parse {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=hint,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A settings value was rejected by the model."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: str | None = None):
        hint_lines = [f"Change '{field}' with 'keyecho config set' or edit the file by hand"]
        if file_path:
            hint_lines.append(f"Settings file: {file_path}")
        hint_lines.extend(text for key, text in _FIELD_HINTS.items() if key in field.lower())

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"{field}={value!r} rejected: {error_msg}",
            recoverable=True,
            recovery_hint="\n".join(hint_lines),
        )
        self.field = field
        self.value = value
        self.file_path = file_path
