"""
Custom exception hierarchy for keyecho.

## Exception Hierarchy

```
KeyEchoError (base)
├── AudioError
│   ├── AudioDeviceError
│   └── SoundLoadError
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
└── InvalidRoundError (also a ValueError)
```

Wrong keypresses are game transitions, not exceptions. Everything here is
a system-level problem: a broken config file, a missing audio device, a
bad sound override or a programming error in a caller.

### Example: Config Validation Error

```python
from keyecho.exceptions import ConfigValidationError

raise ConfigValidationError(
    field="default_difficulty",
    value="insane",
    error_msg="Input should be 'easy', 'medium' or 'hard'",
    file_path="/home/me/.keyecho/config.json",
)

# User sees: "Invalid configuration value for 'default_difficulty': ..."
# Recovery hint: "Update the 'default_difficulty' value ...\nValid difficulties: easy, medium, hard"
```
"""

from .audio import AudioDeviceError, AudioError, SoundLoadError
from .base import KeyEchoError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .game import InvalidRoundError
from .handlers import (
    ErrorContext,
    format_error_for_display,
    handle_errors,
    wrap_audio_device_error,
    wrap_pydantic_error,
)

__all__ = [
    # Base
    "KeyEchoError",
    # Audio
    "AudioDeviceError",
    "AudioError",
    "SoundLoadError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Game
    "InvalidRoundError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "handle_errors",
    "wrap_audio_device_error",
    "wrap_pydantic_error",
]
