"""Generic utility modules for keyecho.

This package contains utilities that are not specific to the game rules:
- observer: Thread-safe observer list management
- paths: Per-user config and log locations
- persistence: Pydantic model load/save with backups
"""

from .observer import ObserverManager
from .paths import app_dir, default_config_path, default_log_path

__all__ = ["ObserverManager", "app_dir", "default_config_path", "default_log_path"]
