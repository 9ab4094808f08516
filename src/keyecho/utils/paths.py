"""Path utility functions."""

from pathlib import Path

APP_DIR_NAME = ".keyecho"


def app_dir() -> Path:
    """Per-user directory holding config and logs (~/.keyecho)."""
    return Path.home() / APP_DIR_NAME


def default_config_path() -> Path:
    """Default location of the config file."""
    return app_dir() / "config.json"


def default_log_path() -> Path:
    """Default location of the rotating log file."""
    return app_dir() / "logs" / "keyecho.log"
