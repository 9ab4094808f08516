"""CLI commands for keyecho."""

from .config import config
from .sounds import sounds_group

__all__ = ["config", "sounds_group"]
