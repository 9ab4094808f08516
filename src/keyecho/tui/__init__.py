"""Terminal user interface for keyecho."""

from .app import KeyEchoApp

__all__ = ["KeyEchoApp"]
