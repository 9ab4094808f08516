"""Sound cues: synthesis, override loading and device playback."""

from .bank import SoundBank
from .data import SoundClip
from .loader import SoundLoader
from .player import DevicePlayer, SilentPlayer, create_player, get_default_device, list_output_devices
from .tones import synthesize

__all__ = [
    "DevicePlayer",
    "SilentPlayer",
    "SoundBank",
    "SoundClip",
    "SoundLoader",
    "create_player",
    "get_default_device",
    "list_output_devices",
    "synthesize",
]
