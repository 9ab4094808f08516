"""Fire-and-forget sound cue playback with sounddevice."""

import logging
from typing import Optional

import sounddevice as sd

from keyecho.exceptions import AudioDeviceError, ErrorContext, wrap_audio_device_error
from keyecho.models import AppConfig, SoundEvent
from keyecho.protocols import SoundPlayer

from .bank import SoundBank

logger = logging.getLogger(__name__)


class DevicePlayer:
    """
    Plays cues on an output device without blocking the event loop.

    `sounddevice.play()` replaces whatever is currently playing, so a new
    cue cuts the previous one short. That matches the game: the latest
    event is the one worth hearing.

    A playback failure mid-game disables sound for the rest of the session
    (logged once) rather than interrupting the game.
    """

    def __init__(self, bank: SoundBank, device: Optional[int] = None, volume: float = 1.0):
        """
        Initialize the player and check the output device.

        Args:
            bank: Clips to play
            device: Output device ID (None for system default)
            volume: Volume multiplier (0.0-1.0)

        Raises:
            AudioDeviceError: If the device does not exist or has no outputs
        """
        self.bank = bank
        self.device = device
        self.volume = volume
        self._disabled = False

        try:
            info = sd.query_devices(device, kind="output")
        except (ValueError, sd.PortAudioError) as e:
            raise wrap_audio_device_error(e, device_id=device) from e

        logger.info(f"Sound output: {info['name']}")

    @property
    def is_enabled(self) -> bool:
        return not self._disabled

    def play(self, event: SoundEvent) -> None:
        """Start the cue for `event` and return immediately."""
        if self._disabled:
            return

        clip = self.bank.get(event)
        try:
            sd.play(clip.scaled(self.volume), clip.sample_rate, device=self.device, blocking=False)
        except sd.PortAudioError as e:
            self._disabled = True
            logger.error(f"Sound playback failed, disabling sound: {e}", exc_info=True)

    def stop(self) -> None:
        """Stop any cue that is still playing."""
        if not self._disabled:
            sd.stop()


class SilentPlayer:
    """SoundPlayer used when sound is muted or no output device exists."""

    def play(self, event: SoundEvent) -> None:
        logger.debug(f"(muted) {event.value}")

    def stop(self) -> None:
        pass


def create_player(config: AppConfig, mute: bool = False) -> SoundPlayer:
    """
    Build the sound player described by `config`.

    With no explicit device configured, a machine without any output
    device falls back to silence. An explicitly configured device that
    cannot be opened is an error.

    Raises:
        AudioDeviceError: If the configured device is unusable
        SoundLoadError: If a sound override file cannot be decoded
    """
    if mute or not config.sound_enabled:
        logger.info("Sound disabled")
        return SilentPlayer()

    with ErrorContext("load sound cues", logger):
        bank = SoundBank(sample_rate=config.sample_rate, sounds_dir=config.sounds_dir)

    try:
        return DevicePlayer(bank, device=config.audio_device, volume=config.volume)
    except AudioDeviceError as e:
        if config.audio_device is not None:
            raise
        logger.warning(f"No usable default output device, continuing muted: {e.technical_message}")
        return SilentPlayer()


def list_output_devices() -> list[tuple[int, str, str]]:
    """
    List devices that can play sound.

    Returns:
        List of (device_id, device_name, host_api_name)
    """
    devices = []
    for device_id, info in enumerate(sd.query_devices()):
        if info["max_output_channels"] > 0:
            hostapi = sd.query_hostapis(info["hostapi"])["name"]
            devices.append((device_id, info["name"], hostapi))
    return devices


def get_default_device() -> Optional[int]:
    """Return the default output device ID, or None if there is none."""
    try:
        default = sd.default.device[1]
    except (IndexError, TypeError):
        return None
    return default if default is not None and default >= 0 else None
