"""Sound bank: one clip per SoundEvent."""

import logging
from pathlib import Path
from typing import Optional

from keyecho.models import SoundEvent

from .data import SoundClip
from .loader import SoundLoader
from .tones import synthesize

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".wav", ".flac", ".ogg")


class SoundBank:
    """
    Holds the clip for every SoundEvent.

    Clips come from `<sounds_dir>/<event>.<ext>` when such a file exists
    (e.g. `win-round.wav`), otherwise from the built-in synthesized cues.
    Overrides are decoded eagerly so a broken file is reported at startup,
    not mid-game.
    """

    def __init__(self, sample_rate: int = 44100, sounds_dir: Optional[Path] = None):
        """
        Build the bank.

        Raises:
            SoundLoadError: If an override file exists but cannot be decoded
        """
        self.sample_rate = sample_rate
        self.sounds_dir = sounds_dir
        self._clips: dict[SoundEvent, SoundClip] = {}
        self._sources: dict[SoundEvent, str] = {}

        loader = SoundLoader(target_sample_rate=sample_rate)
        for event in SoundEvent:
            override = self.find_override(event)
            if override is not None:
                self._clips[event] = loader.load(override)
                self._sources[event] = str(override)
                logger.info(f"Loaded {event.value} cue from {override}")
            else:
                self._clips[event] = synthesize(event, sample_rate)
                self._sources[event] = "built-in"

    def find_override(self, event: SoundEvent) -> Optional[Path]:
        """Return the override file for `event`, if the sounds directory has one."""
        if self.sounds_dir is None:
            return None
        for ext in SUPPORTED_EXTENSIONS:
            candidate = self.sounds_dir / f"{event.value}{ext}"
            if candidate.is_file():
                return candidate
        return None

    def get(self, event: SoundEvent) -> SoundClip:
        return self._clips[SoundEvent(event)]

    def source(self, event: SoundEvent) -> str:
        """Where the clip came from: a file path or 'built-in'."""
        return self._sources[SoundEvent(event)]
