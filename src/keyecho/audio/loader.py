"""Decoding of user-supplied cue files (anything libsndfile reads)."""

from pathlib import Path
from typing import Optional

import numpy as np
import soundfile as sf

from keyecho.exceptions import SoundLoadError

from .data import SoundClip


def resample_linear(data: np.ndarray, source_rate: int, rate: int) -> np.ndarray:
    """Stretch `data` from `source_rate` to `rate` by linear interpolation."""
    frames = max(1, round(len(data) * rate / source_rate))
    positions = np.linspace(0, len(data) - 1, frames)
    indices = np.arange(len(data))

    if data.ndim == 1:
        return np.interp(positions, indices, data).astype(np.float32)
    channels = [np.interp(positions, indices, data[:, c]) for c in range(data.shape[1])]
    return np.stack(channels, axis=1).astype(np.float32)


class SoundLoader:
    """Reads cue files, optionally converting them to the output rate."""

    def __init__(self, target_sample_rate: Optional[int] = None):
        self.target_sample_rate = target_sample_rate

    def load(self, path: Path) -> SoundClip:
        """
        Decode `path` into a SoundClip.

        Raises:
            FileNotFoundError: If `path` is missing
            SoundLoadError: If the file is not audio or holds no samples
        """
        if not path.is_file():
            raise FileNotFoundError(f"No sound file at {path}")

        try:
            samples, rate = sf.read(str(path), dtype="float32")
        except (sf.LibsndfileError, RuntimeError) as e:
            raise SoundLoadError(path, str(e)) from e

        if samples.size == 0:
            raise SoundLoadError(path, "file contains no audio")

        wanted = self.target_sample_rate
        if wanted and rate != wanted:
            samples, rate = resample_linear(samples, rate, wanted), wanted

        return SoundClip.from_array(samples, rate)
