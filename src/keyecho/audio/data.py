"""Audio clip storage.

SoundClip is a dataclass rather than a Pydantic model: it holds a NumPy
buffer that is never serialized.
"""

from dataclasses import dataclass

import numpy as np
import numpy.typing as npt


@dataclass(slots=True)
class SoundClip:
    """A decoded or synthesized sound cue."""

    data: npt.NDArray[np.float32]  # Samples, (frames,) or (frames, channels)
    sample_rate: int               # Sample rate in Hz

    @classmethod
    def from_array(cls, data: npt.NDArray, sample_rate: int) -> "SoundClip":
        """
        Create a clip from a NumPy array.

        Raises:
            ValueError: If the array is not 1D or 2D
        """
        if data.ndim not in (1, 2):
            raise ValueError(f"Audio data must be 1D or 2D, got {data.ndim}D")

        if data.dtype != np.float32:
            data = data.astype(np.float32)

        return cls(data=data, sample_rate=sample_rate)

    @property
    def num_frames(self) -> int:
        return int(self.data.shape[0])

    @property
    def num_channels(self) -> int:
        return 1 if self.data.ndim == 1 else int(self.data.shape[1])

    @property
    def duration(self) -> float:
        """Duration in seconds."""
        return self.num_frames / self.sample_rate

    def scaled(self, volume: float) -> npt.NDArray[np.float32]:
        """Return the samples multiplied by `volume`, clipped to [-1, 1]."""
        return np.clip(self.data * np.float32(volume), -1.0, 1.0).astype(np.float32)
