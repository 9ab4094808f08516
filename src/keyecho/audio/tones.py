"""Built-in sound cues synthesized with NumPy.

Each cue is a list of (frequency_hz, duration_s) notes rendered as sine
tones with short linear fades to avoid clicks. A frequency of 0 is a rest.
"""

import numpy as np
import numpy.typing as npt

from keyecho.models import SoundEvent

from .data import SoundClip

FADE_SECONDS = 0.005

CUES: dict[SoundEvent, list[tuple[float, float]]] = {
    SoundEvent.KEYBOARD: [(880.0, 0.06)],
    SoundEvent.WIN_ROUND: [(659.25, 0.12), (880.0, 0.18)],
    SoundEvent.WIN: [(523.25, 0.12), (659.25, 0.12), (783.99, 0.12), (1046.5, 0.3)],
    SoundEvent.ERROR: [(196.0, 0.25)],
    SoundEvent.FAIL: [(392.0, 0.2), (0.0, 0.05), (261.63, 0.2), (0.0, 0.05), (174.61, 0.4)],
}


def _note(frequency: float, duration: float, sample_rate: int) -> npt.NDArray[np.float32]:
    num_frames = int(sample_rate * duration)
    if frequency <= 0:
        return np.zeros(num_frames, dtype=np.float32)

    t = np.arange(num_frames, dtype=np.float32) / sample_rate
    tone = np.sin(2 * np.pi * frequency * t).astype(np.float32)

    fade = min(int(sample_rate * FADE_SECONDS), num_frames // 2)
    if fade > 0:
        ramp = np.linspace(0.0, 1.0, fade, dtype=np.float32)
        tone[:fade] *= ramp
        tone[-fade:] *= ramp[::-1]
    return tone


def synthesize(event: SoundEvent, sample_rate: int = 44100) -> SoundClip:
    """
    Render the built-in cue for `event`.

    Args:
        event: Which cue to render
        sample_rate: Output sample rate in Hz

    Returns:
        Mono SoundClip peaking at 0.8
    """
    notes = CUES[SoundEvent(event)]
    data = np.concatenate([_note(f, d, sample_rate) for f, d in notes])
    peak = np.abs(data).max()
    if peak > 0:
        data *= 0.8 / peak
    return SoundClip.from_array(data, sample_rate)
