"""Pytest fixtures for tests."""

import random
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import AsyncMock, Mock

import numpy as np
import pytest
import soundfile as sf

from keyecho.core import GameController
from keyecho.models import Difficulty
from keyecho.protocols import Renderer, SoundPlayer


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def renderer():
    """Renderer mock recording every presentation command."""
    return Mock(spec=Renderer)


@pytest.fixture
def sound():
    """SoundPlayer mock."""
    return Mock(spec=SoundPlayer)


@pytest.fixture
def sleep():
    """Instant awaitable sleep that records requested durations."""
    return AsyncMock()


@pytest.fixture
def timeline(renderer, sound, sleep):
    """Parent mock ordering renderer, sound and sleep calls on one timeline."""
    parent = Mock()
    parent.attach_mock(renderer, "renderer")
    parent.attach_mock(sound, "sound")
    parent.attach_mock(sleep, "sleep")
    return parent


@pytest.fixture
def make_controller(renderer, sound, sleep):
    """Factory for controllers wired to the mocks."""
    def factory(difficulty=Difficulty.EASY, **kwargs):
        kwargs.setdefault("rng", random.Random(1234))
        return GameController(renderer, sound, difficulty, sleep=sleep, **kwargs)
    return factory


@pytest.fixture
def sample_audio_file(temp_dir):
    """Create a simple test audio file."""
    sample_rate = 22050
    duration = 0.1  # 100ms
    t = np.linspace(0, duration, int(sample_rate * duration), dtype=np.float32)
    audio_data = np.sin(2 * np.pi * 440 * t).astype(np.float32)

    file_path = temp_dir / "keyboard.wav"
    sf.write(str(file_path), audio_data, sample_rate)

    return file_path
