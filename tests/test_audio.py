"""Tests for sound cue synthesis, loading and playback."""

from pathlib import Path
from unittest.mock import patch

import numpy as np
import pytest
import soundfile as sf

from keyecho.audio import (
    DevicePlayer,
    SilentPlayer,
    SoundBank,
    SoundClip,
    SoundLoader,
    create_player,
    list_output_devices,
    synthesize,
)
from keyecho.exceptions import AudioDeviceError, SoundLoadError
from keyecho.models import AppConfig, SoundEvent


class FakePortAudioError(Exception):
    """Stands in for sounddevice.PortAudioError on the patched module."""


@pytest.fixture
def mock_sd():
    """Patch the sounddevice module used by the player."""
    with patch("keyecho.audio.player.sd") as sd:
        sd.PortAudioError = FakePortAudioError
        sd.query_devices.return_value = {"name": "Test Output", "max_output_channels": 2}
        yield sd


@pytest.mark.unit
class TestSoundClip:
    """Test SoundClip."""

    def test_from_array_converts_dtype(self):
        clip = SoundClip.from_array(np.zeros(100, dtype=np.float64), 1000)
        assert clip.data.dtype == np.float32
        assert clip.num_frames == 100
        assert clip.num_channels == 1
        assert clip.duration == pytest.approx(0.1)

    def test_stereo(self):
        clip = SoundClip.from_array(np.zeros((50, 2), dtype=np.float32), 1000)
        assert clip.num_channels == 2

    def test_rejects_3d(self):
        with pytest.raises(ValueError):
            SoundClip.from_array(np.zeros((2, 2, 2)), 1000)

    def test_scaled_clips(self):
        clip = SoundClip.from_array(np.array([0.5, -0.9], dtype=np.float32), 1000)
        scaled = clip.scaled(2.0)
        np.testing.assert_allclose(scaled, [1.0, -1.0])
        assert scaled.dtype == np.float32


@pytest.mark.unit
class TestTones:
    """Test built-in cue synthesis."""

    @pytest.mark.parametrize("event", list(SoundEvent))
    def test_every_event_has_a_cue(self, event):
        clip = synthesize(event, sample_rate=8000)
        assert clip.sample_rate == 8000
        assert clip.num_frames > 0
        assert np.abs(clip.data).max() == pytest.approx(0.8, abs=1e-3)

    def test_keyboard_blip_is_short(self):
        assert synthesize(SoundEvent.KEYBOARD).duration < 0.1

    def test_fades_avoid_clicks(self):
        clip = synthesize(SoundEvent.ERROR, sample_rate=8000)
        assert abs(clip.data[0]) < 0.01
        assert abs(clip.data[-1]) < 0.05


@pytest.mark.unit
class TestSoundLoader:
    """Test SoundLoader."""

    def test_load_and_resample(self, sample_audio_file):
        clip = SoundLoader(target_sample_rate=44100).load(sample_audio_file)
        assert clip.sample_rate == 44100
        assert clip.num_frames == pytest.approx(4410, abs=2)

    def test_load_native_rate(self, sample_audio_file):
        clip = SoundLoader().load(sample_audio_file)
        assert clip.sample_rate == 22050

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            SoundLoader().load(tmp_path / "nope.wav")

    def test_corrupt_file(self, tmp_path: Path):
        path = tmp_path / "broken.wav"
        path.write_bytes(b"not audio at all")

        with pytest.raises(SoundLoadError) as exc_info:
            SoundLoader().load(path)

        assert exc_info.value.path == path


@pytest.mark.unit
class TestSoundBank:
    """Test SoundBank override resolution."""

    def test_builtin_cues(self):
        bank = SoundBank(sample_rate=8000)
        for event in SoundEvent:
            assert bank.source(event) == "built-in"
            assert bank.get(event).sample_rate == 8000

    def test_override_from_directory(self, temp_dir, sample_audio_file):
        bank = SoundBank(sample_rate=44100, sounds_dir=temp_dir)

        assert bank.source(SoundEvent.KEYBOARD) == str(sample_audio_file)
        assert bank.source(SoundEvent.WIN) == "built-in"
        assert bank.get(SoundEvent.KEYBOARD).sample_rate == 44100

    def test_hyphenated_event_name(self, temp_dir):
        data = np.zeros(100, dtype=np.float32)
        data[50] = 0.5
        sf.write(str(temp_dir / "win-round.flac"), data, 8000)

        bank = SoundBank(sample_rate=8000, sounds_dir=temp_dir)

        assert bank.find_override(SoundEvent.WIN_ROUND) == temp_dir / "win-round.flac"

    def test_broken_override_raises(self, temp_dir):
        (temp_dir / "fail.wav").write_bytes(b"garbage")

        with pytest.raises(SoundLoadError):
            SoundBank(sounds_dir=temp_dir)


@pytest.mark.unit
class TestDevicePlayer:
    """Test DevicePlayer with a patched sounddevice."""

    def test_play_is_non_blocking(self, mock_sd):
        bank = SoundBank(sample_rate=8000)
        player = DevicePlayer(bank, device=3, volume=0.5)

        player.play(SoundEvent.WIN)

        args, kwargs = mock_sd.play.call_args
        assert args[1] == 8000
        assert kwargs == {"device": 3, "blocking": False}
        assert np.abs(args[0]).max() == pytest.approx(0.4, abs=1e-3)

    def test_invalid_device_raises(self, mock_sd):
        mock_sd.query_devices.side_effect = ValueError("No output device matching 9")

        with pytest.raises(AudioDeviceError) as exc_info:
            DevicePlayer(SoundBank(sample_rate=8000), device=9)

        assert exc_info.value.device_id == 9

    def test_playback_failure_disables_sound(self, mock_sd):
        player = DevicePlayer(SoundBank(sample_rate=8000))
        mock_sd.play.side_effect = FakePortAudioError("stream broke")

        player.play(SoundEvent.KEYBOARD)
        player.play(SoundEvent.KEYBOARD)

        assert not player.is_enabled
        assert mock_sd.play.call_count == 1

    def test_stop(self, mock_sd):
        player = DevicePlayer(SoundBank(sample_rate=8000))
        player.stop()
        mock_sd.stop.assert_called_once()


@pytest.mark.unit
class TestCreatePlayer:
    """Test create_player."""

    def test_mute_flag(self, mock_sd):
        assert isinstance(create_player(AppConfig(), mute=True), SilentPlayer)
        mock_sd.query_devices.assert_not_called()

    def test_sound_disabled_in_config(self, mock_sd):
        assert isinstance(create_player(AppConfig(sound_enabled=False)), SilentPlayer)

    def test_device_player(self, mock_sd):
        player = create_player(AppConfig(sample_rate=8000, volume=0.3))
        assert isinstance(player, DevicePlayer)
        assert player.volume == 0.3

    def test_no_default_device_falls_back_to_silence(self, mock_sd):
        mock_sd.query_devices.side_effect = FakePortAudioError("Error querying device -1")
        assert isinstance(create_player(AppConfig(sample_rate=8000)), SilentPlayer)

    def test_explicit_device_failure_raises(self, mock_sd):
        mock_sd.query_devices.side_effect = ValueError("No output device matching 4")
        with pytest.raises(AudioDeviceError):
            create_player(AppConfig(sample_rate=8000, audio_device=4))

    def test_broken_override_aborts_startup(self, mock_sd, temp_dir):
        (temp_dir / "error.ogg").write_bytes(b"garbage")

        with pytest.raises(SoundLoadError):
            create_player(AppConfig(sounds_dir=temp_dir))

    def test_silent_player_plays_nothing(self):
        player = SilentPlayer()
        player.play(SoundEvent.WIN)
        player.stop()


@pytest.mark.unit
def test_list_output_devices(mock_sd):
    mock_sd.query_devices.return_value = [
        {"name": "Mic", "max_output_channels": 0, "hostapi": 0},
        {"name": "Speakers", "max_output_channels": 2, "hostapi": 0},
    ]
    mock_sd.query_hostapis.return_value = {"name": "ALSA"}

    assert list_output_devices() == [(1, "Speakers", "ALSA")]


@pytest.mark.unit
def test_silent_player_satisfies_protocol():
    from keyecho.protocols import SoundPlayer

    assert isinstance(SilentPlayer(), SoundPlayer)
