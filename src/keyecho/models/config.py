"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer

from keyecho.utils.paths import default_config_path
from keyecho.utils.persistence import PydanticPersistence

from .enums import Difficulty, PhysicalKeyPolicy


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # Game defaults
    default_difficulty: Difficulty = Field(
        default=Difficulty.EASY, description="Difficulty selected on startup"
    )
    physical_key_policy: PhysicalKeyPolicy = Field(
        default=PhysicalKeyPolicy.PER_DIFFICULTY,
        description=(
            "Which difficulties accept typed keys. 'per_difficulty' accepts each tier's "
            "own alphabet; 'hard_only' restricts typing to the Hard tier."
        ),
    )
    max_repeats_per_round: int | None = Field(
        default=1,
        ge=0,
        description="How many times the sequence can be replayed per round (None = unlimited)",
    )

    # Audio settings
    sound_enabled: bool = Field(default=True, description="Play sound cues")
    volume: float = Field(default=0.5, ge=0.0, le=1.0, description="Cue volume (0.0-1.0)")
    audio_device: int | None = Field(
        default=None, description="Audio output device ID (None = system default)"
    )
    sample_rate: int = Field(default=44100, gt=0, description="Sample rate for synthesized cues")
    sounds_dir: Path | None = Field(
        default=None,
        description="Directory with <event>.wav/.flac/.ogg files overriding the built-in cues",
    )

    @field_serializer("sounds_dir")
    def serialize_path(self, path: Path | None) -> str | None:
        """Serialize Path to string."""
        return str(path) if path is not None else None

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.keyecho/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = default_config_path()

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = default_config_path()

        PydanticPersistence.save_json(self, path)
