"""JSON persistence for pydantic models (the settings file).

Reads turn IO and validation failures into keyecho configuration errors.
Writes copy the previous file to `<name>.bak` and go through
`<name>.tmp` + rename, so the settings file is never left half-written.
"""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import Optional, TypeVar

from pydantic import BaseModel, ValidationError

from keyecho.exceptions import ConfigFileInvalidError, wrap_pydantic_error

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _sibling(path: Path, suffix: str) -> Path:
    return path.with_name(path.name + suffix)


class PydanticPersistence:
    """Static helpers; the settings model decides where its file lives."""

    @staticmethod
    def load_json(path: Path, model_type: type[M]) -> M:
        """
        Read `path` and validate it as `model_type`.

        Raises:
            FileNotFoundError: If there is no file at `path`
            ConfigFileInvalidError: If the file is unreadable, empty or not JSON
            ConfigValidationError: If a value is rejected by the model
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise
        except OSError as e:
            raise ConfigFileInvalidError(str(path), f"Unreadable file: {e}") from e

        if not text.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            model = model_type.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"{path} rejected by {model_type.__name__}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Read {model_type.__name__} from {path}")
        return model

    @staticmethod
    def save_json(
        data: BaseModel,
        path: Path,
        indent: int = 2,
        create_parents: bool = True,
        backup: bool = True,
    ) -> None:
        """
        Write `data` to `path` as JSON.

        Args:
            data: Model to write
            path: Destination file
            indent: JSON indentation
            create_parents: Create missing parent directories
            backup: Keep the previous file as `<name>.bak`

        Raises:
            OSError: If the file cannot be written
        """
        if create_parents:
            path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.is_file():
            shutil.copy2(path, _sibling(path, ".bak"))

        staging = _sibling(path, ".tmp")
        try:
            staging.write_text(data.model_dump_json(indent=indent), encoding="utf-8")
            staging.replace(path)
        finally:
            staging.unlink(missing_ok=True)

        logger.debug(f"Wrote {type(data).__name__} to {path}")

    @staticmethod
    def load_json_or_default(
        path: Path, model_type: type[M], default_factory: Optional[Callable[[], M]] = None
    ) -> M:
        """
        Like load_json, but a missing file yields a default model.

        Only absence falls back; a corrupt file still raises. Nothing is
        written to disk.
        """
        if not path.exists():
            logger.info(f"No {model_type.__name__} at {path}, using defaults")
            return default_factory() if default_factory else model_type()
        return PydanticPersistence.load_json(path, model_type)
