"""Load and save pydantic models as JSON files.

A missing file means "use defaults" and is never written on load.
Saving keeps the previous file as `<name>.bak` and replaces the target
in one rename, so an interrupted save never leaves half a config.
"""

import logging
import shutil
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from hueplus.exceptions import ConfigFileInvalidError, ConfigurationError, wrap_pydantic_error

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def load_model(path: Path, model_type: type[ModelT]) -> ModelT:
    """
    Read a model from path, or build model_type() if the file is missing.

    Raises:
        ConfigFileInvalidError: If the file is empty, unreadable or not JSON
        ConfigValidationError: If a value fails validation
    """
    if not path.exists():
        logger.info(f"No file at {path}, using default {model_type.__name__}")
        return model_type()

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigFileInvalidError(str(path), f"Cannot read file: {e}") from e

    if not text.strip():
        raise ConfigFileInvalidError(str(path), "File is empty")

    try:
        model = model_type.model_validate_json(text)
    except ValidationError as e:
        logger.error(f"Rejected {path}: {e}")
        raise wrap_pydantic_error(e, str(path)) from e

    logger.debug(f"Loaded {model_type.__name__} from {path}")
    return model


def save_model(model: BaseModel, path: Path) -> None:
    """
    Write model to path as indented JSON.

    Raises:
        ConfigurationError: If the directory or file cannot be written
    """
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.exists():
            shutil.copy2(path, path.with_suffix(path.suffix + ".bak"))

        tmp_path.write_text(model.model_dump_json(indent=2), encoding="utf-8")
        tmp_path.replace(path)
    except OSError as e:
        logger.error(f"Could not save {type(model).__name__} to {path}: {e}")
        raise ConfigurationError(
            user_message=f"Failed to save configuration to {path}",
            technical_message=str(e),
            recovery_hint="Check file permissions and disk space. The previous file is kept as .bak.",
        ) from e
    finally:
        if tmp_path.exists():
            tmp_path.unlink()

    logger.debug(f"Saved {type(model).__name__} to {path}")
