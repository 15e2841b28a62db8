"""Configuration loading.

Sources, first match wins:

1. An explicit TOML file passed by the caller (``--config``)
2. ``.scalaextract.toml`` in the working directory
3. The ``[tool.scalaextract]`` table of ``pyproject.toml`` in the working directory
4. Built-in defaults
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .exceptions import ConfigError
from .models import ExtractorConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".scalaextract.toml"
PYPROJECT_TABLE = "scalaextract"


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e


def _find_settings(start_dir: Path) -> tuple[Path | None, dict[str, Any]]:
    candidate = start_dir / CONFIG_FILENAME
    if candidate.is_file():
        return candidate, _read_toml(candidate)

    pyproject = start_dir / "pyproject.toml"
    if pyproject.is_file():
        table = _read_toml(pyproject).get("tool", {}).get(PYPROJECT_TABLE)
        if table is not None:
            return pyproject, table

    return None, {}


def load_config(path: str | Path | None = None, *, start_dir: Path | None = None) -> ExtractorConfig:
    """Load :class:`ExtractorConfig` from *path* or the usual locations.

    Raises:
        ConfigError: The file is unreadable, not TOML, or holds invalid keys.
    """
    if path is not None:
        source: Path | None = Path(path)
        if not source.is_file():
            raise ConfigError(f"Config file does not exist: {path}")
        data = _read_toml(source)
    else:
        source, data = _find_settings(start_dir or Path.cwd())

    if source is not None:
        logger.debug("Loading configuration from %s", source)

    try:
        return ExtractorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {source}: {e}") from e
