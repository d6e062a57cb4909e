"""Settings for reading and writing unit definition files.

Settings are read from a YAML file:

    encoding: cp932
    format:
      indent: "    "
      newline: "\\r\\n"

The file is taken from the ``path`` argument, else from ``$UNITDEF_CONFIG``;
with neither, defaults apply.
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV = "UNITDEF_CONFIG"


class FormatOptions(BaseModel):
    """Layout used by the formatter."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent: str = "\t"
    newline: str = "\n"
    unit_separator: str = ""  # extra text between top-level units


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    encoding: str = "utf-8"
    format: FormatOptions = FormatOptions()


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from YAML, falling back to defaults."""
    if path is None:
        path = os.environ.get(CONFIG_ENV)
        if not path:
            return Settings()
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"{path}: {e}") from e
    logger.debug("loaded settings from %s", path)
    return settings
