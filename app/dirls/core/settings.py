"""User settings for dirls.

Settings are read from an optional TOML file and validated with
Pydantic models. A missing file means defaults everywhere.
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dirls.core.paths import get_settings_path

logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SettingsError(Exception):
    """Raised when the settings file cannot be read, parsed or validated."""


class ListingSettings(BaseModel):
    """Defaults for listing output.

    Attributes:
        long: Use the detailed format even without ``-l``.
    """

    model_config = ConfigDict(extra="forbid")

    long: Annotated[bool, Field(description="Detailed output by default")] = False


class LoggingSettings(BaseModel):
    """Logging configuration.

    Attributes:
        level: Log level used when ``--verbose`` is not given.
    """

    model_config = ConfigDict(extra="forbid")

    level: Annotated[LogLevel, Field(description="Default log level")] = "WARNING"


class Settings(BaseModel):
    """Top-level settings document.

    The ``colors`` table is validated separately by the theme module.
    """

    model_config = ConfigDict(extra="forbid")

    listing: ListingSettings = Field(default_factory=ListingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    colors: dict[str, str] = Field(default_factory=dict)


def load_settings(path: Path | None = None) -> Settings:
    """Load and validate settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default location.

    Returns:
        Validated Settings, or defaults if the file does not exist.

    Raises:
        SettingsError: If the file cannot be read, parsed or validated.
    """
    settings_path = path or get_settings_path()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return Settings()
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read {settings_path}: {e}") from e

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e

    logger.debug("Loaded settings from %s", settings_path)
    return settings
