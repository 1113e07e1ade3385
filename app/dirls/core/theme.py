"""Theme management for dirls diagnostics.

Colors come from the bundled theme file, optionally overridden by the
``[colors]`` table of the user settings.
"""

import logging
import tomllib
from collections.abc import Mapping
from importlib import resources
from pathlib import Path
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

logger = logging.getLogger(__name__)


class ThemeColors(BaseModel):
    """Colors used for warnings and errors on stderr.

    All colors must be valid hex codes (#RRGGBB or #RGB).
    """

    model_config = ConfigDict(extra="forbid")

    warning: str = "#f5b332"
    error: str = "#f53263"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Validate that all color values are valid hex codes."""
        if not isinstance(v, str):
            msg = f"{info.field_name}: color must be a string"
            raise ValueError(msg)
        color = v.strip()
        if not color.startswith("#"):
            msg = f"{info.field_name}: color must start with '#'"
            raise ValueError(msg)
        color_part = color[1:]
        if len(color_part) not in (3, 6):
            msg = f"{info.field_name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        try:
            int(color_part, 16)
        except ValueError:
            msg = f"{info.field_name}: invalid hex color '{color}'"
            raise ValueError(msg) from None
        return color


def get_bundled_theme_path() -> Path:
    """Get the bundled default theme path."""
    return resources.files("dirls.data").joinpath("theme.toml")  # type: ignore[return-value]


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Load the colors table from a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        Mapping of color name to hex value, or None if loading failed.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Failed to load colors from %s: %s", path, e)
        return None

    colors_raw: object = data.get("colors", {})
    if not isinstance(colors_raw, dict):
        logger.warning("Invalid 'colors' section in %s", path)
        return None
    return {
        key: value
        for key, value in cast(dict[str, object], colors_raw).items()
        if isinstance(value, str)
    }


def load_theme(overrides: Mapping[str, str] | None = None) -> ThemeColors:
    """Load theme colors, merging overrides over the bundled defaults.

    Args:
        overrides: Colors from the user settings, if any.

    Returns:
        Validated ThemeColors. Invalid overrides fall back to defaults.
    """
    bundled_colors = _load_toml_colors(Path(get_bundled_theme_path())) or {}

    try:
        return ThemeColors(**{**bundled_colors, **(overrides or {})})
    except ValidationError as e:
        logger.warning("Theme validation failed, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Convert ThemeColors to a Rich Theme."""
    if colors is None:
        colors = load_theme()

    return Theme(
        {
            "warning": colors.warning,
            "error": f"bold {colors.error}",
        }
    )


# Module-level cached bundled theme
_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the bundled Rich theme, loading and caching it on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
