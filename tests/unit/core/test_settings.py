"""Unit tests for settings loading and validation."""

from pathlib import Path

import pytest
from dirls.core.settings import Settings, SettingsError, load_settings


class TestSettingsModel:
    """Tests for the Settings Pydantic model."""

    def test_defaults(self) -> None:
        """Settings default to compact output and WARNING logging."""
        settings = Settings()
        assert settings.listing.long is False
        assert settings.logging.level == "WARNING"
        assert settings.colors == {}

    def test_extra_fields_forbidden(self) -> None:
        """Unknown sections are rejected."""
        with pytest.raises(ValueError):
            Settings.model_validate({"recursive": {"enabled": True}})

    def test_invalid_log_level(self) -> None:
        """Log levels are restricted to the standard names."""
        with pytest.raises(ValueError):
            Settings.model_validate({"logging": {"level": "LOUD"}})


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """A missing settings file is not an error."""
        assert load_settings(tmp_path / "settings.toml") == Settings()

    def test_uses_default_location(self, isolated_config: Path) -> None:
        """Without an explicit path the XDG settings file is read."""
        isolated_config.mkdir(parents=True)
        (isolated_config / "settings.toml").write_text("[listing]\nlong = true\n")

        assert load_settings().listing.long is True

    def test_loads_all_sections(self, tmp_path: Path) -> None:
        """Listing, logging and colors sections are all read."""
        path = tmp_path / "settings.toml"
        path.write_text(
            "[listing]\nlong = true\n\n"
            '[logging]\nlevel = "DEBUG"\n\n'
            '[colors]\nerror = "#ff0000"\n'
        )

        settings = load_settings(path)

        assert settings.listing.long is True
        assert settings.logging.level == "DEBUG"
        assert settings.colors == {"error": "#ff0000"}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Malformed TOML raises SettingsError."""
        path = tmp_path / "settings.toml"
        path.write_text("not valid [ toml")

        with pytest.raises(SettingsError, match="Invalid TOML syntax"):
            load_settings(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise SettingsError."""
        path = tmp_path / "settings.toml"
        path.write_text('[listing]\nlong = "sometimes"\n')

        with pytest.raises(SettingsError, match="Invalid settings"):
            load_settings(path)

    def test_unreadable_path(self, tmp_path: Path) -> None:
        """A directory in place of the file raises SettingsError."""
        path = tmp_path / "settings.toml"
        path.mkdir()

        with pytest.raises(SettingsError, match="Failed to read"):
            load_settings(path)
