"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """Directory with one visible file, one subdirectory and one dotfile."""
    root = tmp_path / "sample"
    root.mkdir()
    (root / "b.txt").write_text("bee\n")
    (root / "a").mkdir()
    (root / ".hidden").write_text("secret\n")
    return root


@pytest.fixture
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty temporary directory."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home / "dirls"
