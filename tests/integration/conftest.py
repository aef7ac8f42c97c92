"""Fixtures for integration tests."""

import pytest


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep the CLI's log file under tmp_path instead of the real home."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("ROAM2OBSIDIAN_LOG_DIR", raising=False)
    return home
