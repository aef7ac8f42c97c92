"""Unit tests for structured logging setup."""

import json

import structlog

from roam2obsidian.utils.logging import configure_logging, default_log_dir


class TestDefaultLogDir:
    """Tests for log directory selection."""

    def test_under_home_cache(self, monkeypatch, tmp_path):
        """Test logs go under ~/.cache by default."""
        monkeypatch.delenv("ROAM2OBSIDIAN_LOG_DIR", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert default_log_dir() == tmp_path / ".cache" / "roam2obsidian" / "logs"

    def test_env_override(self, monkeypatch, tmp_path):
        """Test ROAM2OBSIDIAN_LOG_DIR overrides the default."""
        monkeypatch.setenv("ROAM2OBSIDIAN_LOG_DIR", str(tmp_path / "logs"))

        assert default_log_dir() == tmp_path / "logs"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_json_lines(self, monkeypatch, tmp_path):
        """Test events are appended as JSON with level and timestamp."""
        monkeypatch.setenv("ROAM2OBSIDIAN_LOG_LEVEL", "debug")
        log_file = configure_logging(tmp_path / "logs")

        structlog.get_logger("test").info("pass_started", phase="indexing")

        record = json.loads(log_file.read_text().splitlines()[-1])
        assert record["event"] == "pass_started"
        assert record["phase"] == "indexing"
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_level_filters(self, monkeypatch, tmp_path):
        """Test events below the configured level are dropped."""
        monkeypatch.setenv("ROAM2OBSIDIAN_LOG_LEVEL", "WARNING")
        log_file = configure_logging(tmp_path / "logs")

        logger = structlog.get_logger("test")
        logger.info("quiet_event")
        logger.warning("loud_event")

        text = log_file.read_text()
        assert "quiet_event" not in text
        assert "loud_event" in text

    def test_invalid_level_falls_back_to_info(self, monkeypatch, tmp_path):
        """Test an unknown level behaves like INFO."""
        monkeypatch.setenv("ROAM2OBSIDIAN_LOG_LEVEL", "chatty")
        log_file = configure_logging(tmp_path / "logs")

        logger = structlog.get_logger("test")
        logger.debug("hidden_event")
        logger.info("shown_event")

        text = log_file.read_text()
        assert "hidden_event" not in text
        assert "shown_event" in text
