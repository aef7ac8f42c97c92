"""Structured logging setup for roam2obsidian."""

import structlog
from pathlib import Path
from typing import Any, Optional
import os


VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def default_log_dir() -> Path:
    """Log directory: $ROAM2OBSIDIAN_LOG_DIR, else ~/.cache/roam2obsidian/logs."""
    override = os.environ.get("ROAM2OBSIDIAN_LOG_DIR")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".cache" / "roam2obsidian" / "logs"


def configure_logging(log_dir: Optional[Path] = None) -> Path:
    """
    Configure structlog for JSON lines appended to roam2obsidian.log.

    Log level can be controlled via ROAM2OBSIDIAN_LOG_LEVEL environment variable:
    - DEBUG: every resolved block reference and file write
    - INFO: pass transitions, export loaded, conversion summary (default)
    - WARNING: unresolved references, reference cycles, duplicate UIDs
    - ERROR: load, date and write failures

    Unknown levels fall back to INFO.

    Args:
        log_dir: Directory for the log file (default: default_log_dir())

    Returns:
        Path of the log file

    Example:
        ROAM2OBSIDIAN_LOG_LEVEL=DEBUG roam2obsidian -i export.json -d vault
        tail -f ~/.cache/roam2obsidian/logs/roam2obsidian.log | jq .
    """
    log_dir = log_dir or default_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "roam2obsidian.log"

    log_level = os.environ.get("ROAM2OBSIDIAN_LOG_LEVEL", "INFO").upper()
    if log_level not in VALID_LEVELS:
        log_level = "INFO"

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=open(log_file, "a", encoding="utf-8")),
        cache_logger_on_first_use=True,
    )
    return log_file


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of calling module)

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("pass_started", phase="discovery", pages=42)
    """
    return structlog.get_logger(name)
