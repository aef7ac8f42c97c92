"""Command-line interface for roam2obsidian."""

from roam2obsidian.cli.main import cli

__all__ = ["cli"]
