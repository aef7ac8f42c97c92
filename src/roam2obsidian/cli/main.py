#!/usr/bin/env python3
"""roam2obsidian CLI - Convert a Roam Research JSON export to Obsidian markdown.

This is the main entry point for the roam2obsidian command-line tool.
"""

from contextlib import nullcontext
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from roam2obsidian import __version__
from roam2obsidian.cli import progress
from roam2obsidian.models.config import ConverterConfig
from roam2obsidian.services.converter import ExportConverter
from roam2obsidian.services.exceptions import ConfigError, ConversionError
from roam2obsidian.utils.logging import configure_logging, get_logger


logger = get_logger(__name__)
console = Console(stderr=True)


def build_config(
    config_path: Optional[Path],
    output_dir: Optional[Path],
    daily_folder: Optional[str],
) -> ConverterConfig:
    """
    Load the config file (if any) and apply command-line overrides.

    Args:
        config_path: Optional YAML config file
        output_dir: --output-dir value, overrides the file
        daily_folder: --daily-folder value, overrides the file

    Returns:
        Validated ConverterConfig

    Raises:
        ConfigError: If the file or the overrides are invalid
    """
    config = ConverterConfig.load(config_path) if config_path else ConverterConfig()

    overrides = {}
    if output_dir is not None:
        overrides["output_dir"] = output_dir
    if daily_folder is not None:
        overrides["daily_folder"] = daily_folder

    if not overrides:
        return config

    try:
        return ConverterConfig.model_validate({**config.model_dump(), **overrides})
    except ValueError as e:
        raise ConfigError(f"Invalid option: {e}") from e


@click.command()
@click.option(
    "-i",
    "--input",
    "input_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Roam Research JSON export to convert (required)",
)
@click.option(
    "-d",
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Output directory (default: current directory)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional YAML configuration file",
)
@click.option("--daily-folder", help="Subdirectory for daily notes (default: daily)")
@click.option("--quiet", is_flag=True, help="Hide progress bars")
@click.version_option(version=__version__, prog_name="roam2obsidian")
def cli(
    input_path: Optional[Path],
    output_dir: Optional[Path],
    config_path: Optional[Path],
    daily_folder: Optional[str],
    quiet: bool,
):
    """Convert a Roam Research JSON export into Obsidian markdown files.

    Block references become [[Page#^uid]] links, referenced blocks get ^uid
    anchors, and daily notes are written as daily/YYYY-MM-DD.md.

    Examples:
        roam2obsidian -i roam-export.json
        roam2obsidian -i roam-export.json -d ~/vault
    """
    configure_logging()

    if input_path is None:
        logger.error("input_missing")
        raise click.ClickException("input is blank: pass the Roam export with -i/--input")

    logger.info("convert_command_started", input=str(input_path))

    try:
        config = build_config(config_path, output_dir, daily_folder)
        display = nullcontext() if quiet else progress.PassProgressDisplay(console)

        with display:
            converter = ExportConverter(
                config,
                on_progress=None if quiet else display.update,
                on_unresolved=progress.show_unresolved,
            )
            result = converter.convert_file(input_path)

    except ConversionError as e:
        logger.error("conversion_failed", error=str(e), error_type=type(e).__name__)
        raise click.ClickException(str(e))

    logger.info(
        "conversion_completed",
        written=result.pages_written,
        referenced=result.referenced_blocks,
        unresolved=len(result.unresolved_references),
    )
    progress.show_summary(result)


if __name__ == "__main__":
    cli()
