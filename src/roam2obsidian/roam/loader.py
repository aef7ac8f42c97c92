"""Load a Roam Research JSON export into page models."""

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from roam2obsidian.models.export import RoamPage
from roam2obsidian.services.exceptions import ExportLoadError
from roam2obsidian.utils.logging import get_logger


logger = get_logger(__name__)

_PAGES = TypeAdapter(list[RoamPage])


def parse_export(data: object, source: Path = Path("<memory>")) -> list[RoamPage]:
    """Validate decoded export JSON into pages.

    Args:
        data: Decoded JSON, expected to be an array of page objects
        source: Where the data came from, for error messages

    Returns:
        Pages in export order

    Raises:
        ExportLoadError: If data is not an array of valid pages
    """
    if not isinstance(data, list):
        raise ExportLoadError(source, "Export must be a JSON array of pages")

    try:
        return _PAGES.validate_python(data)
    except ValidationError as e:
        raise ExportLoadError(source, f"Export does not match the Roam page format:\n{e}") from e


def load_export(path: Path) -> list[RoamPage]:
    """Read and validate a Roam JSON export file.

    Args:
        path: Path to the exported .json file

    Returns:
        Pages in export order

    Raises:
        ExportLoadError: If the file is missing, unreadable, or not a valid export
    """
    logger.info("export_loading", path=str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ExportLoadError(path, "Export file not found") from e
    except json.JSONDecodeError as e:
        raise ExportLoadError(path, f"Invalid JSON ({e})") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ExportLoadError(path, f"Could not read export ({e})") from e

    pages = parse_export(data, path)
    logger.info("export_loaded", path=str(path), pages=len(pages))
    return pages
