"""File operations for writing converted pages.

Each page is written through a temp-file-rename so that a failed run never
leaves a half-written markdown file behind. Pages written before a failure
stay on disk.
"""

import os
from pathlib import Path

import structlog

from roam2obsidian.models.export import RoamPage
from roam2obsidian.services.exceptions import FileAccessError


logger = structlog.get_logger()


def page_filename(title: str) -> str:
    """File name (without directory) for a page title.

    Link brackets are dropped. Slashes are kept, so namespaced titles such
    as "Projects/Garden" end up in nested folders.
    """
    return title.replace("[[", "").replace("]]", "") + ".md"


def page_destination(output_dir: Path, page: RoamPage, daily_folder: str = "daily") -> Path:
    """
    Path a page is written to.

    Args:
        output_dir: Root output directory
        page: Page with its (already normalized) title
        daily_folder: Subdirectory for daily notes

    Returns:
        ``<output_dir>/<title>.md``, or ``<output_dir>/<daily_folder>/<title>.md``
        for daily notes

    Raises:
        FileAccessError: If the title (for example "../../x" or an absolute
            path) would place the file outside output_dir

    Examples:
        >>> page_destination(Path("vault"), notes_page)
        PosixPath('vault/Notes.md')
        >>> page_destination(Path("vault"), daily_page)
        PosixPath('vault/daily/2024-01-05.md')
    """
    filename = page_filename(page.title)
    if page.is_daily:
        dest = output_dir / daily_folder / filename
    else:
        dest = output_dir / filename

    if not dest.resolve().is_relative_to(output_dir.resolve()):
        logger.error("page_outside_output_dir", title=page.title, path=str(dest))
        raise FileAccessError(dest, "Page title escapes the output directory")
    return dest


def atomic_write(path: Path, content: str) -> None:
    """
    Atomically write content to file with temp-file-rename pattern.

    1. Write to temporary file in the target directory
    2. fsync to ensure data is on disk
    3. Atomic rename to replace any existing file

    Args:
        path: Target file path
        content: Content to write

    Raises:
        OSError: On file I/O errors
    """
    # Same directory keeps the rename on one filesystem
    temp_path = path.parent / f".{path.name}.tmp.{os.getpid()}"

    try:
        temp_path.write_text(content, encoding='utf-8')

        with open(temp_path, 'r+', encoding='utf-8') as f:
            f.flush()
            os.fsync(f.fileno())

        temp_path.replace(path)

        logger.debug(
            "atomic_write_success",
            path=str(path),
            size=len(content)
        )

    except Exception as e:
        # Clean up temp file on any error
        if temp_path.exists():
            temp_path.unlink()
        logger.error(
            "atomic_write_failed",
            path=str(path),
            error=str(e)
        )
        raise


def write_page(path: Path, content: str) -> None:
    """
    Create parent directories and write a rendered page.

    Args:
        path: Destination from page_destination()
        content: Rendered markdown

    Raises:
        FileAccessError: If the directory or file cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("output_dir_error", path=str(path.parent), error=str(e))
        raise FileAccessError(path.parent, f"Could not create directory ({e})") from e

    try:
        atomic_write(path, content)
    except OSError as e:
        logger.error("page_write_error", path=str(path), error=str(e))
        raise FileAccessError(path, f"Could not write file ({e})") from e

    logger.info("page_written", path=str(path))
