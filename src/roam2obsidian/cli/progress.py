"""Progress feedback display for CLI operations.

Shows one progress bar per conversion pass plus warnings and a summary.
"""

from typing import Optional

import click
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskID, TextColumn

from roam2obsidian.models.result import ConversionResult, PassProgress, Phase


class PassProgressDisplay:
    """Rich progress bars, one per pass, fed by PassProgress updates.

    Example:
        >>> with PassProgressDisplay(console) as display:
        ...     converter = ExportConverter(config, on_progress=display.update)
        ...     converter.convert_file(path)
    """

    def __init__(self, console: Optional[Console] = None):
        self._progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            console=console,
        )
        self._tasks: dict[Phase, TaskID] = {}

    def __enter__(self) -> "PassProgressDisplay":
        self._progress.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self._progress.stop()

    def update(self, update: PassProgress) -> None:
        """Advance the bar for update.phase, creating it on first use."""
        task = self._tasks.get(update.phase)
        if task is None:
            task = self._progress.add_task(update.phase.label, total=update.total)
            self._tasks[update.phase] = task
        self._progress.update(task, completed=update.current)


def show_unresolved(uid: str) -> None:
    """Report a block reference whose target is not in the export.

    Args:
        uid: The missing block UID
    """
    show_warning(f"block reference not found: {uid}")


def show_summary(result: ConversionResult) -> None:
    """Show conversion summary.

    Args:
        result: Result of a completed conversion
    """
    click.echo(
        f"Wrote {result.pages_written} pages "
        f"({result.daily_pages} daily notes), "
        f"{result.referenced_blocks} referenced blocks"
    )
    if result.unresolved_references:
        click.echo(f"{len(result.unresolved_references)} block references could not be resolved")


def show_warning(message: str) -> None:
    """Show warning message.

    Args:
        message: Warning message to display
    """
    click.echo(f"Warning: {message}", err=True)
