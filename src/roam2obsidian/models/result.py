"""Progress and result records for a conversion run."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Phase(Enum):
    """The three passes of a conversion, in order."""

    INDEXING = "indexing"
    DISCOVERY = "discovery"
    RENDERING = "rendering"

    @property
    def label(self) -> str:
        """Human-readable label used by progress displays."""
        return {
            Phase.INDEXING: "Pass 1: scan all pages",
            Phase.DISCOVERY: "Pass 2: track block references",
            Phase.RENDERING: "Pass 3: write markdown",
        }[self]


@dataclass
class PassProgress:
    """Progress update for one page within a pass."""

    phase: Phase
    current: int = 0
    total: int = 0


@dataclass
class ConversionResult:
    """Summary of a completed conversion.

    Attributes:
        pages_total: Pages in the export
        pages_written: Markdown files written
        daily_pages: Files written under the daily folder
        skipped_untitled: Pages skipped because their title is empty
        referenced_blocks: Blocks that received an anchor
        unresolved_references: UIDs referenced but absent from the export,
            one entry per occurrence, in discovery order
        written_files: Paths written, in write order
    """

    pages_total: int = 0
    pages_written: int = 0
    daily_pages: int = 0
    skipped_untitled: int = 0
    referenced_blocks: int = 0
    unresolved_references: list[str] = field(default_factory=list)
    written_files: list[Path] = field(default_factory=list)
