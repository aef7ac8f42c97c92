"""Three-pass conversion of a Roam export to Obsidian markdown.

A block only gets a ``^uid`` anchor if some other block links to it, and
that can be any block on any page. The conversion therefore runs in three
strictly sequential passes over the whole export:

1. Indexing: normalize daily-note titles and index every block by UID.
2. Discovery: render every page and throw the output away, collecting the
   UIDs of all referenced blocks.
3. Rendering: render every page again against the finished set and write it.

Nothing is written until discovery has seen every page.
"""

from pathlib import Path
from typing import Callable, Optional

from roam2obsidian.models.config import ConverterConfig
from roam2obsidian.models.export import RoamPage
from roam2obsidian.models.result import ConversionResult, PassProgress, Phase
from roam2obsidian.roam.dates import normalize_page
from roam2obsidian.roam.index import BlockIndex
from roam2obsidian.roam.loader import load_export
from roam2obsidian.roam.renderer import TreeRenderer
from roam2obsidian.roam.resolver import ReferenceResolver
from roam2obsidian.services.file_operations import page_destination, write_page
from roam2obsidian.utils.logging import get_logger


logger = get_logger(__name__)


class ExportConverter:
    """Runs the indexing, discovery and rendering passes.

    Args:
        config: Conversion settings
        on_progress: Called after each page of each pass
        on_unresolved: Called once per reference to a UID missing from the export
        writer: Writes one rendered page (defaults to write_page)
    """

    def __init__(
        self,
        config: ConverterConfig,
        on_progress: Optional[Callable[[PassProgress], None]] = None,
        on_unresolved: Optional[Callable[[str], None]] = None,
        writer: Callable[[Path, str], None] = write_page,
    ):
        self.config = config
        self.on_progress = on_progress
        self.on_unresolved = on_unresolved
        self.writer = writer
        self._unresolved: list[str] = []

    def report_progress(self, phase: Phase, current: int, total: int) -> None:
        if self.on_progress:
            self.on_progress(PassProgress(phase, current, total))

    def _record_unresolved(self, uid: str) -> None:
        self._unresolved.append(uid)
        if self.on_unresolved:
            self.on_unresolved(uid)

    def _renderer(self, index: BlockIndex) -> TreeRenderer:
        resolver = ReferenceResolver(
            index,
            max_depth=self.config.max_reference_depth,
            on_unresolved=self._record_unresolved,
        )
        return TreeRenderer(resolver, indent_width=self.config.indent_width)

    def build_index(self, pages: list[RoamPage]) -> BlockIndex:
        """Pass 1: normalize daily-note titles, then index every block.

        Raises:
            DateParseError: If a daily-note title names an impossible date
        """
        total = len(pages)
        logger.info("pass_started", phase=Phase.INDEXING.value, pages=total)

        for i, page in enumerate(pages, start=1):
            normalize_page(page)
            self.report_progress(Phase.INDEXING, i, total)

        index = BlockIndex.build(pages)
        logger.info("pass_completed", phase=Phase.INDEXING.value, blocks=len(index))
        return index

    def discover_references(self, pages: list[RoamPage], index: BlockIndex) -> frozenset[str]:
        """Pass 2: render every page without output to find referenced blocks.

        Returns:
            UIDs of every block that is the target of a resolved reference

        Raises:
            DateParseError: If a daily-note link names an impossible date
        """
        total = len(pages)
        logger.info("pass_started", phase=Phase.DISCOVERY.value, pages=total)

        renderer = self._renderer(index)
        referenced: set[str] = set()
        for i, page in enumerate(pages, start=1):
            renderer.render(page, referenced)
            self.report_progress(Phase.DISCOVERY, i, total)

        logger.info(
            "pass_completed",
            phase=Phase.DISCOVERY.value,
            referenced=len(referenced),
            unresolved=len(self._unresolved),
        )
        return frozenset(referenced)

    def render_pages(
        self,
        pages: list[RoamPage],
        index: BlockIndex,
        referenced: frozenset[str],
    ) -> ConversionResult:
        """Pass 3: render every titled page with anchors and write it.

        Pages written before a failure are left in place.

        Raises:
            DateParseError: If a daily-note link names an impossible date
            FileAccessError: If a directory or file cannot be written
        """
        total = len(pages)
        logger.info("pass_started", phase=Phase.RENDERING.value, pages=total)

        result = ConversionResult(
            pages_total=total,
            referenced_blocks=len(referenced),
            unresolved_references=list(self._unresolved),
        )
        renderer = self._renderer(index)

        for i, page in enumerate(pages, start=1):
            if not page.title:
                result.skipped_untitled += 1
                self.report_progress(Phase.RENDERING, i, total)
                continue

            dest = page_destination(self.config.output_dir, page, self.config.daily_folder)
            self.writer(dest, renderer.render_page(page, referenced))

            result.pages_written += 1
            if page.is_daily:
                result.daily_pages += 1
            result.written_files.append(dest)
            self.report_progress(Phase.RENDERING, i, total)

        logger.info(
            "pass_completed",
            phase=Phase.RENDERING.value,
            written=result.pages_written,
            skipped=result.skipped_untitled,
        )
        return result

    def convert(self, pages: list[RoamPage]) -> ConversionResult:
        """Run all three passes over already-loaded pages."""
        self._unresolved = []
        index = self.build_index(pages)
        referenced = self.discover_references(pages, index)
        return self.render_pages(pages, index, referenced)

    def convert_file(self, path: Path) -> ConversionResult:
        """Load a Roam JSON export and convert it.

        Raises:
            ConversionError: On any fatal load, date or write error
        """
        return self.convert(load_export(path))
