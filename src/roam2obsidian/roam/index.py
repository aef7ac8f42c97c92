"""Global UID -> block index for a Roam export.

Blocks do not carry a copy of their page. Each entry records the position
of the owning page in the export, and the title is looked up through the
index when a link is rendered, so links always see the normalized title.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from roam2obsidian.models.export import Parent, RoamBlock, RoamPage
from roam2obsidian.utils.logging import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class IndexEntry:
    """Indexed block and the position of its owning page."""

    block: RoamBlock
    page_position: int


def iter_blocks(parent: Parent) -> Iterator[RoamBlock]:
    """Yield every block below parent, depth-first in document order."""
    for child in parent.children:
        yield child
        yield from iter_blocks(child)


class BlockIndex:
    """Read-only mapping from block UID to block and owning page.

    Built once with :meth:`build` after page titles have been normalized.

    Example:
        >>> index = BlockIndex.build(pages)
        >>> entry = index.get("abc123456")
        >>> entry.block.string, index.page_title("abc123456")
        ('Buy milk', 'Notes')
    """

    def __init__(self, pages: list[RoamPage], entries: dict[str, IndexEntry]):
        self._pages = pages
        self._entries = entries

    @classmethod
    def build(cls, pages: list[RoamPage]) -> "BlockIndex":
        """Index every block of every page.

        Duplicate UIDs are a data-quality problem rather than a fatal one:
        the last block seen wins and a warning is logged. Blocks without a
        UID cannot be referenced and are skipped.

        Args:
            pages: All pages of the export

        Returns:
            Populated BlockIndex
        """
        entries: dict[str, IndexEntry] = {}

        for position, page in enumerate(pages):
            for block in iter_blocks(page):
                if not block.uid:
                    continue
                if block.uid in entries:
                    logger.warning(
                        "duplicate_block_uid",
                        uid=block.uid,
                        page=page.title,
                    )
                entries[block.uid] = IndexEntry(block=block, page_position=position)

        logger.info("block_index_built", pages=len(pages), blocks=len(entries))
        return cls(pages, entries)

    def get(self, uid: str) -> Optional[IndexEntry]:
        return self._entries.get(uid)

    def page_of(self, uid: str) -> RoamPage:
        """Page that owns the block with this UID.

        Raises:
            KeyError: If the UID is not indexed
        """
        return self._pages[self._entries[uid].page_position]

    def page_title(self, uid: str) -> str:
        """Current title of the page that owns the block with this UID."""
        return self.page_of(uid).title

    @property
    def pages(self) -> list[RoamPage]:
        return self._pages

    def __contains__(self, uid: object) -> bool:
        return uid in self._entries

    def __len__(self) -> int:
        return len(self._entries)
