"""Roam export handling: date normalization, block index, references, rendering.

Example:
    >>> from roam2obsidian.roam import BlockIndex, ReferenceResolver, TreeRenderer
    >>> index = BlockIndex.build(pages)
    >>> renderer = TreeRenderer(ReferenceResolver(index))
    >>> referenced = set()
    >>> for page in pages:
    ...     renderer.render(page, referenced)
    >>> markdown = renderer.render_page(pages[0], frozenset(referenced))
"""

from roam2obsidian.roam.dates import normalize_page, normalize_title, rewrite_date_links
from roam2obsidian.roam.index import BlockIndex, IndexEntry, iter_blocks
from roam2obsidian.roam.loader import load_export, parse_export
from roam2obsidian.roam.resolver import ReferenceResolver
from roam2obsidian.roam.renderer import TreeRenderer

__all__ = [
    "BlockIndex",
    "IndexEntry",
    "ReferenceResolver",
    "TreeRenderer",
    "iter_blocks",
    "load_export",
    "normalize_page",
    "normalize_title",
    "parse_export",
    "rewrite_date_links",
]
