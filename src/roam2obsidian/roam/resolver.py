"""Block reference resolution.

Roam block text can point at other blocks in three ways:

- ``{{embed: ((uid))}}``    renders the target inline
- ``{{mentions: ((uid))}}`` mentions the target
- ``((uid))``               plain block reference

Obsidian has no transclusion by UID, so every form is replaced with the
target's text followed by a link to the target's anchor in its own page:
``Buy milk [[Notes#^abc123456]]``. The target UID is recorded so that the
target block can be given a ``^uid`` anchor when its page is rendered.
"""

import re
from typing import Callable, Optional

from roam2obsidian.roam.dates import rewrite_date_links
from roam2obsidian.roam.index import BlockIndex
from roam2obsidian.utils.logging import get_logger


logger = get_logger(__name__)

# Alternation order is the priority at each scan position
REFERENCE_RE = re.compile(
    r"\{\{embed: \(\((?P<embed>.{9})\)\)\}\}"
    r"|\{\{mentions: \(\((?P<mentions>.{9})\)\)\}\}"
    r"|\(\((?P<ref>.{9})\)\)"
)


class ReferenceResolver:
    """Rewrites block reference markup against a BlockIndex.

    Text inserted for a reference is resolved recursively, so references
    inside referenced blocks become links too. Expansion stops at a block
    that is already being expanded (a reference cycle) or once the chain
    of nested references reaches ``max_depth``; the target's text is then
    inserted as-is. Both cases are logged and never fatal.

    Args:
        index: Global block index
        max_depth: Deepest chain of nested references that is expanded
        on_unresolved: Called with the UID of each reference whose target
            is not in the index, while references are being tracked. Only
            references written in the resolved text itself count; ones met
            inside inserted block text are left to that block.
    """

    def __init__(
        self,
        index: BlockIndex,
        max_depth: int = 16,
        on_unresolved: Optional[Callable[[str], None]] = None,
    ):
        self.index = index
        self.max_depth = max_depth
        self.on_unresolved = on_unresolved

    def resolve(
        self,
        text: str,
        referenced: Optional[set[str]] = None,
        source_uid: Optional[str] = None,
    ) -> str:
        """Resolve all block references and daily-note links in text.

        Args:
            text: Raw block text
            referenced: Set that receives the UID of every resolved target.
                Pass None once references have been collected; diagnostics
                are only reported while tracking so each one appears once
                per run.
            source_uid: UID of the block the text belongs to, so a block
                referencing itself is treated as a cycle straight away

        Returns:
            Text with references replaced by ``<text> [[<page>#^<uid>]]``
            and daily links normalized to ``[[YYYY-MM-DD]]``

        Raises:
            DateParseError: If a daily-note link names an impossible date
        """
        chain = (source_uid,) if source_uid else ()
        expanded = self._expand(text, referenced, chain)
        return rewrite_date_links(expanded)

    def _expand(
        self,
        text: str,
        referenced: Optional[set[str]],
        chain: tuple[str, ...],
        owned: bool = True,
    ) -> str:
        tracking = referenced is not None
        # Missing targets are reported against the block whose own text
        # names them, not again wherever that text is inserted
        report = tracking and owned

        def replace(match: re.Match) -> str:
            uid = match.group(match.lastgroup)
            entry = self.index.get(uid)

            if entry is None:
                self._diagnose(report, "block_ref_unresolved", uid=uid, kind=match.lastgroup)
                if report and self.on_unresolved:
                    self.on_unresolved(uid)
                return match.group(0)

            if tracking:
                referenced.add(uid)

            body = entry.block.string
            if uid in chain:
                self._diagnose(tracking, "block_ref_cycle", uid=uid, chain=list(chain))
            elif len(chain) >= self.max_depth:
                self._diagnose(tracking, "block_ref_depth_exceeded", uid=uid, depth=len(chain))
            else:
                body = self._expand(body, referenced, chain + (uid,), owned=False)

            title = self.index.page_title(uid)
            logger.debug("block_ref_resolved", uid=uid, page=title, kind=match.lastgroup)
            return f"{body} [[{title}#^{uid}]]"

        return REFERENCE_RE.sub(replace, text)

    @staticmethod
    def _diagnose(tracking: bool, event: str, **kw) -> None:
        if tracking:
            logger.warning(event, **kw)
        else:
            logger.debug(event, **kw)
