"""Render a Roam page tree as flat markdown lines.

Layout rules, per child block at nesting level L:

- indentation is ``indent_width * L`` spaces (none at the top level)
- heading blocks get ``#`` * heading and a space in front of the indentation
- nested blocks that have children get a ``* `` bullet
- blocks that are referenced elsewhere end with a `` ^uid`` anchor
- continuation lines of multi-line text repeat the prefix, and the block is
  followed by a blank line
"""

from collections.abc import Set

from roam2obsidian.models.export import Parent, RoamPage
from roam2obsidian.roam.resolver import ReferenceResolver


class TreeRenderer:
    """Flattens block trees into markdown lines.

    The same renderer serves both the discovery pass and the final pass.
    Passing a mutable ``set`` as ``referenced`` collects the UIDs of
    referenced blocks; passing a ``frozenset`` renders against a finished
    collection without changing it.
    """

    def __init__(self, resolver: ReferenceResolver, indent_width: int = 4):
        self.resolver = resolver
        self.indent_width = indent_width

    def render(self, parent: Parent, referenced: Set[str], level: int = 0) -> list[str]:
        """Render parent's children and their descendants.

        Args:
            parent: Page or block whose children are rendered
            referenced: UIDs that get an anchor; also collects new ones when mutable
            level: Nesting level of parent's children

        Returns:
            Output lines in document order (depth-first)
        """
        tracking = referenced if isinstance(referenced, set) else None
        lines = []

        for child in parent.children:
            prefix = ""
            if level > 0:
                prefix = " " * (self.indent_width * level)

            if child.heading > 0:
                prefix = "#" * child.heading + " " + prefix

            if child.children and level > 0:
                prefix += "* "

            text = self.resolver.resolve(child.string, tracking, source_uid=child.uid)

            suffix = ""
            if child.uid and child.uid in referenced:
                suffix = f" ^{child.uid}"

            line = prefix + text + suffix
            if "\n" in line:
                line = line.replace("\n", "\n" + prefix) + "\n"

            lines.append(line)
            lines.extend(self.render(child, referenced, level + 1))

        return lines

    def render_page(self, page: RoamPage, referenced: Set[str]) -> str:
        """Render a whole page to markdown text."""
        return "\n".join(self.render(page, referenced))
