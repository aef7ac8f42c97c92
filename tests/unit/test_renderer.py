"""Unit tests for page tree rendering."""

import pytest

from roam2obsidian.roam.index import BlockIndex
from roam2obsidian.roam.renderer import TreeRenderer
from roam2obsidian.roam.resolver import ReferenceResolver


@pytest.fixture
def render(build_pages):
    """Render the first of the given pages with a fresh index."""

    def _render(*pages, referenced=frozenset(), indent_width=4):
        built = build_pages(*pages)
        renderer = TreeRenderer(ReferenceResolver(BlockIndex.build(built)), indent_width=indent_width)
        return renderer.render(built[0], referenced)

    return _render


class TestIndentationAndBullets:
    """Tests for prefixes computed from depth and children."""

    def test_top_level_blocks_unindented(self, render, make_page, make_block):
        """Test level-0 blocks have no indent and no bullet."""
        lines = render(
            make_page(
                "P",
                make_block("a00000000", "parent", make_block("b00000000", "child")),
                make_block("c00000000", "sibling"),
            )
        )

        assert lines == ["parent", "    child", "sibling"]

    def test_nested_block_with_children_gets_bullet(self, render, make_page, make_block):
        """Test a depth-2 block with a child gets 8 spaces and a bullet."""
        lines = render(
            make_page(
                "P",
                make_block(
                    "a00000000",
                    "root",
                    make_block(
                        "b00000000",
                        "level one",
                        make_block("c00000000", "level two", make_block("d00000000", "level three")),
                    ),
                ),
            )
        )

        assert lines == [
            "root",
            "    * level one",
            "        * level two",
            "            level three",
        ]

    def test_custom_indent_width(self, render, make_page, make_block):
        """Test indent width is configurable."""
        lines = render(
            make_page("P", make_block("a00000000", "root", make_block("b00000000", "child"))),
            indent_width=2,
        )

        assert lines == ["root", "  child"]

    def test_children_keep_document_order(self, render, make_page, make_block):
        """Test depth-first output with children in document order."""
        lines = render(
            make_page(
                "P",
                make_block("a00000000", "1", make_block("b00000000", "1.1"), make_block("c00000000", "1.2")),
                make_block("d00000000", "2"),
            )
        )

        assert lines == ["1", "    1.1", "    1.2", "2"]

    def test_empty_page(self, render, make_page):
        """Test a page without blocks renders no lines."""
        assert render(make_page("Empty")) == []


class TestHeadings:
    """Tests for heading prefixes."""

    def test_top_level_heading(self, render, make_page, make_block):
        """Test heading level adds hashes."""
        lines = render(make_page("P", make_block("a00000000", "Title", heading=2)))

        assert lines == ["## Title"]

    def test_nested_heading_hashes_before_indent(self, render, make_page, make_block):
        """Test hashes come before the indentation of nested headings."""
        lines = render(
            make_page(
                "P",
                make_block("a00000000", "root", make_block("b00000000", "Sub", make_block("c00000000", "x"), heading=3)),
            )
        )

        assert lines[1] == "###     * Sub"

    def test_null_heading_is_plain(self, render, make_page, make_block):
        """Test heading null in the export renders as plain text."""
        assert render(make_page("P", make_block("a00000000", "plain", heading=None))) == ["plain"]


class TestAnchors:
    """Tests for ^uid anchors on referenced blocks."""

    def test_referenced_block_gets_anchor(self, render, make_page, make_block):
        """Test blocks in the referenced set end with ^uid."""
        lines = render(
            make_page("P", make_block("abc123456", "Buy milk"), make_block("def123456", "Other")),
            referenced=frozenset({"abc123456"}),
        )

        assert lines == ["Buy milk ^abc123456", "Other"]

    def test_unreferenced_blocks_have_no_anchor(self, render, make_page, make_block):
        """Test no anchors are emitted when nothing is referenced."""
        lines = render(make_page("P", make_block("abc123456", "Buy milk")))

        assert "^" not in lines[0]

    def test_anchor_follows_resolved_text(self, render, make_page, make_block):
        """Test the anchor goes after reference rewriting."""
        lines = render(
            make_page(
                "P",
                make_block("abc123456", "Buy milk"),
                make_block("def123456", "see ((abc123456))"),
            ),
            referenced=frozenset({"abc123456", "def123456"}),
        )

        assert lines[1] == "see Buy milk [[P#^abc123456]] ^def123456"


class TestMultilineBlocks:
    """Tests for blocks whose text spans several lines."""

    def test_continuation_lines_reindented(self, render, make_page, make_block):
        """Test continuation lines repeat the prefix and a blank line follows."""
        lines = render(
            make_page(
                "P",
                make_block("a00000000", "root", make_block("b00000000", "first\nsecond")),
                make_block("c00000000", "after"),
            )
        )

        assert lines[1] == "    first\n    second\n"
        assert "\n".join(lines) == "root\n    first\n    second\n\nafter"

    def test_anchor_on_last_line(self, render, make_page, make_block):
        """Test the anchor of a multi-line block ends its last line."""
        lines = render(
            make_page("P", make_block("a00000000", "one\ntwo")),
            referenced=frozenset({"a00000000"}),
        )

        assert lines == ["one\ntwo ^a00000000\n"]


class TestDiscoveryMode:
    """Tests for collecting references while rendering."""

    def test_mutable_set_collects_references(self, build_pages, make_page, make_block):
        """Test rendering with a set records referenced UIDs."""
        pages = build_pages(
            make_page("A", make_block("a00000000", "((b00000000))")),
            make_page("B", make_block("b00000000", "target")),
        )
        renderer = TreeRenderer(ReferenceResolver(BlockIndex.build(pages)))
        referenced = set()

        renderer.render(pages[0], referenced)

        assert referenced == {"b00000000"}

    def test_frozen_set_is_not_extended(self, build_pages, make_page, make_block):
        """Test final rendering reads the set without adding to it."""
        pages = build_pages(
            make_page("A", make_block("a00000000", "((b00000000))")),
            make_page("B", make_block("b00000000", "target")),
        )
        renderer = TreeRenderer(ReferenceResolver(BlockIndex.build(pages)))

        text = renderer.render_page(pages[1], frozenset())

        assert text == "target"
