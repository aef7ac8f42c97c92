"""Shared test fixtures for all test modules."""

import json

import pytest

from roam2obsidian.roam.loader import parse_export


@pytest.fixture
def make_block():
    """
    Factory for export-shaped block dicts.

    Example:
        make_block("abc123456", "Buy milk", make_block("def123456", "Oat"), heading=2)
    """

    def _make(uid: str, string: str, *children: dict, **extra) -> dict:
        block = {"uid": uid, "string": string, "children": list(children)}
        block.update(extra)
        return block

    return _make


@pytest.fixture
def make_page():
    """Factory for export-shaped page dicts."""

    def _make(title: str, *children: dict, **extra) -> dict:
        page = {"title": title, "children": list(children)}
        page.update(extra)
        return page

    return _make


@pytest.fixture
def build_pages():
    """Validate page dicts into RoamPage models."""

    def _build(*pages: dict):
        return parse_export(list(pages))

    return _build


@pytest.fixture
def sample_export(make_page, make_block):
    """
    Export with a daily note referencing a block on a regular page.

    The "Notes" block abc123456 is referenced from the daily page; the
    daily page also links to another daily note by its Roam title.
    """
    return [
        make_page(
            "January 5th, 2024",
            make_block("day000001", "((abc123456))"),
            make_block("day000002", "See [[January 4th, 2024]]"),
        ),
        make_page(
            "Notes",
            make_block("abc123456", "Buy milk"),
            make_block("not000002", "Unreferenced"),
        ),
    ]


@pytest.fixture
def export_file(tmp_path):
    """Write export data to a JSON file and return its path."""

    def _write(data, name: str = "export.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
