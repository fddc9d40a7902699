"""Tests for heading extraction."""

from __future__ import annotations

import pytest

from norgrefile.exceptions import InconsistentTreeError
from norgrefile.headings import extract_headings, heading_level
from norgrefile.norg_parser import parse_document
from norgrefile.schemas import NodeKind, OutlineNode, TextRange


def _node(kind: NodeKind, depth: int | None = None) -> OutlineNode:
    return OutlineNode(kind=kind, range=TextRange(0, 0, 1, 0), depth=depth)


class TestExtractHeadings:
    """Tests for extract_headings function."""

    def test_headings_in_document_order(self, archive_text: str) -> None:
        """Records follow document order, not depth order."""
        lines = archive_text.splitlines()

        records = extract_headings(parse_document(lines), lines)

        assert [(record.title, record.depth) for record in records] == [
            ("Archive", 1),
            ("Tasks", 2),
            ("Projects", 1),
            ("Done", 2),
        ]

    def test_record_points_at_title_node(self, archive_text: str) -> None:
        """The record node is the title; its parent is the heading."""
        lines = archive_text.splitlines()

        record = extract_headings(parse_document(lines), lines)[1]

        assert record.node.kind is NodeKind.PARAGRAPH_SEGMENT
        assert record.heading.kind is NodeKind.HEADING
        assert record.heading.depth == record.depth
        assert record.heading.range.start_row == 2

    def test_covers_all_seven_depths(self) -> None:
        lines = [f"{'*' * depth} Level {depth}" for depth in range(1, 8)]

        records = extract_headings(parse_document(lines), lines)

        assert [record.depth for record in records] == list(range(1, 8))

    def test_reflects_current_content(self) -> None:
        """Results come from the lines passed in, nothing is cached."""
        lines = ["* One"]
        assert [r.title for r in extract_headings(parse_document(lines), lines)] == ["One"]

        lines = ["* Two", "* One"]
        assert [r.title for r in extract_headings(parse_document(lines), lines)] == ["Two", "One"]

    def test_document_without_headings(self) -> None:
        lines = ["- item", "text"]

        assert extract_headings(parse_document(lines), lines) == []


class TestHeadingLevel:
    """Tests for heading_level function."""

    def test_returns_parent_depth(self) -> None:
        heading = _node(NodeKind.HEADING, 4)
        title = _node(NodeKind.PARAGRAPH_SEGMENT)
        heading.add_child(title)

        assert heading_level(title) == 4

    def test_orphan_title_is_inconsistent(self) -> None:
        with pytest.raises(InconsistentTreeError, match="no parent"):
            heading_level(_node(NodeKind.PARAGRAPH_SEGMENT))

    def test_non_heading_parent_is_inconsistent(self) -> None:
        item = _node(NodeKind.UNORDERED_LIST_ITEM, 1)
        title = _node(NodeKind.PARAGRAPH_SEGMENT)
        item.add_child(title)

        with pytest.raises(InconsistentTreeError, match="not a heading"):
            heading_level(title)

    def test_heading_without_depth_is_inconsistent(self) -> None:
        heading = _node(NodeKind.HEADING)
        title = _node(NodeKind.PARAGRAPH_SEGMENT)
        heading.add_child(title)

        with pytest.raises(InconsistentTreeError, match="Could not detect"):
            heading_level(title)

    def test_broken_tree_aborts_extraction(self) -> None:
        """A heading depth outside 1-7 stops extraction."""
        root = _node(NodeKind.DOCUMENT)
        heading = _node(NodeKind.HEADING, 9)
        heading.add_child(_node(NodeKind.PARAGRAPH_SEGMENT))
        root.add_child(heading)

        with pytest.raises(InconsistentTreeError):
            extract_headings(root, ["********* x"])
