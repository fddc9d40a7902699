"""Extract the headings of a parsed document."""

from __future__ import annotations

from typing import Sequence

from norgrefile.exceptions import InconsistentTreeError
from norgrefile.norg_parser import node_text
from norgrefile.schemas import HeadingRecord, NodeKind, OutlineNode

_MIN_DEPTH = 1
_MAX_DEPTH = 7


def extract_headings(root: OutlineNode, lines: Sequence[str]) -> list[HeadingRecord]:
    """Return every heading of depth 1-7 in document order.

    Each record holds the heading's title node, the heading depth, and the
    rendered title. Nothing is cached: call again after the document changes.

    Raises:
        InconsistentTreeError: If a title node is not attached to a heading.
    """
    records: list[HeadingRecord] = []
    for node in root.walk():
        if node.kind is not NodeKind.HEADING:
            continue
        title_node = _first_title_node(node)
        if title_node is None:
            continue
        records.append(
            HeadingRecord(
                node=title_node,
                depth=heading_level(title_node),
                title=node_text(title_node, lines),
            )
        )
    return records


def heading_level(title_node: OutlineNode) -> int:
    """Get the heading level from a heading's title node.

    Raises:
        InconsistentTreeError: If the node has no heading parent or the
            parent carries no usable depth.
    """
    parent = title_node.parent
    if parent is None:
        raise InconsistentTreeError(
            "Something went wrong with the target heading: the title node has no parent."
        )
    if parent.kind is not NodeKind.HEADING:
        raise InconsistentTreeError(
            f"The title node's parent is a {parent.type}, not a heading."
        )
    if parent.depth is None or not _MIN_DEPTH <= parent.depth <= _MAX_DEPTH:
        raise InconsistentTreeError(f"Could not detect the heading level of {parent.type}.")
    return parent.depth


def _first_title_node(heading: OutlineNode) -> OutlineNode | None:
    for child in heading.children:
        if child.kind is NodeKind.PARAGRAPH_SEGMENT:
            return child
    return None
