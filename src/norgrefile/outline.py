"""Locate refilable structural nodes in an outline tree."""

from __future__ import annotations

from typing import Collection

from norgrefile.schemas import STRUCTURAL_KINDS, NodeKind, OutlineNode

_HEADING_KINDS = frozenset({NodeKind.HEADING})
_LIST_ITEM_KINDS = frozenset({NodeKind.ORDERED_LIST_ITEM, NodeKind.UNORDERED_LIST_ITEM})


def find_ancestor_of_kind(node: OutlineNode | None, kinds: Collection[NodeKind]) -> OutlineNode | None:
    """Walk from ``node`` (inclusive) towards the root and return the first match."""
    current = node
    while current is not None:
        if current.kind in kinds:
            return current
        current = current.parent
    return None


def find_enclosing_structural_node(start_node: OutlineNode | None) -> OutlineNode | None:
    """Return the nearest heading or list item enclosing ``start_node``.

    ``None`` means there is nothing refilable at that position; callers
    abort without treating it as an error.
    """
    return find_ancestor_of_kind(start_node, STRUCTURAL_KINDS)


def find_parent_heading(node: OutlineNode | None) -> OutlineNode | None:
    return find_ancestor_of_kind(node, _HEADING_KINDS)


def find_parent_list_item(node: OutlineNode | None) -> OutlineNode | None:
    return find_ancestor_of_kind(node, _LIST_ITEM_KINDS)


def is_refilable_node(node: OutlineNode) -> bool:
    """Check whether a node is a heading or a list item."""
    return node.kind in STRUCTURAL_KINDS
