"""Inspect the outline tree of a Norg document to debug refiling."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

from norgrefile.levels import split_lines
from norgrefile.norg_parser import node_text, parse_document
from norgrefile.schemas import NodeKind, OutlineNode


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the outline tree and node counts of a Norg file.")
    parser.add_argument("file", help="Norg file path")
    parser.add_argument("--structural-only", action="store_true", help="Show only headings and list items")
    args = parser.parse_args()

    path = Path(args.file)
    if not path.is_file():
        raise FileNotFoundError(f"Norg file not found: {path}")
    lines = split_lines(path.read_text(encoding="utf-8"))
    root = parse_document(lines, path.name)

    print("Tree:")
    print_tree(root, lines, structural_only=args.structural_only)

    print("\nNode types:")
    for name, count in collect_stats(root).most_common():
        print(f"{name}: {count}")


def print_tree(node: OutlineNode, lines: list[str], *, structural_only: bool, indent: int = 0) -> None:
    shown = not structural_only or node.is_structural or node.kind is NodeKind.DOCUMENT
    if shown:
        span = node.range
        label = f"{node.type} [{span.start_row}:{span.start_col} - {span.end_row}:{span.end_col}]"
        if node.kind is NodeKind.PARAGRAPH_SEGMENT:
            label += f" {node_text(node, lines)!r}"
        print("  " * indent + label)
    for child in node.children:
        print_tree(child, lines, structural_only=structural_only, indent=indent + 1 if shown else indent)


def collect_stats(root: OutlineNode) -> Counter:
    return Counter(node.type for node in root.walk())


if __name__ == "__main__":
    main()
