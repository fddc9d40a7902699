"""Command line interface for refiling Norg headings and list items."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from norgrefile.config import NORGREFILE_STRICT_TARGETS, NORGREFILE_WORKSPACE
from norgrefile.documents import FileDocumentStore
from norgrefile.exceptions import RefileError, RefileNotice
from norgrefile.headings import extract_headings
from norgrefile.picker import WorkspacePicker
from norgrefile.refile import Refiler
from norgrefile.reindent import HeadingIndentReindenter
from norgrefile.schemas import PickerSelection, RefileTarget
from norgrefile.utils.logging_config import configure_logging


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    explicit_target = (args.target_file, args.heading, args.level) if args.command == "refile" else ()
    if any(value is not None for value in explicit_target) and None in explicit_target:
        parser.error("--target-file, --heading and --level must be given together")

    configure_logging(args.log_level)
    try:
        return args.handler(args)
    except RefileNotice as exc:
        print(exc)
        return 0
    except RefileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="norgrefile",
        description="Move Norg headings and list items under a heading of another document.",
    )
    parser.add_argument(
        "--workspace",
        type=Path,
        default=NORGREFILE_WORKSPACE,
        help="Workspace root searched for targets (default: $NORGREFILE_WORKSPACE or cwd)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level, e.g. DEBUG or WARNING")
    subparsers = parser.add_subparsers(dest="command", required=True)

    refile = subparsers.add_parser("refile", help="Refile the node at a position of a document")
    refile.add_argument("source", type=Path, help="Document holding the node to move")
    refile.add_argument("--line", type=int, required=True, help="1-based line inside the node")
    refile.add_argument("--column", type=int, default=1, help="1-based column (default: 1)")
    refile.add_argument("--target-file", type=Path, help="Document receiving the node")
    refile.add_argument("--heading", help="Exact title of the target heading")
    refile.add_argument("--level", type=int, choices=range(1, 8), help="Level of the target heading")
    refile.add_argument(
        "--strict",
        action="store_true",
        default=NORGREFILE_STRICT_TARGETS,
        help="Fail when several headings match the target",
    )
    refile.add_argument("--indent-width", type=int, default=None, help="Spaces per heading level")
    refile.set_defaults(handler=_run_refile)

    headings = subparsers.add_parser("headings", help="List the headings of a document")
    headings.add_argument("document", type=Path)
    headings.set_defaults(handler=_run_headings)

    return parser


def _run_refile(args: argparse.Namespace) -> int:
    store = FileDocumentStore(args.workspace)
    source_id = store.document_id_for(args.source.resolve())

    target = None
    if args.target_file is not None:
        target = RefileTarget(
            document_id=store.document_id_for(args.target_file.resolve()),
            heading_title=args.heading,
            heading_depth=args.level,
        )

    reindenter = HeadingIndentReindenter(args.indent_width) if args.indent_width is not None else None
    refiler = Refiler(store, reindenter=reindenter, strict_targets=args.strict)
    picker = None
    if target is None:
        chooser = console_chooser if sys.stdin.isatty() else None
        picker = WorkspacePicker(store.root, chooser=chooser)

    result = asyncio.run(
        refiler.refile_at(source_id, args.line - 1, args.column - 1, target=target, picker=picker)
    )
    if result is None:
        print("Refile cancelled.")
        return 0

    store.save_all()
    print(f"The text has been refiled to {result.target_document} under '{result.heading_title}'")
    return 0


def _run_headings(args: argparse.Namespace) -> int:
    store = FileDocumentStore(args.workspace)
    document = store.open(store.document_id_for(args.document.resolve()))
    for record in extract_headings(document.parse(), document.lines):
        row = record.node.range.start_row + 1
        print(f"{row:>5}  {'*' * record.depth} {record.title}")
    return 0


async def console_chooser(candidates: list[PickerSelection]) -> PickerSelection | None:
    """Print numbered candidates and read the choice from stdin."""
    if not candidates:
        print("No headings found in the workspace.")
        return None
    for index, candidate in enumerate(candidates, start=1):
        location = f"{candidate.document_id}:{(candidate.row or 0) + 1}"
        print(f"{index:>3}. {location}  {candidate.text.strip()}")
    try:
        answer = await asyncio.to_thread(input, "Refile under (number, empty to cancel): ")
    except EOFError:
        return None
    answer = answer.strip()
    if not answer.isdigit() or not 1 <= int(answer) <= len(candidates):
        return None
    return candidates[int(answer) - 1]
