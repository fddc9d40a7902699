"""Move headings and list items under a heading of another document.

The refile runs in a fixed order: capture the moved text, resolve the target
heading, renumber the moved headings, insert under the target, reindent the
inserted rows, and only then delete the node from its source document. Every
failure before the final deletion leaves the source document untouched.

Examples
--------
Refile the node at row 12 of ``inbox.norg`` under ``** Projects`` of
``work.norg``:

    store = FileDocumentStore(Path("~/notes"))
    refiler = Refiler(store)
    target = RefileTarget(document_id="work.norg", heading_title="Projects", heading_depth=2)
    result = asyncio.run(refiler.refile_at("inbox.norg", 12, 0, target=target))
    store.save_all()
"""

from __future__ import annotations

from norgrefile.config import NORGREFILE_MAX_HEADING_DEPTH, NORGREFILE_STRICT_TARGETS
from norgrefile.documents import Document, DocumentStore
from norgrefile.exceptions import (
    DocumentAccessError,
    HeadingDepthError,
    InconsistentTreeError,
    NoRefilableNodeError,
    PickerUnavailableError,
    ReindentError,
    SelfRefileError,
    TargetNotFoundError,
)
from norgrefile.headings import extract_headings
from norgrefile.levels import deepest_heading_level, normalize_heading_levels, split_lines
from norgrefile.norg_parser import node_at
from norgrefile.outline import find_enclosing_structural_node, find_parent_heading
from norgrefile.picker import TargetPicker
from norgrefile.reindent import HeadingIndentReindenter, Reindenter
from norgrefile.schemas import (
    InsertionResult,
    OutlineNode,
    PickerStatus,
    RefileResult,
    RefileTarget,
)
from norgrefile.targets import find_target_heading
from norgrefile.utils.logging_config import get_logger

__all__ = ["Refiler"]

logger = get_logger(__name__)


class Refiler:
    """Refiles structural nodes between documents of a store.

    Args:
        store: Where documents are opened (or created) by identifier.
        reindenter: Pass applied to the inserted rows. Defaults to a
            ``HeadingIndentReindenter`` with the configured width.
        max_heading_depth: Deepest heading level renumbering may produce.
        strict_targets: Reject targets whose title and depth match more
            than one heading instead of taking the first.
    """

    def __init__(
        self,
        store: DocumentStore,
        *,
        reindenter: Reindenter | None = None,
        max_heading_depth: int = NORGREFILE_MAX_HEADING_DEPTH,
        strict_targets: bool = NORGREFILE_STRICT_TARGETS,
    ) -> None:
        self._store = store
        self._reindenter = reindenter if reindenter is not None else HeadingIndentReindenter()
        self._max_heading_depth = max_heading_depth
        self._strict_targets = strict_targets

    async def refile_at(
        self,
        document_id: str,
        row: int,
        col: int = 0,
        *,
        target: RefileTarget | None = None,
        picker: TargetPicker | None = None,
    ) -> RefileResult | None:
        """Refile the heading or list item found at a position.

        Without an explicit ``target`` the picker is awaited for one.

        Returns:
            The refile result, or None if the user cancelled the picker.

        Raises:
            NoRefilableNodeError: If no heading or list item encloses the position.
            PickerUnavailableError: If a target is needed and no picker can provide it.
        """
        node = self.node_at_position(document_id, row, col)
        if target is None:
            target = await self._pick_target(picker)
            if target is None:
                return None

        return self.refile(node, target)

    def node_at_position(self, document_id: str, row: int, col: int = 0) -> OutlineNode:
        """Return the heading or list item enclosing a position of a document.

        Raises:
            NoRefilableNodeError: If no heading or list item encloses the position.
        """
        document = self._store.open(document_id)
        start = node_at(document.parse(), row, col)
        if start is None:
            raise NoRefilableNodeError(
                "There is no refilable node at this position. "
                "Use this on list items or under headings."
            )
        node = find_enclosing_structural_node(start)
        if node is None:
            raise NoRefilableNodeError("No heading or list item found at this position.")
        return node

    def refile(self, node: OutlineNode, target: RefileTarget) -> RefileResult:
        """Move ``node`` from its document under the target heading.

        Raises:
            TargetNotFoundError: If the target heading does not exist.
            HeadingDepthError: If renumbering would exceed the maximum depth.
            SelfRefileError: If the target heading is part of ``node``.
            DocumentAccessError: If the node's range no longer fits its document.
        """
        if node.document_id is None:
            raise DocumentAccessError("The node is not attached to a document.")
        source = self._store.open(node.document_id)
        text = source.node_text(node)

        span = node.range
        end_row = span.end_row
        # A range ending at column 0 stops before end_row.
        if span.end_col == 0:
            end_row -= 1
        removed_start, removed_end = span.start_row, end_row + 1
        # A stale node must fail here, before the target is touched.
        source.get_lines(removed_start, removed_end)

        target_document = self._store.open(target.document_id)
        same_document = target_document is source
        insertion = self._insert(
            text,
            target,
            target_document,
            protected_rows=(removed_start, removed_end) if same_document else None,
        )

        delete_start, delete_end = removed_start, removed_end
        if same_document and insertion.inserted_start <= removed_start:
            shift = insertion.inserted_end - insertion.inserted_start
            delete_start += shift
            delete_end += shift
        source.set_lines(delete_start, delete_end, [])

        logger.info(
            "Refiled %s",
            node.type,
            extra={
                "source": source.document_id,
                "target": target_document.document_id,
                "heading": target.heading_title,
            },
        )
        return RefileResult(
            **insertion.model_dump(),
            source_document=source.document_id,
            removed_start=removed_start,
            removed_end=removed_end,
        )

    def refile_text(self, text: str, target: RefileTarget) -> InsertionResult:
        """Insert arbitrary text under the target heading.

        Raises:
            TargetNotFoundError: If the target heading does not exist.
            HeadingDepthError: If renumbering would exceed the maximum depth.
        """
        return self._insert(text, target, self._store.open(target.document_id))

    def _insert(
        self,
        text: str,
        target: RefileTarget,
        document: Document,
        *,
        protected_rows: tuple[int, int] | None = None,
    ) -> InsertionResult:
        headings = extract_headings(document.parse(), document.lines)
        record = find_target_heading(headings, target, strict=self._strict_targets)
        if record is None:
            logger.warning(
                "Target heading not found",
                extra={
                    "document": document.document_id,
                    "heading": target.heading_title,
                    "level": target.heading_depth,
                },
            )
            raise TargetNotFoundError(
                f"Could not find level {target.heading_depth} heading "
                f"'{target.heading_title}' in {target.document_id}"
            )

        heading = find_parent_heading(record.node)
        if heading is None:
            raise InconsistentTreeError("Could not find the target heading node. This shouldn't happen.")
        heading_row = heading.range.start_row
        if protected_rows is not None and protected_rows[0] <= heading_row < protected_rows[1]:
            raise SelfRefileError(f"Cannot refile a node under its own heading '{record.title}'.")

        adjusted = normalize_heading_levels(target.heading_depth, text)
        deepest = deepest_heading_level(adjusted)
        if deepest > self._max_heading_depth:
            raise HeadingDepthError(
                f"Refiling under '{record.title}' would create level {deepest} headings "
                f"(maximum is {self._max_heading_depth})."
            )

        logger.info("Refiling under heading '%s'", document.lines[heading_row].strip())

        new_lines = split_lines(adjusted)
        insert_row = heading_row + 1
        document.set_lines(insert_row, insert_row, new_lines)
        insert_end = insert_row + len(new_lines)
        reindented = self._reindent(document, insert_row, insert_end)

        logger.info("The text has been refiled", extra={"document": document.document_id})
        return InsertionResult(
            target_document=document.document_id,
            heading_title=record.title,
            heading_depth=record.depth,
            inserted_start=insert_row,
            inserted_end=insert_end,
            reindented=reindented,
        )

    def _reindent(self, document: Document, start_row: int, end_row: int) -> bool:
        # The content is already in place, so a failed reindent does not stop the refile.
        try:
            self._reindenter.reindent_range(document, start_row, end_row)
        except ReindentError as exc:
            logger.warning(
                "Reindentation failed, keeping inserted text as is",
                extra={"document": document.document_id, "error": str(exc)},
            )
            return False
        return True

    async def _pick_target(self, picker: TargetPicker | None) -> RefileTarget | None:
        if picker is None:
            raise PickerUnavailableError("A target picker is needed to choose where to refile.")

        result = await picker.pick()
        if result.status is PickerStatus.UNAVAILABLE:
            raise PickerUnavailableError("The target picker is not available.")
        if result.status is PickerStatus.CANCELLED or result.selection is None:
            logger.info("Refile cancelled")
            return None

        selection = result.selection
        try:
            return RefileTarget.from_selection(selection.text, selection.document_id)
        except ValueError as exc:
            raise TargetNotFoundError(str(exc)) from exc
