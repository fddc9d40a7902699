"""Interactive selection of a refile target among workspace headings."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Awaitable, Callable, Protocol

from norgrefile.config import NORGREFILE_FILE_SUFFIX, NORGREFILE_WORKSPACE
from norgrefile.levels import split_lines
from norgrefile.schemas import PickerResult, PickerSelection
from norgrefile.utils.file_utils import list_workspace_files_async, read_text_async
from norgrefile.utils.logging_config import get_logger

logger = get_logger(__name__)

_CANDIDATE_RE = re.compile(r"^\s*\*+\s+\S")

Chooser = Callable[[list[PickerSelection]], Awaitable[PickerSelection | None]]


class TargetPicker(Protocol):
    """Asks the user for a target heading."""

    async def pick(self) -> PickerResult: ...


async def collect_heading_candidates(
    workspace: Path,
    *,
    suffix: str = NORGREFILE_FILE_SUFFIX,
) -> list[PickerSelection]:
    """Collect every heading line of the workspace documents.

    Document identifiers are POSIX paths relative to ``workspace``, so they
    can be opened through a ``FileDocumentStore`` rooted at the same place.
    Files that cannot be decoded are skipped.
    """
    candidates: list[PickerSelection] = []
    for path in await list_workspace_files_async(workspace, suffix):
        try:
            text = await read_text_async(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Skipping unreadable document", extra={"path": str(path), "error": str(exc)})
            continue
        document_id = path.relative_to(workspace).as_posix()
        for row, line in enumerate(split_lines(text)):
            if _CANDIDATE_RE.match(line):
                candidates.append(PickerSelection(text=line.rstrip(), document_id=document_id, row=row))
    return candidates


class WorkspacePicker:
    """Offers all workspace headings to a chooser callback.

    The chooser receives the candidate list and returns the chosen entry, or
    ``None`` when the user dismisses the picker. Without a chooser the picker
    reports itself unavailable.
    """

    def __init__(
        self,
        workspace: Path = NORGREFILE_WORKSPACE,
        *,
        chooser: Chooser | None = None,
        suffix: str = NORGREFILE_FILE_SUFFIX,
    ) -> None:
        self.workspace = workspace.expanduser().resolve()
        self._chooser = chooser
        self._suffix = suffix

    async def pick(self) -> PickerResult:
        if self._chooser is None:
            return PickerResult.unavailable()
        candidates = await collect_heading_candidates(self.workspace, suffix=self._suffix)
        logger.debug("Offering targets", extra={"candidates": len(candidates)})
        choice = await self._chooser(candidates)
        if choice is None:
            return PickerResult.cancelled()
        return PickerResult.selected(choice)
