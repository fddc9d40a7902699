"""Tests for the workspace target picker."""

from __future__ import annotations

from pathlib import Path

import pytest

from norgrefile.documents import FileDocumentStore
from norgrefile.picker import WorkspacePicker, collect_heading_candidates
from norgrefile.schemas import PickerSelection, PickerStatus, RefileTarget


@pytest.fixture
def picker_workspace(workspace: Path) -> Path:
    (workspace / "sub").mkdir()
    (workspace / "sub" / "deep.norg").write_text("text\n  *** Nested target\n", encoding="utf-8")
    (workspace / ".hidden").mkdir()
    (workspace / ".hidden" / "skip.norg").write_text("* Hidden\n", encoding="utf-8")
    (workspace / "notes.md").write_text("* Not norg\n", encoding="utf-8")
    return workspace


class TestCollectHeadingCandidates:
    """Tests for collect_heading_candidates function."""

    @pytest.mark.asyncio
    async def test_collects_headings_of_norg_files(self, picker_workspace: Path) -> None:
        candidates = await collect_heading_candidates(picker_workspace)

        assert [(c.document_id, c.row, c.text) for c in candidates] == [
            ("archive.norg", 0, "* Archive"),
            ("archive.norg", 2, "** Tasks"),
            ("archive.norg", 3, "* Projects"),
            ("archive.norg", 4, "** Done"),
            ("inbox.norg", 0, "* Inbox"),
            ("inbox.norg", 1, "** Notes"),
            ("inbox.norg", 3, "*** Detail"),
            ("inbox.norg", 5, "** Keep"),
            ("sub/deep.norg", 1, "  *** Nested target"),
        ]

    @pytest.mark.asyncio
    async def test_missing_workspace_has_no_candidates(self, tmp_path: Path) -> None:
        assert await collect_heading_candidates(tmp_path / "nowhere") == []

    @pytest.mark.asyncio
    async def test_candidates_convert_to_targets(self, picker_workspace: Path) -> None:
        candidates = await collect_heading_candidates(picker_workspace)

        target = RefileTarget.from_selection(candidates[-1].text, candidates[-1].document_id)

        assert target == RefileTarget(
            document_id="sub/deep.norg", heading_title="Nested target", heading_depth=3
        )

    @pytest.mark.asyncio
    async def test_rows_match_document_rows(self, workspace: Path) -> None:
        """Form feeds do not shift the row numbers of later headings."""
        (workspace / "paged.norg").write_text("text\x0cmore\n* After page\n", encoding="utf-8")

        candidates = await collect_heading_candidates(workspace)

        paged = [c for c in candidates if c.document_id == "paged.norg"]
        assert [(c.row, c.text) for c in paged] == [(1, "* After page")]
        document = FileDocumentStore(workspace).open("paged.norg")
        assert document.lines[paged[0].row] == "* After page"


class TestWorkspacePicker:
    """Tests for WorkspacePicker."""

    @pytest.mark.asyncio
    async def test_without_chooser_is_unavailable(self, workspace: Path) -> None:
        result = await WorkspacePicker(workspace).pick()

        assert result.status is PickerStatus.UNAVAILABLE
        assert result.selection is None

    @pytest.mark.asyncio
    async def test_chooser_selection(self, workspace: Path) -> None:
        offered: list[PickerSelection] = []

        async def choose_second(candidates: list[PickerSelection]) -> PickerSelection | None:
            offered.extend(candidates)
            return candidates[1]

        result = await WorkspacePicker(workspace, chooser=choose_second).pick()

        assert result.status is PickerStatus.SELECTED
        assert result.selection == offered[1]
        assert result.selection.text == "** Tasks"

    @pytest.mark.asyncio
    async def test_dismissed_chooser_cancels(self, workspace: Path) -> None:
        async def dismiss(candidates: list[PickerSelection]) -> PickerSelection | None:
            return None

        result = await WorkspacePicker(workspace, chooser=dismiss).pick()

        assert result.status is PickerStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_custom_suffix(self, picker_workspace: Path) -> None:
        async def first(candidates: list[PickerSelection]) -> PickerSelection | None:
            return candidates[0] if candidates else None

        result = await WorkspacePicker(picker_workspace, chooser=first, suffix=".md").pick()

        assert result.selection.document_id == "notes.md"
