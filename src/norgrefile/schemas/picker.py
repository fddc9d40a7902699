"""Target picker models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class PickerStatus(str, Enum):
    """How a target picker session ended."""

    SELECTED = "selected"
    CANCELLED = "cancelled"
    UNAVAILABLE = "unavailable"


class PickerSelection(BaseModel):
    """A heading line offered by, or chosen in, the picker."""

    text: str
    document_id: str
    row: int | None = None


class PickerResult(BaseModel):
    """Result of a picker session; ``selection`` is set only when selected."""

    status: PickerStatus
    selection: PickerSelection | None = None

    @classmethod
    def selected(cls, selection: PickerSelection) -> PickerResult:
        return cls(status=PickerStatus.SELECTED, selection=selection)

    @classmethod
    def cancelled(cls) -> PickerResult:
        return cls(status=PickerStatus.CANCELLED)

    @classmethod
    def unavailable(cls) -> PickerResult:
        return cls(status=PickerStatus.UNAVAILABLE)
