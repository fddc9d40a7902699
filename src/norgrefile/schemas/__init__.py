"""Shared schemas for norgrefile."""

from norgrefile.schemas.nodes import STRUCTURAL_KINDS, NodeKind, OutlineNode, TextRange
from norgrefile.schemas.picker import PickerResult, PickerSelection, PickerStatus
from norgrefile.schemas.results import InsertionResult, RefileResult
from norgrefile.schemas.targets import HeadingRecord, RefileTarget

__all__ = [
    "STRUCTURAL_KINDS",
    "HeadingRecord",
    "InsertionResult",
    "NodeKind",
    "OutlineNode",
    "PickerResult",
    "PickerSelection",
    "PickerStatus",
    "RefileResult",
    "RefileTarget",
    "TextRange",
]
