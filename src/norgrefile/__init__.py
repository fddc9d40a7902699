"""norgrefile: move headings and list items between Norg documents."""

from norgrefile.documents import Document, FileDocumentStore, InMemoryDocumentStore
from norgrefile.exceptions import (
    AmbiguousTargetError,
    DocumentAccessError,
    HeadingDepthError,
    InconsistentTreeError,
    NoRefilableNodeError,
    PickerUnavailableError,
    RefileError,
    RefileNotice,
    ReindentError,
    SelfRefileError,
    TargetNotFoundError,
)
from norgrefile.headings import extract_headings
from norgrefile.levels import normalize_heading_levels
from norgrefile.norg_parser import node_at, parse_document
from norgrefile.outline import find_enclosing_structural_node
from norgrefile.picker import WorkspacePicker
from norgrefile.refile import Refiler
from norgrefile.schemas import HeadingRecord, InsertionResult, RefileResult, RefileTarget
from norgrefile.targets import find_target_heading

__all__ = [
    "AmbiguousTargetError",
    "Document",
    "DocumentAccessError",
    "FileDocumentStore",
    "HeadingDepthError",
    "HeadingRecord",
    "InMemoryDocumentStore",
    "InconsistentTreeError",
    "InsertionResult",
    "NoRefilableNodeError",
    "PickerUnavailableError",
    "RefileError",
    "RefileNotice",
    "RefileResult",
    "RefileTarget",
    "Refiler",
    "ReindentError",
    "SelfRefileError",
    "TargetNotFoundError",
    "WorkspacePicker",
    "extract_headings",
    "find_enclosing_structural_node",
    "find_target_heading",
    "node_at",
    "normalize_heading_levels",
    "parse_document",
]
