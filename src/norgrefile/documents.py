"""Document buffers and the stores that hand them out."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Protocol, Sequence

from norgrefile.exceptions import DocumentAccessError
from norgrefile.levels import split_lines
from norgrefile.norg_parser import node_text, parse_document
from norgrefile.schemas import OutlineNode
from norgrefile.utils.logging_config import get_logger

logger = get_logger(__name__)


class Document:
    """An editable document held as a list of lines.

    Line edits follow buffer semantics: rows are zero-based and ranges are
    end-exclusive, so ``set_lines(3, 3, [...])`` inserts before row 3 and
    ``set_lines(3, 5, [])`` deletes rows 3 and 4.
    """

    def __init__(self, document_id: str, lines: Iterable[str] = ()) -> None:
        self.document_id = document_id
        self._lines = list(lines)
        self.modified = False

    @classmethod
    def from_text(cls, document_id: str, text: str) -> Document:
        return cls(document_id, split_lines(text))

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def text(self) -> str:
        """Document content with a trailing newline, as it is written to disk."""
        if not self._lines:
            return ""
        return "\n".join(self._lines) + "\n"

    def __len__(self) -> int:
        return len(self._lines)

    def parse(self) -> OutlineNode:
        """Parse the current content into a fresh outline tree."""
        return parse_document(self._lines, self.document_id)

    def node_text(self, node: OutlineNode) -> str:
        return node_text(node, self._lines)

    def get_lines(self, start: int, end: int) -> list[str]:
        self._check_range(start, end)
        return self._lines[start:end]

    def set_lines(self, start: int, end: int, replacement: Sequence[str]) -> None:
        """Replace rows ``start`` up to ``end`` with ``replacement``."""
        self._check_range(start, end)
        self._lines[start:end] = list(replacement)
        self.modified = True

    def _check_range(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(self._lines):
            raise DocumentAccessError(
                f"Line range {start}:{end} is outside {self.document_id} ({len(self._lines)} lines)"
            )


class DocumentStore(Protocol):
    """Hands out documents by identifier, creating empty ones on demand."""

    def open(self, document_id: str) -> Document: ...


class InMemoryDocumentStore:
    """Document store that keeps everything in memory."""

    def __init__(self, documents: dict[str, str] | None = None) -> None:
        self._documents: dict[str, Document] = {}
        for document_id, text in (documents or {}).items():
            self.add(document_id, text)

    def add(self, document_id: str, text: str) -> Document:
        document = Document.from_text(document_id, text)
        self._documents[document_id] = document
        return document

    def open(self, document_id: str) -> Document:
        if document_id not in self._documents:
            self._documents[document_id] = Document(document_id)
        return self._documents[document_id]

    def text(self, document_id: str) -> str:
        return self.open(document_id).text


class FileDocumentStore:
    """Document store backed by files below a workspace root.

    Identifiers are paths relative to the root (absolute paths inside the
    root are accepted too). Documents are loaded once and kept in memory
    until :meth:`save_all` writes the modified ones back.
    """

    def __init__(self, root: Path) -> None:
        self.root = root.expanduser().resolve()
        self._documents: dict[str, Document] = {}

    def document_id_for(self, document_id: str | Path) -> str:
        """Return the canonical identifier (root-relative POSIX path)."""
        path = Path(document_id).expanduser()
        if not path.is_absolute():
            path = self.root / path
        resolved = path.resolve()
        if not resolved.is_relative_to(self.root):
            raise DocumentAccessError(f"Document {str(document_id)!r} is outside the workspace {self.root}")
        return resolved.relative_to(self.root).as_posix()

    def path_for(self, document_id: str | Path) -> Path:
        return self.root / self.document_id_for(document_id)

    def open(self, document_id: str) -> Document:
        key = self.document_id_for(document_id)
        if key not in self._documents:
            self._documents[key] = self._load(key)
        return self._documents[key]

    def save(self, document_id: str) -> bool:
        """Write a document back to disk if it was modified."""
        key = self.document_id_for(document_id)
        document = self._documents.get(key)
        if document is None or not document.modified:
            return False
        path = self.root / key
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(document.text, encoding="utf-8")
        except OSError as exc:
            raise DocumentAccessError(f"Cannot write {path}: {exc}") from exc
        document.modified = False
        logger.debug("Saved document", extra={"document": key})
        return True

    def save_all(self) -> list[str]:
        """Write every modified document back and return their identifiers."""
        return [key for key in list(self._documents) if self.save(key)]

    def _load(self, key: str) -> Document:
        path = self.root / key
        if not path.exists():
            logger.debug("Creating new document", extra={"document": key})
            return Document(key)
        try:
            return Document.from_text(key, path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentAccessError(f"Cannot read {path}: {exc}") from exc
