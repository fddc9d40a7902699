"""Test setup for norgrefile."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from norgrefile.documents import InMemoryDocumentStore  # noqa: E402
from norgrefile.refile import Refiler  # noqa: E402
from norgrefile.reindent import NullReindenter  # noqa: E402

INBOX = """\
* Inbox
** Notes
   Some note text.
*** Detail
    Detail text.
** Keep
- first item
- second item
  continued

~ ordered one
"""

ARCHIVE = """\
* Archive
  Old stuff.
** Tasks
* Projects
** Done
"""


@pytest.fixture
def inbox_text() -> str:
    return INBOX


@pytest.fixture
def archive_text() -> str:
    return ARCHIVE


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """In-memory store holding ``inbox.norg`` and ``archive.norg``."""
    return InMemoryDocumentStore({"inbox.norg": INBOX, "archive.norg": ARCHIVE})


@pytest.fixture
def refiler(store: InMemoryDocumentStore) -> Refiler:
    """Refiler that leaves inserted lines untouched by reindentation."""
    return Refiler(store, reindenter=NullReindenter())


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Workspace directory holding the sample documents on disk."""
    (tmp_path / "inbox.norg").write_text(INBOX, encoding="utf-8")
    (tmp_path / "archive.norg").write_text(ARCHIVE, encoding="utf-8")
    return tmp_path
