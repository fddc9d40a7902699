"""File utilities for scanning workspaces without blocking the event loop."""

from __future__ import annotations

import asyncio
from pathlib import Path


def iter_workspace_files(root: Path, suffix: str) -> list[Path]:
    """List files with the given suffix below ``root``, sorted by path.

    Hidden directories (``.git``, ``.venv`` and the like) are skipped.

    Args:
        root: Workspace directory to scan.
        suffix: File suffix including the dot, e.g. ``".norg"``.

    Returns:
        Matching file paths, or an empty list if ``root`` is not a directory.
    """
    if not root.is_dir():
        return []
    return sorted(
        path
        for path in root.rglob(f"*{suffix}")
        if path.is_file()
        and not any(part.startswith(".") for part in path.relative_to(root).parts[:-1])
    )


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    """Read text from a file asynchronously using a thread pool.

    Args:
        path: Path to the file to read.
        encoding: Text encoding to use.

    Returns:
        The file contents as a string.
    """
    return await asyncio.to_thread(path.read_text, encoding=encoding)


async def list_workspace_files_async(root: Path, suffix: str) -> list[Path]:
    """Run :func:`iter_workspace_files` in a thread pool."""
    return await asyncio.to_thread(iter_workspace_files, root, suffix)
