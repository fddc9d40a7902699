"""Local configuration for norgrefile."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_FILE_SUFFIX = ".norg"
DEFAULT_MAX_HEADING_DEPTH = 7
DEFAULT_INDENT_WIDTH = 0
DEFAULT_LOG_LEVEL = "INFO"

# Hard limit of the outline grammar; configuration may only lower it.
MAX_SUPPORTED_DEPTH = 7

# Root directory searched by the target picker and served by the API.
NORGREFILE_WORKSPACE = Path(os.getenv("NORGREFILE_WORKSPACE", ".")).expanduser().resolve()
NORGREFILE_FILE_SUFFIX = os.getenv("NORGREFILE_FILE_SUFFIX", DEFAULT_FILE_SUFFIX)
NORGREFILE_MAX_HEADING_DEPTH = min(
    int(os.getenv("NORGREFILE_MAX_HEADING_DEPTH", str(DEFAULT_MAX_HEADING_DEPTH))),
    MAX_SUPPORTED_DEPTH,
)
NORGREFILE_STRICT_TARGETS = os.getenv("NORGREFILE_STRICT_TARGETS", "false").lower() == "true"
NORGREFILE_INDENT_WIDTH = int(os.getenv("NORGREFILE_INDENT_WIDTH", str(DEFAULT_INDENT_WIDTH)))
NORGREFILE_LOG_LEVEL = os.getenv("NORGREFILE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
