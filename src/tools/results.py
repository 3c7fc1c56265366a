"""Conversion of engine entries into the paths returned by the MCP tools.

Paths are shown relative to the project root with '/' separators;
directories carry a trailing '/' and the project root itself is '.'.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from core.errors import AccessDeniedError
from core.models import FileSystemEntry
from core.paths import as_base_dir, strip_prefix, strip_trailing_sep


def present_entries(
    entries: Iterable[FileSystemEntry],
    *,
    project_root: Path,
    allow_outside: bool = False,
) -> List[str]:
    base = as_base_dir(str(project_root.resolve()))
    root_path = strip_trailing_sep(base)

    out: List[str] = []
    for entry in entries:
        if entry.path == root_path:
            out.append(".")
            continue

        rel = strip_prefix(entry.path, base)
        if rel == entry.path and not allow_outside:
            # Rooted patterns and '..' segments can leave the project root
            raise AccessDeniedError(f"Result outside project root is not allowed: {entry.path}")

        if entry.is_directory and not rel.endswith("/"):
            rel += "/"
        out.append(rel)
    return out
