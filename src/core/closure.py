"""Full-tree closure enumeration.

Depth-first walk with an explicit stack: the start entry first, then for
every popped directory its child directories are pushed followed by its
child files.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Set, Tuple

from core.errors import DirectoryNotFoundError, LimitExceededError
from core.interfaces import DirectoryLister
from core.models import EntryKind, FileSystemEntry, WalkLimits
from core.paths import strip_trailing_sep

logger = logging.getLogger(__name__)


def _start_entry(lister: DirectoryLister, start: str) -> FileSystemEntry:
    # Resolve the start path to exactly one kind before walking.
    kind = lister.kind(start)
    if kind is None:
        raise DirectoryNotFoundError(start)
    path = strip_trailing_sep(start)
    name = path.rstrip("/").rsplit("/", 1)[-1]
    return FileSystemEntry(kind=kind, path=path, name=name)


def closure(
    lister: DirectoryLister,
    start: str,
    *,
    detect_cycles: bool = False,
    limits: Optional[WalkLimits] = None,
) -> List[FileSystemEntry]:
    """Every entry reachable from `start`, including `start` itself.

    With `detect_cycles`, a directory whose canonical path was already
    expanded is recorded but not expanded again. `limits` caps the number
    of entries (LimitExceededError) and the depth that is expanded.
    """
    limits = limits or WalkLimits()
    result: List[FileSystemEntry] = []
    seen: Set[str] = set()
    stack: List[Tuple[FileSystemEntry, int]] = [(_start_entry(lister, start), 0)]

    while stack:
        entry, depth = stack.pop()
        result.append(entry)
        if limits.max_entries is not None and len(result) > limits.max_entries:
            raise LimitExceededError(f"Closure of {start} exceeds {limits.max_entries} entries")

        if entry.kind is not EntryKind.DIRECTORY:
            continue
        if limits.max_depth is not None and depth >= limits.max_depth:
            continue
        if detect_cycles:
            key = lister.canonical(entry.path)
            if key in seen:
                logger.debug("closure: skipping revisit of %s (%s)", entry.path, key)
                continue
            seen.add(key)

        dirs, files = lister.list_children(entry.path)
        for d in dirs:
            stack.append((d, depth + 1))
        for f in files:
            stack.append((f, depth + 1))

    return result
