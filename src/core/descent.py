"""Segment-by-segment directory descent.

Resolves a multi-segment glob pattern against a starting directory.
Each step consumes exactly one segment: `.` stays put, `..` moves to the
parent, a plain name steps into that child, and a wildcard segment is
matched against the names of the current directory's children. The
remaining pattern is then resolved inside every selected directory.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from core.errors import DirectoryNotFoundError, LimitExceededError
from core.interfaces import DirectoryLister
from core.models import EntryKind, FileSystemEntry, WalkLimits
from core.paths import join, parent_dir, strip_trailing_sep
from core.patterns import compile_segment, has_magic, split_first_segment

logger = logging.getLogger(__name__)


def directory_entry(path: str) -> FileSystemEntry:
    """Build the Directory entry for an absolute path."""
    p = strip_trailing_sep(path)
    name = p.rstrip("/").rsplit("/", 1)[-1]
    return FileSystemEntry(kind=EntryKind.DIRECTORY, path=p, name=name)


class _Budget:
    """Running entry count and depth ceiling shared by one descent call."""

    def __init__(self, limits: Optional[WalkLimits]) -> None:
        self.limits = limits or WalkLimits()
        self.produced = 0

    def can_descend(self, depth: int, path: str) -> bool:
        max_depth = self.limits.max_depth
        if max_depth is not None and depth >= max_depth:
            logger.debug("descent: depth limit %d reached at %s", max_depth, path)
            return False
        return True

    def take(self, entries: List[FileSystemEntry]) -> List[FileSystemEntry]:
        self.produced += len(entries)
        cap = self.limits.max_entries
        if cap is not None and self.produced > cap:
            logger.debug("descent: entry limit %d exceeded (%d)", cap, self.produced)
            raise LimitExceededError(f"Pattern produced more than {cap} entries")
        return entries


def _descend(
    lister: DirectoryLister,
    cwd: str,
    pattern: str,
    *,
    include_files: bool,
    budget: _Budget,
    depth: int = 0,
) -> List[FileSystemEntry]:
    if lister.kind(cwd) is not EntryKind.DIRECTORY:
        raise DirectoryNotFoundError(cwd)

    first, rest = split_first_segment(pattern)

    # Relative segments never reach the translator.
    if first == ".":
        return _descend(lister, cwd, rest, include_files=include_files, budget=budget, depth=depth)
    if first == "..":
        return _descend(lister, parent_dir(cwd), rest, include_files=include_files, budget=budget, depth=depth)

    # A segment without wildcards names one child: a missing directory on the
    # way down is an error rather than an empty match. The entry name is the
    # pattern text, which on a case-insensitive filesystem may differ in case
    # from the name a listing would report.
    if first and not has_magic(first):
        child = join(cwd, first)
        kind = lister.kind(child)
        if rest:
            if kind is None:
                raise DirectoryNotFoundError(child)
            if kind is not EntryKind.DIRECTORY or not budget.can_descend(depth + 1, child):
                return []
            return _descend(lister, child, rest, include_files=include_files, budget=budget, depth=depth + 1)
        if kind is EntryKind.DIRECTORY or (include_files and kind is EntryKind.FILE):
            return budget.take([FileSystemEntry(kind=kind, path=child, name=first)])
        return []

    if first:
        regex = compile_segment(first)
        children, child_files = lister.list_children(cwd)
        dirs = [d for d in children if regex.match(d.name)]
        files = [f for f in child_files if regex.match(f.name)] if include_files else []
    elif include_files:
        dirs, files = lister.list_children(cwd)
    else:
        # Empty segment in directory mode: stay in the current directory.
        dirs, files = [directory_entry(cwd)], []

    if not rest:
        return budget.take(list(dirs) + list(files))

    results: List[FileSystemEntry] = []
    for d in dirs:
        # An empty segment stays put, so it does not count as a level.
        next_depth = depth if d.path == strip_trailing_sep(cwd) else depth + 1
        if not budget.can_descend(next_depth, d.path):
            continue
        results.extend(
            _descend(lister, d.path, rest, include_files=include_files, budget=budget, depth=next_depth)
        )
    return results


def resolve_directories(
    lister: DirectoryLister,
    start: str,
    pattern: str,
    *,
    limits: Optional[WalkLimits] = None,
) -> List[FileSystemEntry]:
    """Directories under `start` matching every segment of `pattern`."""
    logger.debug("resolve_directories start=%s pattern=%r", start, pattern)
    return _descend(lister, start, pattern, include_files=False, budget=_Budget(limits))


def resolve_contents(
    lister: DirectoryLister,
    start: str,
    pattern: str,
    *,
    limits: Optional[WalkLimits] = None,
) -> List[FileSystemEntry]:
    """Directories and files under `start` matching `pattern`; files only match the last segment.

    `limits` stops the walk as soon as more than `max_entries` entries are
    produced, and skips directories deeper than `max_depth` below `start`.
    """
    logger.debug("resolve_contents start=%s pattern=%r", start, pattern)
    return _descend(lister, start, pattern, include_files=True, budget=_Budget(limits))
