"""Public entry point of the path-matching engine.

A Glob is bound to one base directory. Relative patterns resolve against
it; rooted patterns resolve against their own root. The only state kept
between calls is the base directory string.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional, Sequence, Tuple

from core import closure as closure_mod
from core import descent
from core.errors import DirectoryNotFoundError, LimitExceededError
from core.interfaces import DirectoryLister
from core.matcher import PathRegex, filter_matching
from core.models import EntryKind, FileSystemEntry, WalkLimits
from core.paths import as_base_dir, is_rooted, split_root, strip_trailing_sep
from sources.local_source import LocalLister

logger = logging.getLogger(__name__)


class Glob:
    def __init__(
        self,
        base_dir: Optional[str] = None,
        *,
        lister: Optional[DirectoryLister] = None,
        detect_cycles: bool = False,
        limits: Optional[WalkLimits] = None,
    ) -> None:
        self._base_dir = as_base_dir(base_dir if base_dir is not None else os.getcwd())
        self._lister: DirectoryLister = lister or LocalLister()
        self._detect_cycles = detect_cycles
        self._limits = limits or WalkLimits()

    @property
    def base_dir(self) -> str:
        """Absolute base directory with '/' separators and a trailing '/'."""
        return self._base_dir

    def _start(self, pattern: str) -> Tuple[str, str]:
        if is_rooted(pattern):
            return split_root(pattern)
        return self._base_dir, pattern

    def _capped(self, entries: List[FileSystemEntry]) -> List[FileSystemEntry]:
        cap = self._limits.max_entries
        if cap is not None and len(entries) > cap:
            logger.debug("entry limit %d exceeded (%d)", cap, len(entries))
            raise LimitExceededError(f"Pattern produced {len(entries)} entries, limit is {cap}")
        return entries

    def _require_base(self) -> None:
        if self._lister.kind(self._base_dir) is not EntryKind.DIRECTORY:
            raise DirectoryNotFoundError(self._base_dir)

    def resolve_directories(self, pattern: Optional[str] = None) -> List[FileSystemEntry]:
        """Directories matching `pattern`; with no pattern, the base directory itself."""
        if pattern is None:
            self._require_base()
            return [descent.directory_entry(self._base_dir)]
        start, rest = self._start(pattern)
        return descent.resolve_directories(self._lister, start, rest, limits=self._limits)

    def resolve_contents(self, pattern: Optional[str] = None) -> List[FileSystemEntry]:
        """Directories and files matching `pattern`; with no pattern, the base directory's children."""
        if pattern is None:
            self._require_base()
            dirs, files = self._lister.list_children(self._base_dir)
            return self._capped(list(dirs) + list(files))
        start, rest = self._start(pattern)
        return descent.resolve_contents(self._lister, start, rest, limits=self._limits)

    def resolve_contents_multi(self, patterns: Optional[Sequence[str]] = None) -> List[FileSystemEntry]:
        """Concatenation of resolve_contents over `patterns`, in order."""
        if patterns is None:
            return self.resolve_contents(None)
        out: List[FileSystemEntry] = []
        for pattern in patterns:
            out.extend(self.resolve_contents(pattern))
        return self._capped(out)

    def closure(self) -> List[FileSystemEntry]:
        """Every entry under the base directory, the base directory included."""
        self._require_base()
        return closure_mod.closure(
            self._lister,
            strip_trailing_sep(self._base_dir),
            detect_cycles=self._detect_cycles,
            limits=self._limits,
        )

    def match_by_regex(self, expr: Optional[str]) -> List[FileSystemEntry]:
        """Entries of the closure whose path relative to the base directory matches `expr`."""
        logger.debug("match_by_regex base=%s expr=%r", self._base_dir, expr)
        # Compile before walking so a bad expression fails fast.
        regex = PathRegex(expr)
        return filter_matching(regex, self.closure(), prefix=self._base_dir)
