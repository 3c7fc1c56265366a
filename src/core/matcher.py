"""Whole-path regex matching over a closure.

Unlike the glob descent, the expression here is a raw regex supplied by
the caller and is searched (not anchored) in the path of each entry
relative to the base directory.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from core.errors import InvalidPatternError
from core.models import FileSystemEntry
from core.paths import strip_prefix


class PathRegex:
    def __init__(self, expr: Optional[str]) -> None:
        if expr is None:
            raise InvalidPatternError("Regex expression cannot be None")
        try:
            self._re = re.compile(expr)
        except re.error as e:
            raise InvalidPatternError(f"Invalid regex {expr!r}: {e}") from e

    def relative(self, prefix: str, entry: FileSystemEntry) -> str:
        return strip_prefix(entry.path, prefix)

    def is_match(self, prefix: str, entry: FileSystemEntry) -> bool:
        return self._re.search(self.relative(prefix, entry)) is not None


def filter_matching(
    regex: PathRegex,
    entries: Iterable[FileSystemEntry],
    *,
    prefix: str,
) -> List[FileSystemEntry]:
    """Entries whose path relative to `prefix` contains a match for `regex`."""
    return [e for e in entries if regex.is_match(prefix, e)]
