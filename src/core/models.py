"""Immutable data models shared by the engine and the MCP tools.

Includes the filesystem entry variant (FileSystemEntry tagged with an
EntryKind) and the optional WalkLimits ceilings for tree walks.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class EntryKind(str, enum.Enum):
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class FileSystemEntry:
    """One directory or file produced by a DirectoryLister.

    `path` is absolute with '/' separators and no trailing separator
    (except for a filesystem root); `name` is the last path component.
    """

    kind: EntryKind
    path: str
    name: str

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class WalkLimits:
    """Optional ceilings for a walk; None means unlimited.

    - max_entries: maximum number of entries a single call may produce.
    - max_depth: maximum directory depth below the start of a closure.
    """

    max_entries: Optional[int] = None
    max_depth: Optional[int] = None

    @classmethod
    def from_config(cls, *, max_entries: int, max_depth: int) -> "WalkLimits":
        # Non-positive values disable a ceiling.
        return cls(
            max_entries=max_entries if max_entries > 0 else None,
            max_depth=max_depth if max_depth > 0 else None,
        )
