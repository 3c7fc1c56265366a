"""Core protocol and interface definitions.

Defines the DirectoryLister protocol: the only I/O boundary of the
pattern engine. Implementations report what kind of entry a path is and
list the immediate children of a directory.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Tuple

from core.models import EntryKind, FileSystemEntry


class DirectoryLister(Protocol):
    """Contract for any directory-listing backend (local disk, in-memory, ...)."""

    def kind(self, path: str) -> Optional[EntryKind]:
        """Return the kind of `path`, or None when it does not exist."""
        ...

    def list_children(self, path: str) -> Tuple[List[FileSystemEntry], List[FileSystemEntry]]:
        """Return (child directories, child files) of the directory `path`."""
        ...

    def canonical(self, path: str) -> str:
        """Return a canonical form of `path` used to detect revisits."""
        ...
