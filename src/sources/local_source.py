from __future__ import annotations

import os
from typing import List, Optional, Tuple

from core.models import EntryKind, FileSystemEntry
from core.paths import join, to_posix


"""Local filesystem DirectoryLister implementation.

Thin adapter over os.scandir: reports entry kinds and lists the
immediate children of a directory, ordered by name, with every path in
the engine's '/' separator form.
"""


class LocalLister:
    # Local filesystem implementation of DirectoryLister.

    def kind(self, path: str) -> Optional[EntryKind]:
        if os.path.isdir(path):
            return EntryKind.DIRECTORY
        if os.path.exists(path):
            return EntryKind.FILE
        return None

    def list_children(self, path: str) -> Tuple[List[FileSystemEntry], List[FileSystemEntry]]:
        dirs: List[FileSystemEntry] = []
        files: List[FileSystemEntry] = []
        base = to_posix(path)

        with os.scandir(path) as it:
            for child in sorted(it, key=lambda e: e.name):
                try:
                    # Follows links: a linked directory is listed (and walked) as a directory.
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                entry = FileSystemEntry(
                    kind=EntryKind.DIRECTORY if is_dir else EntryKind.FILE,
                    path=join(base, child.name),
                    name=child.name,
                )
                (dirs if is_dir else files).append(entry)

        return dirs, files

    def canonical(self, path: str) -> str:
        return to_posix(os.path.realpath(path))
