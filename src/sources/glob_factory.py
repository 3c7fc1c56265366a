"""Factory for building a Glob bound to a directory inside the project.

Exposes get_glob which resolves a user-supplied root under the project
root (with a containment check) and wires the directory lister and walk
settings into a Glob.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from core.errors import AccessDeniedError, ValidationError
from core.glob import Glob
from core.interfaces import DirectoryLister
from core.models import WalkLimits
from core.paths import clean_root
from sources.local_source import LocalLister


def resolve_under_root(project_root: Path, root: str) -> Path:
    raw = (root or "").strip()
    if not raw:
        raise ValidationError("Root is empty")

    base = project_root.resolve()
    p = (base / clean_root(raw)).resolve()

    # Strong containment check to prevent directory traversal/outside access
    try:
        p.relative_to(base)
    except ValueError as e:
        raise AccessDeniedError("Access outside project root is not allowed") from e

    return p


def get_glob(
    *,
    project_root: Path,
    root: str = ".",
    lister: Optional[DirectoryLister] = None,
    detect_cycles: bool = False,
    limits: Optional[WalkLimits] = None,
) -> Glob:
    """
    Factory that returns a Glob whose base directory is `root` inside `project_root`.

    The lister defaults to the local filesystem.
    """
    base = resolve_under_root(project_root, root)
    return Glob(
        str(base),
        lister=lister or LocalLister(),
        detect_cycles=detect_cycles,
        limits=limits,
    )
