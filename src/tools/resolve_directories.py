"""MCP tool that resolves a glob pattern to matching directories.

Registers the 'resolve_directories' tool which runs the segment-by-segment
descent in directory-only mode and returns project-relative paths.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from config import ALLOW_OUTSIDE_ROOT, DETECT_CYCLES, MAX_DEPTH, MAX_ENTRIES, PROJECT_ROOT
from core.interfaces import DirectoryLister
from core.models import WalkLimits
from sources.glob_factory import get_glob
from tools.results import present_entries


def register(mcp: FastMCP, *, lister: Optional[DirectoryLister] = None) -> None:
    @mcp.tool(name="resolve_directories")
    async def resolve_directories(pattern: Optional[str] = None, root: str = ".") -> List[str]:
        """Resolve a glob pattern to the directories it matches.

        Each '/'-separated segment is matched against directory names one
        level at a time ('*', '?' and '[...]' classes; '.' and '..' move
        within the tree).

        Params:
          - pattern: glob pattern, relative to root or absolute. When omitted,
            the root directory itself is returned.
          - root: directory inside the project the pattern resolves against (default: ".").

        Returns:
          Project-relative directory paths ending in '/', in listing order.

        Raises:
          DirectoryNotFoundError if a traversed directory is missing;
          AccessDeniedError for results outside the project root.
        """
        glob = get_glob(
            project_root=PROJECT_ROOT,
            root=root,
            lister=lister,
            detect_cycles=DETECT_CYCLES,
            limits=WalkLimits.from_config(max_entries=MAX_ENTRIES, max_depth=MAX_DEPTH),
        )

        # Offload blocking filesystem IO to a thread to keep async loop responsive
        entries = await asyncio.to_thread(glob.resolve_directories, pattern)
        return present_entries(entries, project_root=PROJECT_ROOT, allow_outside=ALLOW_OUTSIDE_ROOT)
