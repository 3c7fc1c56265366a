"""MCP tool that resolves glob patterns to matching files and directories.

Registers the 'resolve_contents' tool: intermediate segments select
directories to descend into, the last segment selects files and
directories alike.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from config import ALLOW_OUTSIDE_ROOT, DETECT_CYCLES, MAX_DEPTH, MAX_ENTRIES, PROJECT_ROOT
from core.errors import ValidationError
from core.interfaces import DirectoryLister
from core.models import WalkLimits
from sources.glob_factory import get_glob
from tools.results import present_entries


def register(mcp: FastMCP, *, lister: Optional[DirectoryLister] = None) -> None:
    @mcp.tool(name="resolve_contents")
    async def resolve_contents(
        pattern: Optional[str] = None,
        patterns: Optional[List[str]] = None,
        root: str = ".",
    ) -> List[str]:
        """Resolve one or more glob patterns to matching files and directories.

        Params:
          - pattern: a single glob pattern, relative to root or absolute.
          - patterns: several glob patterns; results are concatenated in order.
            Mutually exclusive with pattern. When both are omitted the
            immediate children of root are returned.
          - root: directory inside the project the patterns resolve against (default: ".").

        Returns:
          Project-relative paths (directories end in '/'); per pattern,
          directories come before files, in listing order.

        Raises:
          ValidationError if both pattern and patterns are given;
          DirectoryNotFoundError if a traversed directory is missing;
          AccessDeniedError for results outside the project root.
        """
        if pattern is not None and patterns is not None:
            raise ValidationError("Pass either pattern or patterns, not both")

        glob = get_glob(
            project_root=PROJECT_ROOT,
            root=root,
            lister=lister,
            detect_cycles=DETECT_CYCLES,
            limits=WalkLimits.from_config(max_entries=MAX_ENTRIES, max_depth=MAX_DEPTH),
        )

        if patterns is not None:
            entries = await asyncio.to_thread(glob.resolve_contents_multi, patterns)
        else:
            entries = await asyncio.to_thread(glob.resolve_contents, pattern)
        return present_entries(entries, project_root=PROJECT_ROOT, allow_outside=ALLOW_OUTSIDE_ROOT)
