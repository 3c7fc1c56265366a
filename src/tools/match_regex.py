"""MCP tool that filters a whole directory tree with a regular expression.

Registers the 'match_regex' tool: the full tree under root is walked and
each entry's root-relative path is searched with the given expression.
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
    @mcp.tool(name="match_regex")
    async def match_regex(expr: Optional[str] = None, root: str = ".") -> List[str]:
        """List every file and directory under root whose relative path matches a regex.

        Params:
          - expr: Python regular expression (required), searched anywhere in the
            '/'-separated path relative to root, e.g. r"\\.py$" or r"^docs/".
          - root: directory inside the project to walk (default: ".").

        Returns:
          Project-relative paths in depth-first walk order (directories end in '/').

        Raises:
          InvalidPatternError if expr is missing or not a valid regex;
          LimitExceededError if the walk exceeds MAX_ENTRIES.
        """
        glob = get_glob(
            project_root=PROJECT_ROOT,
            root=root,
            lister=lister,
            detect_cycles=DETECT_CYCLES,
            limits=WalkLimits.from_config(max_entries=MAX_ENTRIES, max_depth=MAX_DEPTH),
        )

        entries = await asyncio.to_thread(glob.match_by_regex, expr)
        return present_entries(entries, project_root=PROJECT_ROOT, allow_outside=ALLOW_OUTSIDE_ROOT)
