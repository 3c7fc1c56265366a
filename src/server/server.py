"""Server bootstrap for the path-matching MCP service.

Creates the FastMCP instance, wires one shared directory lister into
the tools, registers resources, and starts the MCP server (stdio
transport).
"""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from config import LOG_LEVEL
from sources.local_source import LocalLister

from tools.match_regex import register as register_match_regex
from tools.resolve_contents import register as register_resolve_contents
from tools.resolve_directories import register as register_resolve_directories

from resources.pattern_syntax import register_resources

mcp = FastMCP("pathglob-mcp")


def register_tools() -> None:
    lister = LocalLister()

    register_resolve_directories(mcp, lister=lister)
    register_resolve_contents(mcp, lister=lister)
    register_match_regex(mcp, lister=lister)


def register_all() -> None:
    register_tools()
    register_resources(mcp)


register_all()


def configure_logging() -> None:
    # stdout is the stdio transport; log to stderr only.
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    configure_logging()
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
