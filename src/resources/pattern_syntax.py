# src/resources/pattern_syntax.py

from mcp.server.fastmcp import FastMCP


PATTERN_SYNTAX = """\
Glob patterns (resolve_directories, resolve_contents)
-----------------------------------------------------
A pattern is split into segments at '/' or '\\'. Each segment is matched
against the names of one directory level:

  *        any run of characters (never crosses a separator)
  ?        exactly one character
  [...]    character class, passed to the regex engine as written;
           a '/' inside a class does not split the segment and
           '\\]' inside a class does not close it
  .        stay in the current directory
  ..       move to the parent directory

Other regex metacharacters match themselves. Patterns starting at a
filesystem root ignore the tool's root argument.

Examples: src/*.py   */tests   docs/[a-m]*.md   ../shared/*

Regex matching (match_regex)
----------------------------
Every entry under root is listed and its path relative to root
(e.g. 'src/app/main.py') is searched with a Python regular expression.
The expression is not anchored: use '^' and '$' explicitly.

Examples: \\.py$   ^docs/   (^|/)test_[^/]*\\.py$
"""


def register_resources(mcp: FastMCP) -> None:
    """
    Register pattern documentation resources for the MCP server.
    """

    @mcp.resource(
        "pathglob://docs/pattern-syntax",
        mime_type="text/plain",
        description="Glob and regex pattern syntax accepted by the path tools"
    )
    def pattern_syntax() -> str:
        return PATTERN_SYNTAX
