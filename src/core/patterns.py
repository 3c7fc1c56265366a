"""Glob segment translation and pattern segmentation.

A pattern is consumed one segment at a time: `split_first_segment`
peels off the leading segment (character classes are opaque, so a
separator inside `[...]` does not split), and `glob_to_regex` turns that
segment into an anchored regular expression.
"""

from __future__ import annotations

import re
from typing import Pattern, Tuple

from core.errors import InvalidPatternError

# Characters escaped when they appear literally outside a character class.
REGEX_SPECIAL_CHARS = frozenset("[\\^$.|?*+()")

SEPARATORS = frozenset("/\\")

MAGIC_CHARS = frozenset("*?[")


def glob_to_regex(segment: str) -> str:
    """Translate one glob segment into an anchored regex string.

    `*` becomes `.*`, `?` becomes `.`, and `[...]` is copied through
    unmodified. Inside a class a backslash escapes the next character, so
    `\\]` does not close it. An unterminated class swallows the rest of
    the segment and is closed before the end anchor.
    """
    out = ["^"]
    in_class = False
    class_start = 0
    i = 0
    n = len(segment)
    while i < n:
        c = segment[i]
        if in_class:
            if c == "\\":
                # A trailing backslash has nothing to escape; keep it literal.
                out.append(segment[i:i + 2] if i + 1 < n else "\\\\")
                i += 2
                continue
            if c == "]":
                in_class = False
            out.append(c)
        elif c == "*":
            out.append(".*")
        elif c == "?":
            out.append(".")
        elif c == "[":
            in_class = True
            class_start = len(out)
            out.append(c)
        elif c in REGEX_SPECIAL_CHARS:
            out.append("\\" + c)
        else:
            out.append(c)
        i += 1

    if in_class:
        if len(out) == class_start + 1:
            # Lone '[' at the end: nothing to put in a class, match it literally.
            out[class_start] = "\\["
        else:
            out.append("]")
    out.append("$")
    return "".join(out)


def has_magic(segment: str) -> bool:
    return any(c in MAGIC_CHARS for c in segment)


def compile_segment(segment: str) -> Pattern[str]:
    """Compile a glob segment; raises InvalidPatternError for a class the regex engine rejects."""
    expr = glob_to_regex(segment)
    try:
        return re.compile(expr)
    except re.error as e:
        raise InvalidPatternError(f"Invalid glob segment {segment!r}: {e}") from e


def split_first_segment(pattern: str) -> Tuple[str, str]:
    """Split `pattern` at its first separator outside a character class.

    Returns (first, rest); `rest` is '' when `first` is the last segment.

    >>> split_first_segment("a[b/c]d/e")
    ('a[b/c]d', 'e')
    """
    n = len(pattern)
    j = 0
    while j < n:
        c = pattern[j]
        if c == "[":
            j += 1
            while j < n:
                if pattern[j] == "\\":
                    j += 1
                elif pattern[j] == "]":
                    break
                j += 1
        elif c in SEPARATORS:
            break
        j += 1

    if j >= n:
        return pattern, ""
    return pattern[:j], pattern[j + 1:]
