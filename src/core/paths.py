from __future__ import annotations

import os
from typing import Tuple

"""
Path utilities used across the project.

Provides the path collaborator of the pattern engine (absolute form,
root splitting, parent lookup, prefix stripping) with every path kept
in a single '/' separator form, plus the root-hint cleanup used by the MCP
tools.
"""

SEP = "/"


def to_posix(p: str) -> str:
    """Replace the host separator with '/'.

    On POSIX hosts backslashes are left alone: outside a character class
    the segmenter treats them as separators anyway, and inside one they
    are escapes.
    """
    s = p or ""
    if os.sep != SEP:
        s = s.replace(os.sep, SEP)
    if os.altsep and os.altsep != SEP:
        s = s.replace(os.altsep, SEP)
    return s


def full_path(p: str) -> str:
    """Absolute, normalized form of `p` with '/' separators."""
    return to_posix(os.path.abspath(p))


def as_base_dir(p: str) -> str:
    """Absolute directory form of `p` ending in exactly one '/'."""
    s = full_path(p)
    return s if s.endswith(SEP) else s + SEP


def strip_trailing_sep(p: str) -> str:
    """Drop trailing separators, leaving a bare root such as '/' or 'C:/' intact."""
    root, rest = _split_root_raw(p)
    if not rest.strip(SEP):
        return root or p
    return p.rstrip(SEP)


def is_rooted(p: str) -> bool:
    """True when `p` carries its own root (absolute path or drive-rooted)."""
    if not p:
        return False
    if p.startswith(SEP):
        return True
    return os.path.isabs(p)


def _split_root_raw(p: str) -> Tuple[str, str]:
    drive, tail = os.path.splitdrive(p)
    stripped = tail.lstrip(SEP)
    root = drive + tail[: len(tail) - len(stripped)]
    return root, stripped


def split_root(p: str) -> Tuple[str, str]:
    """Split the absolute form of `p` into (root, remainder).

    >>> split_root("/usr/lib/*.so")
    ('/', 'usr/lib/*.so')
    """
    return _split_root_raw(full_path(p))


def join(directory: str, name: str) -> str:
    """Join a directory and a child name with exactly one '/'."""
    if directory.endswith(SEP):
        return directory + name
    return directory + SEP + name


def parent_dir(p: str) -> str:
    """Parent directory of `p`; the parent of a root is the root itself."""
    s = strip_trailing_sep(to_posix(p))
    root, rest = _split_root_raw(s)
    if not rest:
        return s
    head = s.rsplit(SEP, 1)[0]
    if len(head) < len(root):
        return root
    return head or root


def strip_prefix(path: str, prefix: str) -> str:
    """Remove `prefix` from `path`, or return `path` unchanged if it does not start with it."""
    fp = to_posix(path)
    if prefix and fp.startswith(prefix):
        return fp[len(prefix):]
    return fp


def clean_root(root: str) -> str:
    """Normalize a root directory hint.

    Treats '.', './', '/', and empty as the project root (returns '').
    """
    r = (root or "").strip().replace("\\", "/")
    if r in ("", ".", "./", "/"):
        return ""
    while r.startswith("./"):
        r = r[2:]
    return r.strip("/")
