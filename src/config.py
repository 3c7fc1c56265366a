"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (e.g.
PROJECT_ROOT, ALLOW_OUTSIDE_ROOT, walk ceilings and the log level).
"""

from __future__ import annotations

import os
from pathlib import Path


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


# Base directory for relative patterns and security boundary for results
PROJECT_ROOT = Path(os.environ.get("PROJECT_ROOT", ".")).resolve()

# Allow rooted patterns and '..' segments to return entries outside PROJECT_ROOT
ALLOW_OUTSIDE_ROOT = _env_bool("ALLOW_OUTSIDE_ROOT", False)

# Walk behaviour (0 disables a ceiling)
DETECT_CYCLES = _env_bool("DETECT_CYCLES", False)
MAX_ENTRIES = _env_int("MAX_ENTRIES", 0)
MAX_DEPTH = _env_int("MAX_DEPTH", 0)

# Logging (stderr; stdout carries the MCP stdio transport)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").strip().upper()
