from __future__ import annotations


class PathGlobError(Exception):
    """Base error for the path-matching engine and server."""


class ValidationError(PathGlobError):
    """Raised when user input is invalid."""


class InvalidPatternError(ValidationError):
    """Raised when a pattern is missing or cannot be compiled."""


class AccessDeniedError(PathGlobError):
    """Raised when an operation tries to access data outside allowed scope."""


class NotFoundError(PathGlobError):
    """Raised when a requested resource is not found."""


class DirectoryNotFoundError(NotFoundError):
    """Raised when a path expected to be an existing directory is not."""

    def __init__(self, path: str) -> None:
        super().__init__(f"directory {path} does not exist.")
        self.path = path


class LimitExceededError(PathGlobError):
    """Raised when a walk exceeds a configured entry or depth ceiling."""
