"""Exception hierarchy for path queries over JSON documents."""

from __future__ import annotations


class JqPathError(Exception):
    """Base class for all jqpath errors."""


class PathParseError(JqPathError, ValueError):
    """Raised when a path expression cannot be split into navigation steps."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"invalid path {path!r}: {reason}")


class PathNotFoundError(JqPathError, LookupError):
    """Raised when a path does not resolve against the current document."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        message = f"path {path!r} not found"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ValueNotFoundError(PathNotFoundError):
    """Raised when no leaf of the document holds the searched value."""

    def __init__(self, value: object) -> None:
        self.value = value
        message = f"no leaf path holds value {value!r}"
        super().__init__(".", message)
        self.args = (message,)


class InvalidInputError(JqPathError, ValueError):
    """Raised when a document cannot be built from the given source."""


__all__ = [
    "InvalidInputError",
    "JqPathError",
    "PathNotFoundError",
    "PathParseError",
    "ValueNotFoundError",
]
