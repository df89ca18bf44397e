"""Parser for jq-style dotted/bracketed path expressions."""

from __future__ import annotations

from ..errors import PathParseError
from .steps import FieldStep, IndexStep, PathStep, PathSteps

ROOT_PATH = "."
FLATTEN_MARKER = "[]"


def parse_path(path: str) -> PathSteps:
    """Split ``path`` into an ordered tuple of navigation steps.

    ``.`` selects the root and parses to ``()``. Every literal ``[]`` is dropped
    before splitting: it marks an optional array flatten and carries no index.
    Only the syntax is checked here; whether the steps resolve is decided by
    the navigator.
    """

    if not isinstance(path, str):
        raise TypeError(f"path must be a string, got {type(path).__name__}")
    if not path.startswith(ROOT_PATH):
        raise PathParseError(path, "path must start with '.'")

    body = path[1:].replace(FLATTEN_MARKER, "")
    if not body:
        return ()

    steps: list[PathStep] = []
    for position, segment in enumerate(body.split(".")):
        steps.extend(_parse_segment(segment, path, allow_bare_index=position == 0))
    return tuple(steps)


def _parse_segment(
    segment: str, path: str, *, allow_bare_index: bool
) -> list[PathStep]:
    open_at = segment.find("[")
    name = segment if open_at == -1 else segment[:open_at]
    rest = "" if open_at == -1 else segment[open_at:]

    if "]" in name:
        raise PathParseError(path, f"unexpected ']' in segment {segment!r}")

    steps: list[PathStep] = []
    if name:
        steps.append(FieldStep(name=name))
    elif not (allow_bare_index and rest):
        raise PathParseError(path, "empty field name")

    while rest:
        if not rest.startswith("["):
            raise PathParseError(
                path, f"unexpected text {rest!r} after index in segment {segment!r}"
            )
        close = rest.find("]")
        if close == -1:
            raise PathParseError(path, f"unterminated index in segment {segment!r}")
        token = rest[1:close]
        if not (token.isascii() and token.isdigit()):
            raise PathParseError(
                path, f"index {token!r} must be a non-negative integer"
            )
        steps.append(IndexStep(index=int(token)))
        rest = rest[close + 1 :]

    return steps


__all__ = ["FLATTEN_MARKER", "ROOT_PATH", "parse_path"]
