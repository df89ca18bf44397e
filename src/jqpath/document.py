from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, TextIO, TypeVar

from .config import JQPATH_CONFIG
from .errors import (
    InvalidInputError,
    JqPathError,
    PathNotFoundError,
    PathParseError,
    ValueNotFoundError,
)
from .query import (
    JSONValue,
    LeafIndex,
    enumerate_leaves,
    find_paths,
    parse_path,
    query_value,
    set_value,
)
from .runtime.logging import get_logger

T = TypeVar("T")

_EXIT = object()


def _validate_json(value: Any, what: str) -> JSONValue:
    """Return a checked copy of ``value`` built without recursion.

    Objects need string keys; only ``dict``, ``list`` and JSON scalars are
    accepted. A container that contains itself is rejected; shared
    subtrees are copied once per occurrence.
    """

    holder: list[JSONValue] = [None]
    active: set[int] = set()
    stack: list[tuple[Any, Any, Any]] = [(value, holder, 0)]
    while stack:
        item, container, key = stack.pop()
        if item is _EXIT:
            active.discard(container)
            continue
        match item:
            case None | bool() | int() | float() | str():
                container[key] = item
            case list() | dict():
                if id(item) in active:
                    raise InvalidInputError(f"{what} contains a reference cycle")
                active.add(id(item))
                stack.append((_EXIT, id(item), None))
                if isinstance(item, list):
                    copied_list: list[JSONValue] = [None] * len(item)
                    container[key] = copied_list
                    for index in reversed(range(len(item))):
                        stack.append((item[index], copied_list, index))
                else:
                    copied_dict: dict[str, JSONValue] = {}
                    container[key] = copied_dict
                    for name in item:
                        if not isinstance(name, str):
                            raise InvalidInputError(
                                f"{what} has a non-string object key {name!r}"
                            )
                        copied_dict[name] = None
                    for name in reversed(list(item)):
                        stack.append((item[name], copied_dict, name))
            case _:
                raise InvalidInputError(
                    f"{what} is not a JSON value: unsupported type "
                    f"{type(item).__name__}"
                )
    return holder[0]


class JsonDocument:
    """A JSON value queried and updated through jq-style paths.

    The document owns its root value; ``set_path`` mutates it in place.

    Failures of ``query``, ``set_path`` and ``get_paths_to_value`` are governed
    by two independent flags. Unless ``suppress_diagnostics`` is set, a warning
    naming the operation and path is logged on the ``jqpath`` logger. Unless
    ``suppress_errors`` is set, the error is then raised; otherwise the call
    returns ``""``, ``False`` or ``[]`` respectively. Flags left as ``None``
    take their defaults from ``JQPATH_CONFIG``.
    """

    def __init__(
        self,
        value: JSONValue,
        *,
        suppress_errors: bool | None = None,
        suppress_diagnostics: bool | None = None,
        indent: int | None = None,
    ) -> None:
        if value is None:
            raise InvalidInputError("document value must not be null")
        self._value: JSONValue = _validate_json(value, "document value")
        self.suppress_errors = (
            JQPATH_CONFIG.suppress_errors
            if suppress_errors is None
            else suppress_errors
        )
        self.suppress_diagnostics = (
            JQPATH_CONFIG.suppress_diagnostics
            if suppress_diagnostics is None
            else suppress_diagnostics
        )
        self.indent = JQPATH_CONFIG.indent if indent is None else indent
        self._leaf_index: LeafIndex | None = None

    @classmethod
    def from_text(cls, text: str, **options: Any) -> JsonDocument:
        try:
            value = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidInputError(f"invalid JSON text: {exc}") from exc
        return cls(value, **options)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str], **options: Any) -> JsonDocument:
        """Load a document from a UTF-8 JSON file."""

        source = Path(path)
        try:
            text = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InvalidInputError(f"cannot read JSON file {source}: {exc}") from exc
        try:
            value = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidInputError(f"invalid JSON in {source}: {exc}") from exc
        if value is None:
            raise InvalidInputError(f"JSON file {source} holds a null document")
        get_logger().debug("loaded document from %s", source)
        return cls(value, **options)

    @property
    def value(self) -> JSONValue:
        return self._value

    @property
    def leaf_index(self) -> LeafIndex | None:
        """Leaf index built by the last ``paths()`` call, ``None`` once stale."""
        return self._leaf_index

    def _recover(
        self, operation: str, subject: str, error: JqPathError, default: T
    ) -> T:
        if not self.suppress_diagnostics:
            get_logger().warning(
                "%s %s failed: %s",
                operation,
                subject,
                error,
                extra={"jqpath_path": subject},
            )
        if not self.suppress_errors:
            raise error
        return default

    def query(self, path: str) -> str:
        """Return the value at ``path`` serialized as JSON text."""

        try:
            result = query_value(self._value, parse_path(path))
        except (PathParseError, PathNotFoundError) as exc:
            return self._recover("query", path, exc, "")
        return json.dumps(result, ensure_ascii=False, separators=(",", ":"))

    def set_path(self, path: str, value: JSONValue) -> bool:
        """Assign ``value`` at ``path``; the parent of the leaf must exist."""

        new_value = _validate_json(value, "assigned value")
        try:
            steps = parse_path(path)
            if steps:
                set_value(self._value, steps, new_value)
            elif new_value is None:
                raise InvalidInputError("document value must not be null")
            else:
                self._value = new_value
        except (PathParseError, PathNotFoundError) as exc:
            return self._recover("set_path", path, exc, False)

        self._leaf_index = None
        get_logger().debug("set %s", path)
        return True

    def paths(self) -> LeafIndex:
        """Rebuild the leaf index and return a copy of it."""

        self._leaf_index = enumerate_leaves(self._value)
        return dict(self._leaf_index)

    def get_paths_to_value(self, value: JSONValue) -> list[str]:
        """Return every leaf path holding ``value`` (same kind and value)."""

        target = _validate_json(value, "searched value")
        matches = find_paths(self.paths(), target)
        if not matches:
            return self._recover(
                "get_paths_to_value",
                json.dumps(target, ensure_ascii=False),
                ValueNotFoundError(target),
                [],
            )
        return matches

    def save(self, destination: str | os.PathLike[str] | TextIO) -> None:
        """Write the document as JSON text to a path or an open text stream."""

        if hasattr(destination, "write"):
            stream: TextIO = destination  # type: ignore[assignment]
            json.dump(self._value, stream, indent=self.indent, ensure_ascii=False)
            stream.write("\n")
            return

        target = Path(destination)  # type: ignore[arg-type]
        text = json.dumps(self._value, indent=self.indent, ensure_ascii=False)
        tmp_path = target.with_name(f"{target.name}.tmp")
        tmp_path.write_text(f"{text}\n", encoding="utf-8")
        os.replace(tmp_path, target)
        get_logger().debug("saved document to %s", target)

    def __repr__(self) -> str:
        return (
            f"JsonDocument(suppress_errors={self.suppress_errors}, "
            f"suppress_diagnostics={self.suppress_diagnostics})"
        )


__all__ = ["JsonDocument"]
