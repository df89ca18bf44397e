"""Leaf enumeration and typed value search over JSON trees."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal, TypeAlias, assert_never

from .navigate import JSONValue

JsonKind: TypeAlias = Literal["null", "boolean", "number", "string", "array", "object"]
LeafIndex: TypeAlias = dict[str, JSONValue]


def json_kind(value: JSONValue) -> JsonKind:
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case list():
            return "array"
        case dict():
            return "object"
        case x:
            assert_never(x)


def json_equal(left: JSONValue, right: JSONValue) -> bool:
    """Compare two JSON values by kind and by value.

    ``100`` and ``"100"`` differ, ``True`` and ``1`` differ, ``1`` and ``1.0``
    are the same number. Containers are compared element by element.
    """

    kind = json_kind(left)
    if kind != json_kind(right):
        return False

    match left:
        case list():
            assert isinstance(right, list)
            return len(left) == len(right) and all(
                json_equal(a, b) for a, b in zip(left, right)
            )
        case dict():
            assert isinstance(right, dict)
            return left.keys() == right.keys() and all(
                json_equal(value, right[key]) for key, value in left.items()
            )
        case _:
            return left == right


def _child_path(parent: str, key: str | int) -> str:
    if isinstance(key, int):
        return f"{parent or '.'}[{key}]"
    return f"{parent}.{key}"


def enumerate_leaves(root: JSONValue) -> LeafIndex:
    """Map every canonical leaf path under ``root`` to its value.

    Nulls, scalars and empty containers are leaves. Paths render as
    ``.a.b[0].c``; a leaf root is reported as ``.``. Iteration follows key
    insertion order and array index order, depth first.
    """

    leaves: LeafIndex = {}
    stack: list[tuple[str, JSONValue]] = [("", root)]
    while stack:
        path, value = stack.pop()
        match value:
            case dict() if value:
                children = [(_child_path(path, k), v) for k, v in value.items()]
                stack.extend(reversed(children))
            case list() if value:
                children = [(_child_path(path, i), v) for i, v in enumerate(value)]
                stack.extend(reversed(children))
            case _:
                leaves[path or "."] = value
    return leaves


def find_paths(leaves: Mapping[str, JSONValue], target: JSONValue) -> list[str]:
    """Return the paths in ``leaves`` whose value equals ``target``."""

    return [path for path, value in leaves.items() if json_equal(value, target)]


__all__ = [
    "JsonKind",
    "LeafIndex",
    "enumerate_leaves",
    "find_paths",
    "json_equal",
    "json_kind",
]
