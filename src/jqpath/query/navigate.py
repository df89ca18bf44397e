"""Read and write JSON values addressed by parsed path steps."""

from __future__ import annotations

from typing import TypeAlias, assert_never

from ..errors import PathNotFoundError
from .steps import FieldStep, IndexStep, PathStep, PathSteps, render_steps

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]

_Slot: TypeAlias = tuple[dict[str, JSONValue], str] | None


class _PathMissing:
    """Sentinel for missing document paths."""


PATH_MISSING: _PathMissing = _PathMissing()


class _Collected(list):
    """Values gathered by mapping a field over an array.

    ``slots`` records, per element, the object and key the value was read from
    so that an index into the collection can still be assigned in place.
    """

    def __init__(self) -> None:
        super().__init__()
        self.slots: list[_Slot] = []

    def add(self, value: JSONValue, slot: _Slot) -> None:
        self.append(value)
        self.slots.append(slot)


def _apply_field(current: JSONValue, name: str) -> JSONValue | _PathMissing:
    match current:
        case dict():
            return current.get(name, PATH_MISSING)
        case list():
            collected = _Collected()
            for element in current:
                value = _apply_field(element, name)
                if value is PATH_MISSING:
                    continue
                slot = (element, name) if isinstance(element, dict) else None
                collected.add(value, slot)
            return collected if collected else PATH_MISSING
        case str() | bool() | int() | float() | None:
            return PATH_MISSING
        case x:
            assert_never(x)


def _apply_index(current: JSONValue, index: int) -> JSONValue | _PathMissing:
    match current:
        case list():
            if index >= len(current):
                return PATH_MISSING
            return current[index]
        case dict() | str() | bool() | int() | float() | None:
            return PATH_MISSING
        case x:
            assert_never(x)


def _apply_step(current: JSONValue, step: PathStep) -> JSONValue | _PathMissing:
    match step:
        case FieldStep(name=name):
            return _apply_field(current, name)
        case IndexStep(index=index):
            return _apply_index(current, index)
        case x:
            assert_never(x)


def _walk(
    root: JSONValue, steps: PathSteps, full_steps: PathSteps | None = None
) -> JSONValue:
    current = root
    for position, step in enumerate(steps):
        resolved = _apply_step(current, step)
        if resolved is PATH_MISSING:
            raise PathNotFoundError(
                render_steps(steps if full_steps is None else full_steps),
                f"{step.render()!r} does not resolve under "
                f"{render_steps(steps[:position])!r}",
            )
        current = resolved
    return current


def _plain(value: JSONValue) -> JSONValue:
    if isinstance(value, _Collected):
        return [_plain(item) for item in value]
    return value


def query_value(root: JSONValue, steps: PathSteps) -> JSONValue:
    """Return the value addressed by ``steps``.

    A field step that meets an array is applied to every element and the hits
    are collected into a new list; elements without the field are skipped.
    Raises ``PathNotFoundError`` when a step does not resolve.
    """

    return _plain(_walk(root, steps))


def _field_targets(
    current: JSONValue, name: str, *, fanned_out: bool = False
) -> list[tuple[dict[str, JSONValue], str]]:
    match current:
        case dict():
            if fanned_out and name not in current:
                return []
            return [(current, name)]
        case list():
            targets: list[tuple[dict[str, JSONValue], str]] = []
            for element in current:
                targets.extend(_field_targets(element, name, fanned_out=True))
            return targets
        case str() | bool() | int() | float() | None:
            return []
        case x:
            assert_never(x)


def _index_targets(
    current: JSONValue, index: int
) -> list[tuple[dict[str, JSONValue], str] | tuple[list[JSONValue], int]]:
    if isinstance(current, _Collected):
        if index >= len(current) or current.slots[index] is None:
            return []
        return [current.slots[index]]
    if isinstance(current, list) and index < len(current):
        return [(current, index)]
    return []


def set_value(root: JSONValue, steps: PathSteps, new_value: JSONValue) -> None:
    """Assign ``new_value`` at the position addressed by ``steps``.

    Every step but the last must already resolve; no containers are created.
    A final field step on an object adds or replaces the key. On an array it
    replaces the key on every element that already has it, the same elements
    a read of that path resolves. A final index step replaces an in-bounds
    element; after a flatten it writes back to the object the indexed value
    was read from, so an index into a collection built from nested arrays has
    nowhere to write and is not found. All targets are found before anything
    is assigned, so a failure leaves ``root`` untouched.
    """

    if not steps:
        raise ValueError("the root cannot be assigned in place")

    parent = _walk(root, steps[:-1], steps)
    last = steps[-1]
    match last:
        case FieldStep(name=name):
            targets = _field_targets(parent, name)
        case IndexStep(index=index):
            targets = _index_targets(parent, index)
        case x:
            assert_never(x)

    if not targets:
        raise PathNotFoundError(
            render_steps(steps),
            f"{last.render()!r} cannot be assigned under {render_steps(steps[:-1])!r}",
        )
    for container, key in targets:
        container[key] = new_value  # type: ignore[index]


__all__ = [
    "JSONScalar",
    "JSONValue",
    "PATH_MISSING",
    "query_value",
    "set_value",
]
