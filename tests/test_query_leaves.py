"""Tests for leaf enumeration and typed value search."""

from jqpath.query import enumerate_leaves, find_paths, json_equal, json_kind
from jqpath.testing import sample_value


def test_enumerate_leaves_on_sample_document() -> None:
    leaves = enumerate_leaves(sample_value())

    assert leaves == {
        ".root.leaf": "leafValue",
        ".root.array[0].arrayLeaf": "arrayLeafValue",
        ".root.array[0].property": "value",
        ".root.array[1].arrayInt": 100,
        ".root.array[1].property": "anotherValue",
    }
    assert list(leaves) == [
        ".root.leaf",
        ".root.array[0].arrayLeaf",
        ".root.array[0].property",
        ".root.array[1].arrayInt",
        ".root.array[1].property",
    ]


def test_enumerate_leaves_records_nulls_and_empty_containers() -> None:
    doc = {"a": None, "b": {}, "c": [], "d": [None, [], {}, [1]]}

    assert enumerate_leaves(doc) == {
        ".a": None,
        ".b": {},
        ".c": [],
        ".d[0]": None,
        ".d[1]": [],
        ".d[2]": {},
        ".d[3][0]": 1,
    }


def test_enumerate_leaves_on_root_arrays_and_scalars() -> None:
    assert enumerate_leaves([{"x": 1}, 2]) == {".[0].x": 1, ".[1]": 2}
    assert enumerate_leaves("just text") == {".": "just text"}
    assert enumerate_leaves({}) == {".": {}}


def test_enumerate_leaves_handles_deep_nesting() -> None:
    doc: dict = {}
    current = doc
    for _ in range(3000):
        current["n"] = {}
        current = current["n"]
    current["end"] = True

    leaves = enumerate_leaves(doc)
    assert len(leaves) == 1
    (path,) = leaves
    assert path.endswith(".n.end")
    assert leaves[path] is True


def test_enumerate_leaves_is_idempotent() -> None:
    doc = sample_value()

    assert enumerate_leaves(doc) == enumerate_leaves(doc)


def test_json_kind_distinguishes_booleans_from_numbers() -> None:
    assert json_kind(True) == "boolean"
    assert json_kind(1) == "number"
    assert json_kind(1.5) == "number"
    assert json_kind("1") == "string"
    assert json_kind(None) == "null"
    assert json_kind([]) == "array"
    assert json_kind({}) == "object"


def test_json_equal_compares_kind_and_value() -> None:
    assert json_equal(100, 100)
    assert json_equal(1, 1.0)
    assert json_equal(None, None)
    assert not json_equal(100, "100")
    assert not json_equal(True, 1)
    assert not json_equal(0, False)
    assert not json_equal(None, "")
    assert json_equal({"a": [1, True]}, {"a": [1.0, True]})
    assert not json_equal({"a": [1, True]}, {"a": [True, 1]})
    assert not json_equal([1], [1, 2])


def test_find_paths_matches_by_kind() -> None:
    leaves = enumerate_leaves(
        {"n": 100, "s": "100", "b": True, "one": 1, "z": None, "e": []}
    )

    assert find_paths(leaves, 100) == [".n"]
    assert find_paths(leaves, "100") == [".s"]
    assert find_paths(leaves, True) == [".b"]
    assert find_paths(leaves, 1) == [".one"]
    assert find_paths(leaves, None) == [".z"]
    assert find_paths(leaves, []) == [".e"]
    assert find_paths(leaves, "absent") == []


def test_find_paths_on_sample_document() -> None:
    leaves = enumerate_leaves(sample_value())

    assert find_paths(leaves, "arrayLeafValue") == [".root.array[0].arrayLeaf"]
