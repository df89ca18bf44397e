"""Tests for the jq-style path parser."""

import pytest

from jqpath.errors import PathParseError
from jqpath.query import FieldStep, IndexStep, parse_path, render_steps


def test_parse_root_is_empty() -> None:
    assert parse_path(".") == ()


def test_parse_dotted_fields() -> None:
    assert parse_path(".root.leaf") == (
        FieldStep(name="root"),
        FieldStep(name="leaf"),
    )


def test_parse_index_follows_its_field() -> None:
    assert parse_path(".root.array[1].property") == (
        FieldStep(name="root"),
        FieldStep(name="array"),
        IndexStep(index=1),
        FieldStep(name="property"),
    )


def test_parse_consecutive_indices() -> None:
    assert parse_path(".grid[2][0]") == (
        FieldStep(name="grid"),
        IndexStep(index=2),
        IndexStep(index=0),
    )


def test_parse_drops_flatten_markers() -> None:
    """``[]`` carries no index and produces no step."""

    assert parse_path(".root.array[].property") == parse_path(".root.array.property")
    assert parse_path(".a[][1]") == (FieldStep(name="a"), IndexStep(index=1))
    assert parse_path(".[]") == ()


def test_parse_index_on_root_array() -> None:
    assert parse_path(".[3]") == (IndexStep(index=3),)
    assert parse_path(".[0].name") == (IndexStep(index=0), FieldStep(name="name"))


def test_parse_keeps_unusual_field_names() -> None:
    assert parse_path(".my-key.with space") == (
        FieldStep(name="my-key"),
        FieldStep(name="with space"),
    )


def test_parse_requires_leading_dot() -> None:
    with pytest.raises(PathParseError, match="must start with '.'"):
        parse_path("root.leaf")
    with pytest.raises(PathParseError):
        parse_path("")


@pytest.mark.parametrize(
    ("path", "message"),
    [
        (".a..b", "empty field name"),
        (".a.", "empty field name"),
        (".a.[0]", "empty field name"),
        (".a[0", "unterminated index"),
        (".a]", "unexpected ']'"),
        (".a[x]", "non-negative integer"),
        (".a[-1]", "non-negative integer"),
        (".a[0]b", "unexpected text"),
    ],
)
def test_parse_rejects_malformed_paths(path: str, message: str) -> None:
    with pytest.raises(PathParseError, match=message) as excinfo:
        parse_path(path)
    assert excinfo.value.path == path


def test_parse_does_not_check_existence() -> None:
    assert parse_path(".invalid.query[99]") == (
        FieldStep(name="invalid"),
        FieldStep(name="query"),
        IndexStep(index=99),
    )


def test_render_steps_produces_canonical_paths() -> None:
    assert render_steps(()) == "."
    assert render_steps(parse_path(".root.array[].x[2]")) == ".root.array.x[2]"
    assert render_steps(parse_path(".[0].name")) == ".[0].name"


def test_parse_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_path("nope")
