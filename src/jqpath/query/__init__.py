from .leaves import (
    JsonKind,
    LeafIndex,
    enumerate_leaves,
    find_paths,
    json_equal,
    json_kind,
)
from .navigate import PATH_MISSING, JSONScalar, JSONValue, query_value, set_value
from .parse import FLATTEN_MARKER, ROOT_PATH, parse_path
from .steps import FieldStep, IndexStep, PathStep, PathSteps, render_steps

__all__ = [
    "FLATTEN_MARKER",
    "FieldStep",
    "IndexStep",
    "JSONScalar",
    "JSONValue",
    "JsonKind",
    "LeafIndex",
    "PATH_MISSING",
    "PathStep",
    "PathSteps",
    "ROOT_PATH",
    "enumerate_leaves",
    "find_paths",
    "json_equal",
    "json_kind",
    "parse_path",
    "query_value",
    "render_steps",
    "set_value",
]
