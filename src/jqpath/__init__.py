"""
jqpath: jq-style path queries over in-memory JSON documents.

This package uses a src-layout. Import the package as `jqpath`.
"""

from importlib.metadata import version

__version__ = version("jqpath")

from .config import JQPATH_CONFIG, JqPathConfig
from .document import JsonDocument
from .errors import (
    InvalidInputError,
    JqPathError,
    PathNotFoundError,
    PathParseError,
    ValueNotFoundError,
)
from .query import (
    FieldStep,
    IndexStep,
    PathStep,
    enumerate_leaves,
    find_paths,
    json_equal,
    parse_path,
    query_value,
    set_value,
)
from .runtime import configure_logging, get_logger

__all__ = [
    "__version__",
    "JQPATH_CONFIG",
    "FieldStep",
    "IndexStep",
    "InvalidInputError",
    "JqPathConfig",
    "JqPathError",
    "JsonDocument",
    "PathNotFoundError",
    "PathParseError",
    "PathStep",
    "ValueNotFoundError",
    "configure_logging",
    "enumerate_leaves",
    "find_paths",
    "get_logger",
    "json_equal",
    "parse_path",
    "query_value",
    "set_value",
]
