import copy
import logging
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .config import JQPATH_CONFIG, JqPathConfig
from .document import JsonDocument
from .query import JSONValue
from .runtime.logging import get_logger

SAMPLE_VALUE: dict[str, JSONValue] = {
    "root": {
        "leaf": "leafValue",
        "array": [
            {"arrayLeaf": "arrayLeafValue", "property": "value"},
            {"arrayInt": 100, "property": "anotherValue"},
        ],
    }
}


@dataclass(frozen=True)
class _JqPathConfigSnapshot:
    suppress_errors: bool
    suppress_diagnostics: bool
    indent: int
    log_level: str
    logger_level: int

    @classmethod
    def capture(cls) -> "_JqPathConfigSnapshot":
        return cls(
            suppress_errors=JQPATH_CONFIG.suppress_errors,
            suppress_diagnostics=JQPATH_CONFIG.suppress_diagnostics,
            indent=JQPATH_CONFIG.indent,
            log_level=JQPATH_CONFIG.log_level,
            logger_level=get_logger().level,
        )

    def restore(self) -> None:
        JQPATH_CONFIG.suppress_errors = self.suppress_errors
        JQPATH_CONFIG.suppress_diagnostics = self.suppress_diagnostics
        JQPATH_CONFIG.indent = self.indent
        JQPATH_CONFIG.log_level = self.log_level
        get_logger().setLevel(self.logger_level)


@contextmanager
def jqpath_test_env() -> Generator[None, None, None]:
    """Reset config and the ``jqpath`` logger level; restore both on exit."""
    snapshot = _JqPathConfigSnapshot.capture()
    JQPATH_CONFIG.suppress_errors = False
    JQPATH_CONFIG.suppress_diagnostics = False
    JQPATH_CONFIG.indent = 2
    JQPATH_CONFIG.log_level = "INFO"
    get_logger().setLevel(logging.NOTSET)
    try:
        yield
    finally:
        snapshot.restore()


def sample_value() -> dict[str, JSONValue]:
    return copy.deepcopy(SAMPLE_VALUE)


@pytest.fixture()
def jqpath_config() -> Generator[JqPathConfig, None, None]:
    """Isolate ``JQPATH_CONFIG`` changes made by the test."""
    with jqpath_test_env():
        yield JQPATH_CONFIG


@pytest.fixture()
def sample_document(jqpath_config: JqPathConfig) -> JsonDocument:
    return JsonDocument(sample_value())
