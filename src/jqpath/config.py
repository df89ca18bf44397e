"""Process-wide defaults for jqpath documents."""

from __future__ import annotations

import os
from collections.abc import Mapping

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_STRINGS:
        return True
    if value in _FALSE_STRINGS:
        return False
    raise ValueError(f"{name} must be a boolean flag (1/0, true/false), got {raw!r}")


def _parse_indent(name: str, raw: str) -> int:
    try:
        indent = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if indent < 0:
        raise ValueError(f"{name} must be >= 0, got {indent}")
    return indent


class JqPathConfig:
    """Defaults applied to documents that do not set their own flags.

    Values are read from ``JQPATH_*`` environment variables when the object is
    created. Attributes may be reassigned at runtime; documents read them at
    construction time only.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        env = os.environ if environ is None else environ
        self.suppress_errors: bool = _parse_bool(
            "JQPATH_SUPPRESS_ERRORS", env.get("JQPATH_SUPPRESS_ERRORS", "0")
        )
        self.suppress_diagnostics: bool = _parse_bool(
            "JQPATH_SUPPRESS_DIAGNOSTICS", env.get("JQPATH_SUPPRESS_DIAGNOSTICS", "0")
        )
        self.indent: int = _parse_indent("JQPATH_INDENT", env.get("JQPATH_INDENT", "2"))
        self.log_level: str = env.get("JQPATH_LOG_LEVEL", "INFO").upper()

    def __repr__(self) -> str:
        return (
            f"JqPathConfig(suppress_errors={self.suppress_errors}, "
            f"suppress_diagnostics={self.suppress_diagnostics}, "
            f"indent={self.indent}, log_level={self.log_level!r})"
        )


JQPATH_CONFIG = JqPathConfig()


__all__ = ["JQPATH_CONFIG", "JqPathConfig"]
