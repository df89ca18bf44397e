from __future__ import annotations

import datetime
import logging
from pathlib import Path

from rich.console import Console
from rich.text import Text

from ..config import JQPATH_CONFIG

LOGGER_NAME = "jqpath"

_LEVEL_STYLES = {
    "DEBUG": "dim",
    "INFO": "blue",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold red",
}


class _JqPathRichConsoleHandler(logging.Handler):
    """Console handler that renders one compact line per record."""

    def __init__(self, level: int = logging.NOTSET, console: Console | None = None):
        super().__init__(level)
        self._console = console if console is not None else Console(stderr=True)

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        return f"[{Path(record.pathname).name}:{record.lineno}]"

    @staticmethod
    def _format_message_text(record: logging.LogRecord) -> Text:
        message = record.getMessage()
        text = Text(message)
        path = getattr(record, "jqpath_path", None)
        if isinstance(path, str) and path:
            start = message.find(path)
            if start != -1:
                text.stylize("cyan", start, start + len(path))
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stamp = datetime.datetime.fromtimestamp(record.created).strftime(
                "%H:%M:%S"
            )
            line = Text.assemble(
                (stamp, "dim"),
                " ",
                (f"{record.levelname:<8}", _LEVEL_STYLES.get(record.levelname, "")),
                " ",
                self._format_message_text(record),
                " ",
                (self._format_location(record), "dim"),
            )
            self._console.print(line, soft_wrap=True, highlight=False)
        except Exception:
            self.handleError(record)


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach the rich console handler to the root logger once.

    Repeated calls only update the level of the ``jqpath`` logger.
    """

    resolved = JQPATH_CONFIG.log_level if level is None else level
    logger = get_logger()
    logger.setLevel(resolved)

    root = logging.getLogger()
    if not any(isinstance(h, _JqPathRichConsoleHandler) for h in root.handlers):
        root.addHandler(_JqPathRichConsoleHandler())
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]
