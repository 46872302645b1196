"""
Design (logs.py)
- Purpose: Logging setup for the app: console output plus a handler that feeds the Logs panel.
- Inputs: Log level; a sink callable taking one formatted line.
- Outputs: Configured root logger / PanelHandler instances.
- Side effects: configure_logging() replaces handlers on the "dadjokes" logger.
- Thread-safety: PanelHandler.emit may run on any thread; the UI sink reschedules onto Tk.
"""

import logging
from typing import Callable, Union

from .config import LOG_DATE_FORMAT, LOG_FORMAT

PACKAGE_LOGGER = "dadjokes"


def make_formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Purpose: Send the package's log records to stderr with timestamps.
    Inputs: level as an int or a name such as "DEBUG" (unknown names fall back to INFO).
    Outputs: The package logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if not isinstance(handler, PanelHandler):
            logger.removeHandler(handler)
    console = logging.StreamHandler()
    console.setFormatter(make_formatter())
    logger.addHandler(console)
    logger.setLevel(level)
    logger.propagate = False
    return logger


class PanelHandler(logging.Handler):
    """Forwards each formatted record (newline terminated) to sink, e.g. the Logs panel."""

    def __init__(self, sink: Callable[[str], None], level: int = logging.NOTSET):
        super().__init__(level)
        self.sink = sink
        self.setFormatter(make_formatter())

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.sink(self.format(record) + "\n")
        except Exception:
            self.handleError(record)


def attach_panel(sink: Callable[[str], None]) -> PanelHandler:
    handler = PanelHandler(sink)
    logging.getLogger(PACKAGE_LOGGER).addHandler(handler)
    return handler
