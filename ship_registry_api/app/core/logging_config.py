"""
Logging configuration for the ship registry.

``setup_logging`` attaches the service's own handlers to the root
logger: always a console handler, plus a file handler when
``LOG_FILE`` is set.  Handlers are tagged by name so repeated calls
(tests, a second ``create_app``) never stack duplicates.  Uvicorn's
loggers are routed through the same handlers so request logs and
ship events share one format.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "ship_registry.console"
FILE_HANDLER_NAME = "ship_registry.file"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    console = logging.StreamHandler()
    console.set_name(CONSOLE_HANDLER_NAME)
    handlers: List[logging.Handler] = [console]
    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        handlers.append(file_handler)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> int:
    """Configure the root logger and return the numeric level applied.

    Unknown level names fall back to ``INFO``.  If the service's
    handlers are already installed only the level is updated.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root = logging.getLogger()
    root.setLevel(numeric_level)
    installed = {handler.get_name() for handler in root.handlers}
    if CONSOLE_HANDLER_NAME not in installed:
        for handler in _build_handlers(logfile):
            root.addHandler(handler)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
    return numeric_level
