"""
Logging setup shared by the application and the uvicorn server.

``setup_logging`` installs one console handler (and optionally a file
handler) on the root logger, tagged by name so repeated calls from
``create_app`` do not stack duplicates.  The ``uvicorn`` loggers are
stripped of the handlers uvicorn installs for itself and made to
propagate to the root logger, so server lines such as ``Uvicorn
running on ...`` and the access log share the application's format.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "blog_api.console"
FILE_HANDLER_NAME = "blog_api.file"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    handlers: List[logging.Handler] = [console_handler]

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def route_uvicorn_loggers() -> None:
    """Send uvicorn's log records through the root logger's handlers."""
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        for handler in list(uvicorn_logger.handlers):
            uvicorn_logger.removeHandler(handler)
        uvicorn_logger.propagate = True


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and route uvicorn into it.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``).  Case insensitive;
        unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives the same records as the console.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(h.get_name() == CONSOLE_HANDLER_NAME for h in root.handlers):
        for handler in _build_handlers(logfile):
            root.addHandler(handler)

    route_uvicorn_loggers()
