"""
Logging configuration for the Jokes API.

``setup_logging`` installs one console handler (and optionally a file
handler) on the root logger and routes uvicorn's own loggers through
it, so server access lines and the store's ``Created joke ...``
messages share the same format and level.  ``run.py`` starts uvicorn
with ``log_config=None`` so that uvicorn keeps this configuration
instead of installing its own handlers.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and the uvicorn loggers.

    Root handlers are attached only once; a second call (tests, a
    repeated ``create_app``) leaves them alone but still applies
    ``level`` to the uvicorn loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a log file (``LOG_FILE``).  If empty, only the console
        handler is installed.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        root.setLevel(numeric_level)
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
        handlers = [logging.StreamHandler()]
        if logfile:
            handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
        for handler in handlers:
            handler.setFormatter(formatter)
            root.addHandler(handler)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
        server_logger.setLevel(numeric_level)
