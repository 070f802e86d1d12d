"""Logging setup for the API server."""

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from server import settings

LOG_FORMAT = (
    "[%(asctime)s.%(msecs)03d] %(filename)s -> %(funcName)s "
    "line:%(lineno)d [%(levelname)s] %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def configure_logging(level: str | None = None, log_dir: str | None = None) -> None:
    """Attach console (and optionally daily rotating file) handlers to the root logger.

    Safe to call more than once; only the first call installs handlers.
    """
    global _configured
    if _configured:
        return

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    log_dir = log_dir or settings.LOG_DIR
    if log_dir:
        log_folder = Path(log_dir)
        log_folder.mkdir(parents=True, exist_ok=True)
        # rotate at midnight, keep 30 days
        file_handler = TimedRotatingFileHandler(
            log_folder / "nodeflow.log",
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    _configured = True
