"""
Logging setup for the Student Records API.

Store operations log one line per create, update, delete and clear
under ``student_records_api.*``.  Uvicorn's access log and the HTTP
client libraries would add another INFO line for every request on top
of that, so ``setup_logging`` raises those loggers to WARNING unless
the service runs at DEBUG.  Setup happens at most once per process;
repeated ``create_app`` calls (as in the test suite) leave existing
handlers alone.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that emit a record per HTTP request.
NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "urllib3")


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number, defaulting to INFO."""
    numeric_level = logging.getLevelName(level.upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def quiet_noisy_loggers(level: int, names: Iterable[str] = NOISY_LOGGERS) -> None:
    """Raise per‑request loggers to WARNING unless ``level`` is DEBUG or lower."""
    target = logging.NOTSET if level <= logging.DEBUG else logging.WARNING
    for name in names:
        logging.getLogger(name).setLevel(target)


def _make_handlers(formatter: logging.Formatter, logfile: Optional[str]) -> list:
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the service.

    Parameters
    ----------
    level : str
        Level name (e.g. ``"DEBUG"``, ``"INFO"``), case insensitive.
        Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Also write records to this file when given.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = resolve_level(level)
    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _make_handlers(formatter, logfile):
        root.addHandler(handler)
    quiet_noisy_loggers(numeric_level)
