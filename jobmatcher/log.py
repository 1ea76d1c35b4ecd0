"""Logging setup shared by the library, the CLI and the API (stdlib logging)."""
from __future__ import annotations

import logging
import os
import sys
from datetime import date
from pathlib import Path

_DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
_HANDLER_NAME = "jobmatcher"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Named logger; the first call installs the jobmatcher handlers."""
    if not _configured:
        configure()
    return logging.getLogger(name)


def configure(level: str | None = None, log_dir: Path | None = None) -> None:
    """(Re)install console and daily-file handlers on the root logger.

    ``level`` defaults to $LOG_LEVEL, ``log_dir`` to $JOBMATCHER_LOG_DIR or
    ./logs. Handlers installed by someone else (pytest, uvicorn) are left
    alone; only ours are replaced.
    """
    global _configured
    _configured = True

    resolved = getattr(logging, (level or os.environ.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(resolved)

    foreign = [h for h in root.handlers if h.get_name() != _HANDLER_NAME]
    for h in root.handlers[:]:
        if h.get_name() == _HANDLER_NAME:
            root.removeHandler(h)
            h.close()
    if foreign and level is None:
        return

    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FMT)
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(resolved)
    _install(root, console, formatter)

    target = log_dir or Path(os.environ.get("JOBMATCHER_LOG_DIR", "").strip() or _DEFAULT_LOG_DIR)
    try:
        target.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(target / f"jobmatcher_{date.today():%Y-%m-%d}.log", encoding="utf-8")
    except OSError:
        return
    fh.setLevel(logging.DEBUG)
    _install(root, fh, formatter)


def _install(root: logging.Logger, handler: logging.Handler, formatter: logging.Formatter) -> None:
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)
    root.addHandler(handler)
