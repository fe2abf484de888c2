# linediff/utils/logger.py
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from platformdirs import user_log_dir

from linediff.config import APP_NAME, APP_AUTHOR

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def _debug_level(value: str) -> int:
    # "1"/"true"/"yes" mean INFO; a level name ("DEBUG", "warning") is used as is
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logger(log_dir: str | None = None):
    """
    Configure the package logger from the environment.

    LINEDIFF_DEBUG unset: silent (NullHandler, no propagation).
    LINEDIFF_DEBUG set: records at that level go to linediff.debug.log in
    ``log_dir`` (default: the user log dir), and also to stderr when
    LINEDIFF_LOG_STDERR is set.
    Calling it again replaces the handlers installed by the previous call.
    """
    logger = logging.getLogger(APP_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    debug = os.environ.get("LINEDIFF_DEBUG")
    if not debug:
        logger.setLevel(logging.CRITICAL)
        logger.addHandler(logging.NullHandler())
        logger.propagate = False
        return logger

    level = _debug_level(debug)
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    path = Path(log_dir or user_log_dir(appname=APP_NAME, appauthor=APP_AUTHOR))
    path.mkdir(parents=True, exist_ok=True)
    fh = logging.FileHandler(path / "linediff.debug.log", encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(formatter)
    logger.addHandler(fh)

    if os.environ.get("LINEDIFF_LOG_STDERR"):
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level)
        sh.setFormatter(formatter)
        logger.addHandler(sh)
    return logger

logger = setup_logger()
