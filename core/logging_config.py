# core/logging_config.py
# ------------------------------------------------------------
# Logging for the calculator modules.
#
# Everything logs under the "core" namespace (core.clearance,
# core.session, core.app). Streamlit reruns the script on every widget
# change, so setup_logging() is safe to call more than once: it replaces
# the handlers it installed before instead of adding new ones.
#
# Environment (read in core/config.py)
# ------------------------------------
#   CLEARANCE_LOG_LEVEL  level name, default INFO
#   CLEARANCE_LOG_FILE   optional path; log lines are also written there
#
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "core"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the "core" logger: stdout always, plus a file when log_file is set.

    Parameters
    ----------
    level    : logging level, int or name ("DEBUG")
    log_file : path of a log file (overwritten per session), or None

    Returns
    -------
    logging.Logger
        The configured "core" logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging initialized (level=%s, file=%s).", logging.getLevelName(logger.level), log_file)
    return logger


__all__ = ["setup_logging", "LOGGER_NAME"]
