"""
Logging Configuration
Attaches the console and optional file handlers to the 'smartconverter' logger.
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

LOGGER_NAME = "smartconverter"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> List[logging.Handler]:
    """
    Configure the package logger and return the handlers it now owns.

    Calling it again replaces the previous handlers, so relaunching the window
    from the same process does not duplicate lines.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path; lines are appended so repeated launches with
            the same --log-file keep their history.
        stream: Console stream, stderr when omitted.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    # Our handlers only; the root logger stays untouched
    logger.propagate = False

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, mode="a", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging at {logging.getLevelName(level)}" + (f", file {log_file}" if log_file else ""))
    return handlers
