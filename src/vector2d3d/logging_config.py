"""
Logging Configuration
=====================
The package only emits records, at DEBUG level, when it meets degenerate
input (zero-length normalization, undefined angles). On import it attaches a
`NullHandler` and nothing else, so it stays silent unless the application
opts in through `setup_logging`.
"""
import logging
import sys
from typing import Optional, TextIO

from vector2d3d.config import LOG_DATE_FORMAT, LOG_FORMAT, LOGGER_NAME


def setup_logging(
    level: int = logging.DEBUG,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Route the package's log records to a stream and optionally a file.

    Calling it again replaces the handlers installed by the previous call;
    the package `NullHandler` is left in place.

    Args:
        level: Logging level for the package logger and its handlers.
        log_file: Optional path of a file to write records to (overwritten).
        stream: Stream for the console handler. Defaults to sys.stderr.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            continue
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(stream if stream is not None else sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
