"""
Logging configuration for cellsim.

Every module logs through logging.getLogger(__name__), so configuring the
package logger covers the core, the renderers and the CLI at once.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = __package__ or "cellsim"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger and return it.

    Args:
        level: Logging level for the package (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path; the file is truncated and receives the same records

    Calling this again replaces the handlers from the previous call.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %s", ", ".join(type(h).__name__ for h in handlers))
    return logger
