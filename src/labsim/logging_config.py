# MIT License (see LICENSE)
"""
Logging configuration for labsim.

Library modules only create loggers (``logging.getLogger(__name__)``); an
application embedding the simulations calls ``setup_logging`` once to attach
handlers. The level comes from the argument or the ``LABSIM_LOG_LEVEL``
environment variable.
"""
from __future__ import annotations
import logging
import logging.handlers
import os
from pathlib import Path

LOG_FORMAT = os.getenv("LABSIM_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def setup_logging(
    name: str = "labsim",
    level: str | None = None,
    log_file: Path | str | None = None,
) -> logging.Logger:
    """
    Set up logging for the package.

    Args:
        name: Logger name (the package root by default).
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a rotating log file.

    Returns:
        Configured logger instance.
    """
    if level is None:
        level = os.getenv("LABSIM_LOG_LEVEL", "INFO")
    lvl = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(lvl)

    formatter = logging.Formatter(LOG_FORMAT)

    # Re-running setup replaces the handlers it installed earlier
    for h in list(logger.handlers):
        if getattr(h, "_labsim_handler", False):
            logger.removeHandler(h)
            h.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(lvl)
    console_handler.setFormatter(formatter)
    console_handler._labsim_handler = True
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10485760,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(lvl)
        file_handler.setFormatter(formatter)
        file_handler._labsim_handler = True
        logger.addHandler(file_handler)

    return logger
