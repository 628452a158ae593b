"""Logging setup for oko.

Every module logs through a child of the ``okolang`` logger. Nothing is
emitted unless :func:`setup_logging` (or the host application) installs a
handler; program output never goes through logging.


File: logging_config.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

COMPONENTS = ["lexer", "parser", "interpreter", "cli"]


def setup_logging(level=logging.INFO, stream=None):
    """
    Install a single stderr handler on the ``okolang`` logger.

    Existing handlers are removed so repeated calls do not duplicate output.

    Parameters:
        level (int): The logging level for the package and its components.
        stream: Optional stream for the handler, defaults to stderr.

    Returns:
        logging.Logger: The configured ``okolang`` logger.
    """
    logger = logging.getLogger("okolang")
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False

    for comp in COMPONENTS:
        comp_logger = logging.getLogger(f"okolang.{comp}")
        comp_logger.setLevel(level)
        comp_logger.propagate = True

    return logger
