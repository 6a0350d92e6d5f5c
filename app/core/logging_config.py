"""Logging setup for the storefront service.

Every module logs through a child of the ``storefront`` logger so a single
handler installed here covers the whole application.
"""

import logging
import sys

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> logging.Logger:
    root_logger = logging.getLogger("storefront")
    root_logger.setLevel(level.upper())

    # Prevent duplicate handlers on repeated calls (e.g. tests, reloads)
    if root_logger.handlers:
        return root_logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    root_logger.addHandler(handler)
    root_logger.debug("Logging initialised at level %s", level.upper())
    return root_logger
