"""Process logging configuration for the CLI and API server."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(filename)s:%(lineno)d] %(message)s"


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a stderr handler to the ``bookday`` logger tree once."""

    package_logger = logging.getLogger("bookday")
    package_logger.setLevel(level)
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    return package_logger


__all__ = ["LOG_FORMAT", "configure_logging"]
