"""Console diagnostics for the daylog package."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from config.config import settings

_DEF_FMT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_LOGGER_NAME = "daylog"


def get_diagnostics_logger(level: Optional[str] = None) -> logging.Logger:
    """Return the ``daylog`` logger, wired to stderr when nothing else is.

    Child loggers (``daylog.paths`` and friends) propagate here. A handler is
    only attached when neither this logger nor the root logger has one, so an
    application that configured logging keeps full control of the output.
    """

    logger = logging.getLogger(_LOGGER_NAME)
    level_name = (level or settings.diagnostics_level).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    if not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_DEF_FMT))
        logger.addHandler(handler)

    return logger


__all__ = ["get_diagnostics_logger"]
