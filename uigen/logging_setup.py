"""Process-wide logging setup."""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", name: str = "uigen") -> logging.Logger:
    """Attach a single stream handler to the package logger (idempotent)."""

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if not any(getattr(h, "_uigen_tag", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._uigen_tag = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
