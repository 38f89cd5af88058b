"""Lightweight logging shim for turn-time diagnostics."""

from __future__ import annotations

import logging
import sys
from typing import Optional

_LOGGER: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    """Return the package logger configured for stderr output.

    stdout carries the command stream, so diagnostics must never go there.
    """

    global _LOGGER
    if _LOGGER is None:
        _LOGGER = logging.getLogger("oreminer")
        if not _LOGGER.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            _LOGGER.addHandler(handler)
        _LOGGER.setLevel(logging.INFO)
    return _LOGGER
