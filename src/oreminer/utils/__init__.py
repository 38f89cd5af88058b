"""Utility helpers for the ore mining engine."""

from .errors import OutOfBoundsError, ProtocolError
from .real_time_logger import get_logger

__all__ = [
    "OutOfBoundsError",
    "ProtocolError",
    "get_logger",
]
