"""Shared exception types raised by the turn engine."""

from __future__ import annotations


class ProtocolError(ValueError):
    """Raised when a line from the judge cannot be parsed; fatal mid-game."""


class OutOfBoundsError(IndexError):
    """Raised when a grid cell outside the map is read or written."""
