"""Turn-decision engine for a fleet of mining robots."""

__version__ = "0.1.0"
