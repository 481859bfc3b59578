"""Coffee shop order management."""

__version__ = "1.0.0"
