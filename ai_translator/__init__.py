"""AI translation of multilingual records."""

__version__ = "0.1.0"
