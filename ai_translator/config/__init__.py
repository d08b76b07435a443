"""Configuration loading and validation."""

from .loader import ConfigLoader
from .validator import ConfigValidator

__all__ = ["ConfigLoader", "ConfigValidator"]
