"""Utility functions and helpers."""

from .helpers import ensure_dir, load_data, save_results, setup_logging, validate_record_dataframe

__all__ = ["ensure_dir", "load_data", "save_results", "setup_logging", "validate_record_dataframe"]
