"""Record storage."""

from .store import RecordFileStore

__all__ = ["RecordFileStore"]
