#!/usr/bin/env python3
"""Exceptions raised while syncing folder indexes."""

from pathlib import Path
from typing import Union


class IndexSyncError(Exception):
    """Base exception for index sync failures."""
    pass


class InvalidTargetError(IndexSyncError):
    """Raised when the target folder is missing or not a directory."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Path is not a directory: {self.path}")


class FilesystemError(IndexSyncError):
    """Raised when a filesystem read or write fails."""

    def __init__(self, path: Union[str, Path], operation: str, cause: Exception):
        self.path = Path(path)
        self.operation = operation
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"Failed to {operation}: {self.path}: {reason}")


class TreeFormatError(IndexSyncError):
    """Raised when a tree JSON dump cannot be understood."""
    pass
