"""
Counter application error hierarchy.

Distinguishes fatal setup errors from recoverable save errors.
"""
from pathlib import Path
from typing import Optional


class CounterAppError(Exception):
    """Base class for counter application errors."""

    def __init__(self, message: str, recoverable: bool = True):
        super().__init__(message)
        self.recoverable = recoverable


class SetupError(CounterAppError):
    """Session could not be prepared; the loop is never entered."""

    def __init__(self, message: str):
        super().__init__(message, recoverable=False)


class SnapshotLoadError(SetupError):
    """Existing snapshot could not be opened or parsed."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class SnapshotSaveError(CounterAppError):
    """Snapshot could not be written; in-memory state is unaffected."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message, recoverable=True)
        self.path = path
