"""
Custom exception hierarchy for the file utilities.

Each error also derives from the closest builtin so callers can catch
either the utilkit type or the standard one (e.g. FileNotFoundError).
"""
from typing import Optional


class UtilkitError(Exception):
    """Base exception for all utilkit errors."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class FileMissingError(UtilkitError, FileNotFoundError):
    """Raised when a required file or folder does not exist."""
    pass


class InvalidPathError(UtilkitError, ValueError):
    """Raised when a path is blank or contains illegal characters."""
    pass


class FileOperationError(UtilkitError, OSError):
    """Raised when a copy/move/delete/create operation fails."""
    pass


class FileAlreadyExistsError(FileOperationError, FileExistsError):
    """Raised when a rename or copy target is already taken."""
    pass


class SuffixExhaustedError(FileOperationError):
    """Raised when no free copy suffix could be found."""
    pass
