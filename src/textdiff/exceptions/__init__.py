"""
Custom exceptions for the text diff engine.
"""


class TextDiffError(Exception):
    """Base exception for all diff-related errors."""
    pass


class InvalidInputError(TextDiffError, TypeError):
    """Raised when an input to the diff engine is not text."""

    def __init__(self, message: str = "Both inputs must be text"):
        super().__init__(message)


class UnsupportedModeError(TextDiffError, ValueError):
    """Raised when an unknown comparison mode is requested."""

    def __init__(self, mode):
        self.mode = mode
        super().__init__(f"Unsupported diff mode: {mode}")
