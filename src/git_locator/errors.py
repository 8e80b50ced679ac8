from typing import Optional


class GitLocatorError(ValueError):
    """Base error for git-locator. `subject_url` holds the offending input."""

    def __init__(self, message: str, subject_url: Optional[object] = None):
        super().__init__(message)
        self.subject_url = subject_url


class InvalidInputError(GitLocatorError):
    """Raised for non-string, blank or oversized input."""


class ParseFailureError(GitLocatorError):
    """Raised when the input is neither a URL nor an SCP-style remote."""


class ConflictingOptionsError(GitLocatorError):
    """Raised when mutually exclusive normalization options are combined."""
