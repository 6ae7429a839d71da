"""
Error types raised across coin-dl.
Every error aborts the running command and is reported as a single line.
"""

from typing import Any, Optional


class CoindlError(Exception):
    """Base class for all coin-dl errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ConfigError(CoindlError):
    """Raised for invalid command-line flags or argument values."""
    pass


class NetworkError(CoindlError):
    """Exception raised when the price-data API cannot be reached or answers badly."""

    def __init__(self, message: str, status_code: Optional[int] = None, response: Any = None):
        self.status_code = status_code
        self.response = response
        super().__init__(message)


class FormatError(CoindlError):
    """Raised when a value cannot be formatted as a number (NaN, infinity, garbage)."""
    pass


class RenderError(CoindlError):
    """Raised when markdown cannot be rendered for the terminal."""
    pass
