"""
Error types raised by the report pipeline.

Row and price failures are collected as issues on the result;
only failures that abort a whole load are raised.
"""

from typing import Optional


class UsageReportError(Exception):
    """Base class for all usage report errors."""


class ReportReadError(UsageReportError):
    """Raised when a report file cannot be read or holds no header."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class PriceParseError(UsageReportError, ValueError):
    """Raised when a per-unit price string cannot be turned into a number."""

    def __init__(self, message: str, value: str):
        super().__init__(message)
        self.value = value
