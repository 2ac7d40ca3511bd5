"""
Thankful exception hierarchy.

All thankful exceptions inherit from ThankfulError, making it easy for callers
to catch library-level errors while still distinguishing specific failure modes.
"""


class ThankfulError(Exception):
    """Base exception class for all thankful errors."""


class ConfigurationError(ThankfulError):
    """Raised for configuration errors (missing keys, invalid values)."""


class TableImportError(ThankfulError):
    """Raised when a CSV backup cannot be read or holds no valid rows.

    The message is meant to be shown to the user as-is.
    """
