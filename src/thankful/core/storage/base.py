"""
Abstract base class for storage slots.

A slot is one named, persisted text blob. Writes replace the whole blob;
there is no partial update.
"""

from abc import ABC, abstractmethod

from thankful.core.exceptions import ThankfulError


class SlotBackend(ABC):
    """Abstract base class for single-slot storage backends."""

    @abstractmethod
    def read(self) -> str | None:
        """Return the stored payload, or None if nothing was written yet.

        Raises StorageError if the slot exists but cannot be read.
        """

    @abstractmethod
    def write(self, payload: str) -> None:
        """Replace the stored payload. Raises StorageError on failure."""

    @abstractmethod
    def exists(self) -> bool:
        """Check whether anything has been written to the slot."""

    @abstractmethod
    def clear(self) -> bool:
        """Drop the stored payload. Returns True if something was removed."""


class StorageError(ThankfulError):
    """Base exception for storage errors."""


class StoragePermissionError(StorageError):
    """Raised when storage operation is not permitted."""


class StorageQuotaError(StorageError):
    """Raised when storage quota is exceeded."""
