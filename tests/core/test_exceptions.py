"""Tests for thankful.core.exceptions."""

import pytest

from thankful.core.exceptions import ConfigurationError, TableImportError, ThankfulError
from thankful.core.storage import StorageError, StoragePermissionError, StorageQuotaError


def test_hierarchy():
    """All exceptions should inherit from ThankfulError."""
    for exc_cls in [ConfigurationError, TableImportError, StorageError]:
        assert issubclass(exc_cls, ThankfulError)


def test_storage_errors_are_storage_errors():
    assert issubclass(StoragePermissionError, StorageError)
    assert issubclass(StorageQuotaError, StorageError)


def test_exception_message():
    err = TableImportError("No valid entries found in CSV file")
    assert "No valid entries" in str(err)


def test_catch_base():
    with pytest.raises(ThankfulError):
        raise StorageQuotaError("full")
