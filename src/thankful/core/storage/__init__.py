"""
Storage backends for thankful.

The journal keeps everything in a single slot holding one serialized
payload. Backends implement ``read()``/``write()`` over that slot; the
local filesystem backend is the default, the in-memory one serves tests
and throwaway sessions.
"""

from .base import (
    SlotBackend,
    StorageError,
    StoragePermissionError,
    StorageQuotaError,
)
from .local import LocalFileSlot
from .memory import MemorySlot

__all__ = [
    "LocalFileSlot",
    "MemorySlot",
    "SlotBackend",
    "StorageError",
    "StoragePermissionError",
    "StorageQuotaError",
]
