"""In-memory storage slot."""

from .base import SlotBackend, StorageQuotaError


class MemorySlot(SlotBackend):
    """Keeps the payload in process memory.

    ``max_bytes`` caps the encoded payload size, which makes it easy to
    exercise quota failures without touching the filesystem.
    """

    def __init__(self, payload: str | None = None, max_bytes: int | None = None):
        self._payload = payload
        self.max_bytes = max_bytes
        self.write_count = 0

    def read(self) -> str | None:
        return self._payload

    def write(self, payload: str) -> None:
        if self.max_bytes is not None and len(payload.encode("utf-8")) > self.max_bytes:
            raise StorageQuotaError(f"Payload exceeds the {self.max_bytes} byte quota")
        self._payload = payload
        self.write_count += 1

    def exists(self) -> bool:
        return self._payload is not None

    def clear(self) -> bool:
        existed = self._payload is not None
        self._payload = None
        return existed
