"""
Local filesystem storage slot.

The payload lives in a single file. Writes go to a temporary sibling file
that is then renamed over the target, so readers only ever see the old or
the new payload.
"""

import errno
import os
import tempfile
from pathlib import Path

from loguru import logger

from .base import SlotBackend, StorageError, StoragePermissionError, StorageQuotaError

_QUOTA_ERRNOS = {errno.ENOSPC, getattr(errno, "EDQUOT", errno.ENOSPC)}


class LocalFileSlot(SlotBackend):
    """Local filesystem storage slot."""

    def __init__(self, path: str = "~/.thankful-data/gratitude_entries.json", encoding: str = "utf-8"):
        self.path = Path(path).expanduser().resolve()
        self.encoding = encoding

    def read(self) -> str | None:
        if not self.path.exists():
            return None
        try:
            return self.path.read_text(encoding=self.encoding)
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot read {self.path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e

    def write(self, payload: str) -> None:
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            with os.fdopen(fd, "w", encoding=self.encoding) as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot write to {self.path}: {e}") from e
        except OSError as e:
            if e.errno in _QUOTA_ERRNOS:
                raise StorageQuotaError(f"No space left to write {self.path}: {e}") from e
            raise StorageError(f"Cannot write to {self.path}: {e}") from e
        finally:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)

        logger.debug(f"Wrote {len(payload)} chars to {self.path}")

    def exists(self) -> bool:
        return self.path.exists()

    def clear(self) -> bool:
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot remove {self.path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Cannot remove {self.path}: {e}") from e
        logger.debug(f"Removed {self.path}")
        return True
