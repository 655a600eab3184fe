"""Key/value stores that hold the cached quote batch between sessions."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

from quotify.engine.errors import StorageError


class PersistentCache:
    """Synchronous bytes-valued key/value store."""

    def get(self, key: str) -> Optional[bytes]:
        raise NotImplementedError

    def set(self, key: str, value: bytes) -> None:
        raise NotImplementedError


class MemoryCache(PersistentCache):
    """In-process cache, lost on restart."""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self.data: Dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> Optional[bytes]:
        return self.data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self.data[key] = bytes(value)


class JsonFileCache(PersistentCache):
    """All keys in one JSON object on disk; values are stored as UTF-8 text.

    Writes go through a temp file and ``os.replace`` so a crash never leaves
    a half-written cache behind.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read cache file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Cache file {self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[bytes]:
        value = self._read_all().get(key)
        if value is None:
            return None
        return str(value).encode("utf-8")

    def set(self, key: str, value: bytes) -> None:
        try:
            data = self._read_all()
        except StorageError:
            # unreadable file gets overwritten
            data = {}
        try:
            data[key] = value.decode("utf-8")
        except UnicodeDecodeError as e:
            raise StorageError(f"Cache values must be UTF-8: {e}") from e

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=str(self.path.parent), suffix=".tmp")
        except OSError as e:
            raise StorageError(f"Cannot write cache file {self.path}: {e}") from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2, sort_keys=True)
                f.write("\n")
            os.replace(tmp, self.path)
        except OSError as e:
            try:
                os.unlink(tmp)
            except FileNotFoundError:
                pass
            raise StorageError(f"Cannot write cache file {self.path}: {e}") from e
