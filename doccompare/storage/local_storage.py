from datetime import datetime, timezone
from pathlib import Path

from doccompare.storage.base import BaseDocumentStorage
from doccompare.storage.exceptions import (
    DocumentNotFoundError,
    StorageReadError,
    StorageWriteError,
)
from doccompare.storage.models import StorageEntry


class LocalDocumentStorage(BaseDocumentStorage):
    """Stores documents as flat files in a single directory."""

    def __init__(self, root: Path) -> None:
        self._root = root
        self._root.mkdir(parents=True, exist_ok=True)

    @property
    def root(self) -> Path:
        return self._root

    def enumerate(self) -> list[StorageEntry]:
        try:
            entries = []
            for path in self._root.iterdir():
                if not path.is_file():
                    continue
                stat = path.stat()
                entries.append(
                    StorageEntry(
                        stored_name=path.name,
                        size_bytes=stat.st_size,
                        modified_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
                    )
                )
        except OSError as exc:
            raise StorageReadError(f"Failed to read documents in {self._root}: {exc}") from exc
        return entries

    def save(self, stored_name: str, data: bytes) -> int:
        path = self._resolve_path(stored_name)
        try:
            return path.write_bytes(data)
        except OSError as exc:
            raise StorageWriteError(f"Failed to write {stored_name}: {exc}") from exc

    def read_bytes(self, stored_name: str) -> bytes:
        path = self._resolve_path(stored_name)
        if not path.is_file():
            raise DocumentNotFoundError(f"Document not found: {stored_name}")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise StorageReadError(f"Failed to read {stored_name}: {exc}") from exc

    def _resolve_path(self, stored_name: str) -> Path:
        if (
            not stored_name
            or "/" in stored_name
            or "\\" in stored_name
            or stored_name in (".", "..")
        ):
            raise DocumentNotFoundError(f"Invalid stored name: {stored_name!r}")
        return self._root / stored_name
