from doccompare.logging.logger import Log
from doccompare.storage.base import BaseDocumentStorage
from doccompare.storage.models import StoredDocument
from doccompare.storage.naming import recover_original_name

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


class DocumentIndex:
    """Read-through listing of the documents held by a storage backend."""

    def __init__(self, storage: BaseDocumentStorage) -> None:
        self._storage = storage

    def list(self) -> list[StoredDocument]:
        """List stored documents in storage enumeration order.

        The order is not chronological; sort by ``uploaded_at`` if needed.

        Raises:
            StorageReadError: if the storage location is unreadable.
        """
        documents = [
            StoredDocument(
                stored_name=entry.stored_name,
                original_name=recover_original_name(entry.stored_name),
                size_bytes=entry.size_bytes,
                uploaded_at=entry.modified_at,
            )
            for entry in self._storage.enumerate()
        ]
        Log.info(f"Listed {len(documents)} stored documents")
        return documents


def format_file_size(size_bytes: int) -> str:
    """Human-readable size with base 1024, e.g. ``1.5 KB``."""
    if size_bytes <= 0:
        return "0 Bytes"
    exponent = 0
    while exponent < len(_SIZE_UNITS) - 1 and size_bytes >= 1024 ** (exponent + 1):
        exponent += 1
    value = round(size_bytes / 1024**exponent, 2)
    return f"{value:g} {_SIZE_UNITS[exponent]}"
