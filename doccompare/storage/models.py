from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class StorageEntry:
    """One file as reported by a storage backend."""

    stored_name: str
    size_bytes: int
    modified_at: datetime


@dataclass(frozen=True)
class StoredDocument:
    """A listed document; ``stored_name`` is the only identifier."""

    stored_name: str
    original_name: str
    size_bytes: int
    uploaded_at: datetime

    @property
    def is_pdf(self) -> bool:
        return self.stored_name.lower().endswith(".pdf")

    @property
    def path(self) -> str:
        return document_path(self.stored_name)


@dataclass(frozen=True)
class UploadReceipt:
    """Result of a successful upload."""

    stored_name: str
    original_name: str
    size_bytes: int

    @property
    def path(self) -> str:
        return document_path(self.stored_name)


def document_path(stored_name: str) -> str:
    """Public path under which a stored document is served: /uploads/{stored_name}"""
    return f"/uploads/{stored_name}"
