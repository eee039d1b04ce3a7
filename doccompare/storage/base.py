from abc import ABC, abstractmethod

from doccompare.storage.models import StorageEntry


class BaseDocumentStorage(ABC):
    """Contract for document storage backends.

    Each instance owns one namespace of stored names; several instances
    (e.g. one per tenant) can coexist.
    """

    @abstractmethod
    def enumerate(self) -> list[StorageEntry]:
        """Return every stored document with its size and modification time.

        Raises:
            StorageReadError: if the namespace cannot be read. No partial
                listing is returned.
        """

    @abstractmethod
    def save(self, stored_name: str, data: bytes) -> int:
        """Write ``data`` under ``stored_name``, replacing any existing file.

        Returns:
            Number of bytes written.
        """

    @abstractmethod
    def read_bytes(self, stored_name: str) -> bytes:
        """Read a stored document.

        Raises:
            DocumentNotFoundError: if ``stored_name`` does not resolve.
            StorageReadError: if the file exists but cannot be read.
        """
