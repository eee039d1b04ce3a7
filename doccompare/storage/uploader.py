from collections.abc import Callable, Iterable

from doccompare.logging.logger import Log
from doccompare.storage.base import BaseDocumentStorage
from doccompare.storage.exceptions import (
    InvalidTypeError,
    MissingFileError,
    TooLargeError,
    UploadValidationError,
)
from doccompare.storage.models import UploadReceipt
from doccompare.storage.naming import assign_stored_name, current_millis, split_extension


class UploadValidator:
    """Checks filename, type and size of an upload before it is stored."""

    def __init__(self, allowed_extensions: Iterable[str], max_bytes: int) -> None:
        self._allowed = frozenset(ext.lower().lstrip(".") for ext in allowed_extensions)
        self._max_bytes = max_bytes

    def validate(self, original_name: str, size_bytes: int) -> None:
        """Raise an UploadValidationError subclass if the upload is not acceptable."""
        if not original_name or not original_name.strip():
            raise MissingFileError("No file uploaded")
        ext = split_extension(original_name)[1].lower().lstrip(".")
        if ext not in self._allowed:
            allowed = ", ".join(sorted(e.upper() for e in self._allowed))
            raise InvalidTypeError(f"Invalid file type. Only {allowed} are allowed.")
        if size_bytes > self._max_bytes:
            raise TooLargeError(
                f"File too large: {size_bytes} bytes (max {self._max_bytes})"
            )


class DocumentUploader:
    """Validates an upload, assigns its stored name and writes it to storage.

    There is no collision retry: an upload with the same original name in
    the same millisecond replaces the earlier file.
    """

    def __init__(
        self,
        storage: BaseDocumentStorage,
        validator: UploadValidator,
        clock: Callable[[], int] = current_millis,
    ) -> None:
        self._storage = storage
        self._validator = validator
        self._clock = clock

    def upload(
        self,
        original_name: str,
        data: bytes,
        declared_size: int | None = None,
    ) -> UploadReceipt:
        size = max(len(data), declared_size or 0)
        try:
            self._validator.validate(original_name, size)
        except UploadValidationError as exc:
            Log.warning("Upload rejected", original_name=repr(original_name), reason=exc)
            raise

        stored_name = assign_stored_name(original_name, self._clock())
        written = self._storage.save(stored_name, data)
        Log.info("Upload stored", stored_name=stored_name, size_bytes=written)
        return UploadReceipt(
            stored_name=stored_name,
            original_name=original_name,
            size_bytes=written,
        )
