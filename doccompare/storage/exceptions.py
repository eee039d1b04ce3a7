class StorageError(Exception):
    """Base exception for all document storage errors."""


class UploadValidationError(StorageError):
    """Raised when an upload is rejected before anything is written."""


class MissingFileError(UploadValidationError):
    """Raised when an upload carries no filename."""


class InvalidTypeError(UploadValidationError):
    """Raised when the file extension is not an accepted document type."""


class TooLargeError(UploadValidationError):
    """Raised when the upload exceeds the configured size limit."""


class StorageReadError(StorageError, OSError):
    """Raised when the storage location cannot be enumerated or read."""


class DocumentNotFoundError(StorageError):
    """Raised when a stored name does not resolve to a document."""


class StorageWriteError(StorageError, OSError):
    """Raised when an accepted upload cannot be written."""
