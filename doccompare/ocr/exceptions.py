class OCRServiceError(Exception):
    """Raised when the OCR service cannot produce a result."""


class OCRNetworkError(OCRServiceError):
    """Raised when the OCR service is unreachable or times out."""
