from abc import ABC, abstractmethod

from doccompare.ocr.models import OcrResponse


class BaseOcrClient(ABC):
    """Contract for OCR service adapters."""

    @abstractmethod
    def recognize(self, file_name: str, pdf_bytes: bytes) -> OcrResponse:
        """Run OCR over a PDF document.

        Args:
            file_name: Display name sent along with the document.
            pdf_bytes: Raw PDF file content.

        Returns:
            OcrResponse with per-page text and optional structured data.

        Raises:
            OCRServiceError: if the service is unreachable or fails.
        """
