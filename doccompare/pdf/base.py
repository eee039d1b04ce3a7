from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for page-wise PDF text extraction adapters."""

    @abstractmethod
    def extract_pages(self, pdf_bytes: bytes) -> list[str]:
        """Extract the text layer of every page.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            One string per page, in page order. Pages without text yield "".

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """
