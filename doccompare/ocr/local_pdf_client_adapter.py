from doccompare.logging.logger import Log
from doccompare.ocr.base import BaseOcrClient
from doccompare.ocr.exceptions import OCRServiceError
from doccompare.ocr.models import OCRPage, OcrResponse
from doccompare.pdf.base import BasePdfExtractor
from doccompare.pdf.exceptions import PdfExtractionError


class LocalPdfOcrClientAdapter(BaseOcrClient):
    """Reads the embedded text layer instead of calling an OCR service.

    Only useful for PDFs that already carry text; scanned pages come back
    empty. Never returns structured data.
    """

    def __init__(self, extractor: BasePdfExtractor) -> None:
        self._extractor = extractor

    def recognize(self, file_name: str, pdf_bytes: bytes) -> OcrResponse:
        try:
            texts = self._extractor.extract_pages(pdf_bytes)
        except PdfExtractionError as exc:
            raise OCRServiceError(f"Local text extraction failed: {exc}") from exc
        Log.info(f"Extracted text layer of {len(texts)} pages from {file_name}")
        return OcrResponse(
            file_name=file_name,
            pages=len(texts),
            ocr_text=[
                OCRPage(page_number=i, raw_text=text)
                for i, text in enumerate(texts, start=1)
            ],
        )
