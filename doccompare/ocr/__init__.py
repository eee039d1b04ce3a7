from doccompare.ocr.base import BaseOcrClient
from doccompare.ocr.exceptions import OCRNetworkError, OCRServiceError
from doccompare.ocr.factory import OcrClientFactory

__all__ = ["BaseOcrClient", "OCRNetworkError", "OCRServiceError", "OcrClientFactory"]
