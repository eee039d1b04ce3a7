from doccompare.config.settings import Settings
from doccompare.ocr.base import BaseOcrClient
from doccompare.ocr.example_client_adapter import ExampleOcrClientAdapter
from doccompare.ocr.http_client_adapter import HttpOcrClientAdapter
from doccompare.ocr.local_pdf_client_adapter import LocalPdfOcrClientAdapter
from doccompare.pdf.factory import PdfExtractorFactory


class OcrClientFactory:
    """Creates the OCR adapter named by the ``ocr_provider`` setting."""

    PROVIDERS = ("http", "local", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrClient:
        provider = settings.ocr_provider.lower()
        if provider == "http":
            return HttpOcrClientAdapter(
                base_url=settings.ocr_base_url,
                endpoint=settings.ocr_endpoint,
                api_key=settings.ocr_api_key,
                timeout_seconds=settings.ocr_timeout_seconds,
            )
        if provider == "local":
            return LocalPdfOcrClientAdapter(PdfExtractorFactory.create(settings.pdf_engine))
        if provider == "example":
            return ExampleOcrClientAdapter()
        raise ValueError(
            f"Unknown OCR provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
