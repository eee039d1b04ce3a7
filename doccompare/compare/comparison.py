from doccompare.compare.models import ComparisonView
from doccompare.composer.composer import ResultComposer
from doccompare.config.settings import Settings
from doccompare.logging.logger import Log
from doccompare.ocr.base import BaseOcrClient
from doccompare.ocr.exceptions import OCRServiceError
from doccompare.ocr.factory import OcrClientFactory
from doccompare.storage.base import BaseDocumentStorage
from doccompare.storage.exceptions import InvalidTypeError
from doccompare.storage.local_storage import LocalDocumentStorage
from doccompare.storage.models import document_path
from doccompare.storage.naming import recover_original_name
from doccompare.tables.models import TableLayout
from doccompare.tables.reconstructor import TableReconstructor


class ComparisonService:
    """Runs a stored PDF through OCR and composes the result for display.

    Flow: load bytes -> OCR -> compose. An OCR failure degrades the view to
    "OCR unavailable" instead of failing it; storage errors propagate.
    """

    def __init__(
        self,
        storage: BaseDocumentStorage,
        ocr_client: BaseOcrClient,
        composer: ResultComposer,
    ) -> None:
        self._storage = storage
        self._ocr_client = ocr_client
        self._composer = composer

    def compare(self, stored_name: str) -> ComparisonView:
        if not stored_name.lower().endswith(".pdf"):
            raise InvalidTypeError(f"Only PDF documents can be compared: {stored_name}")

        display_name = recover_original_name(stored_name)
        pdf_bytes = self._storage.read_bytes(stored_name)
        Log.info("Comparing document", stored_name=stored_name, size_bytes=len(pdf_bytes))

        try:
            response = self._ocr_client.recognize(display_name, pdf_bytes)
        except OCRServiceError as exc:
            Log.error("OCR unavailable", stored_name=stored_name, reason=exc)
            return ComparisonView(
                stored_name=stored_name,
                display_name=display_name,
                document_path=document_path(stored_name),
                ocr_available=False,
                error=str(exc),
            )

        return ComparisonView(
            stored_name=stored_name,
            display_name=display_name,
            document_path=document_path(stored_name),
            ocr_available=True,
            result=self._composer.compose(response),
        )


def build_comparison_service(settings: Settings) -> ComparisonService:
    """Build a ComparisonService with the configured adapters."""
    storage = LocalDocumentStorage(settings.uploads_dir)
    ocr_client = OcrClientFactory.create(settings)
    composer = ResultComposer(TableReconstructor(TableLayout(marker=settings.table_marker)))
    return ComparisonService(storage=storage, ocr_client=ocr_client, composer=composer)
