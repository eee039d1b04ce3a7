"""Example OCR client adapter.

Use this module as a reference when implementing new OCR service adapters.
Implement BaseOcrClient and register the provider in OcrClientFactory.
"""

from typing import ClassVar

from doccompare.ocr.base import BaseOcrClient
from doccompare.ocr.models import OcrResponse
from doccompare.ocr.response_parser import parse_ocr_response


class ExampleOcrClientAdapter(BaseOcrClient):
    """Example adapter that returns a fixed one-page payroll table.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "pages": 1,
        "ocr_text": [
            {
                "page": 1,
                "text": "\n".join(
                    [
                        "Monthly Contribution Statement",
                        "Item",
                        "Name",
                        "ID",
                        "Basic",
                        "Employer",
                        "Employee",
                        "Total",
                        "1 PERSON_1",
                        "E-001",
                        "3000.00",
                        "390.00",
                        "330.00",
                        "720.00",
                    ]
                ),
            }
        ],
    }

    def recognize(self, file_name: str, pdf_bytes: bytes) -> OcrResponse:
        _ = pdf_bytes
        return parse_ocr_response(self.DEFAULT_RESPONSE, fallback_file_name=file_name)
