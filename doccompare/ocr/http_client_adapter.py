import base64

import httpx

from doccompare.logging.logger import Log
from doccompare.ocr.base import BaseOcrClient
from doccompare.ocr.exceptions import OCRNetworkError, OCRServiceError
from doccompare.ocr.models import OcrResponse
from doccompare.ocr.response_parser import parse_ocr_response


class HttpOcrClientAdapter(BaseOcrClient):
    """OCR adapter for a JSON-over-HTTP service.

    Request body: ``{"file_name": ..., "base64_pdf": ...}``; the response
    body is parsed leniently by ``parse_ocr_response``. Each call opens and
    closes its own ``httpx.Client``.
    """

    def __init__(
        self,
        *,
        base_url: str,
        endpoint: str = "/ocr",
        api_key: str = "",
        timeout_seconds: int = 120,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._endpoint = endpoint
        self._headers = {"Authorization": f"Bearer {api_key}"} if api_key else {}
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    def recognize(self, file_name: str, pdf_bytes: bytes) -> OcrResponse:
        payload = {
            "file_name": file_name,
            "base64_pdf": base64.b64encode(pdf_bytes).decode("ascii"),
        }
        Log.info(f"Sending {file_name} to OCR service", size_bytes=len(pdf_bytes))
        try:
            with self._open_client() as client:
                response = client.post(self._endpoint, json=payload)
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise OCRNetworkError(f"OCR service network error: {exc}") from exc
        except httpx.TransportError as exc:
            raise OCRNetworkError(f"OCR service transport error: {exc}") from exc
        except httpx.HTTPError as exc:
            raise OCRServiceError(f"OCR service request failed: {exc}") from exc

        if response.status_code >= 400:
            raise OCRServiceError(
                f"OCR service returned HTTP {response.status_code}: {response.text[:200]}"
            )
        try:
            body = response.json()
        except ValueError as exc:
            raise OCRServiceError(f"OCR service returned invalid JSON: {exc}") from exc
        if not isinstance(body, dict):
            raise OCRServiceError("OCR service response must be a JSON object")

        Log.debug(f"OCR raw response keys: {sorted(body)}")
        return parse_ocr_response(body, fallback_file_name=file_name)

    def _open_client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self._base_url,
            headers=self._headers,
            timeout=self._timeout_seconds,
            transport=self._transport,
        )
