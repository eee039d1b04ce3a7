"""Turns an untrusted OCR service payload into an OcrResponse.

Shape problems never raise: missing or mistyped parts fall back to safe
defaults (0 pages, no text, no structured data) so that one bad field does
not hide the rest of the response.
"""

from typing import Any

from doccompare.logging.logger import Log
from doccompare.ocr.models import NamedTable, OCRPage, OcrResponse, StructuredDocument


def parse_ocr_response(raw: Any, fallback_file_name: str = "") -> OcrResponse:
    if not isinstance(raw, dict):
        Log.warning(f"OCR response is not an object ({type(raw).__name__}), using defaults")
        return OcrResponse(file_name=fallback_file_name)

    file_name = raw.get("file_name")
    return OcrResponse(
        file_name=file_name if isinstance(file_name, str) and file_name else fallback_file_name,
        pages=_parse_page_count(raw.get("pages")),
        ocr_text=_parse_pages(raw.get("ocr_text")),
        structured_data=_parse_structured(raw.get("structured_data")),
    )


def _parse_page_count(raw: Any) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        return 0
    return raw


def _parse_pages(raw: Any) -> list[OCRPage]:
    if not isinstance(raw, list):
        if raw is not None:
            Log.warning("OCR response 'ocr_text' is not a list, ignoring it")
        return []
    pages: list[OCRPage] = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            Log.debug(f"Skipping ocr_text entry {i}: not an object")
            continue
        number = item.get("page")
        text = item.get("text")
        if isinstance(number, bool) or not isinstance(number, int) or number < 1:
            Log.debug(f"Skipping ocr_text entry {i}: invalid page number {number!r}")
            continue
        if not isinstance(text, str):
            Log.debug(f"Skipping ocr_text entry {i}: text is not a string")
            continue
        pages.append(OCRPage(page_number=number, raw_text=text))
    return sorted(pages, key=lambda page: page.page_number)


def _parse_structured(raw: Any) -> StructuredDocument | None:
    if not isinstance(raw, dict):
        return None
    return StructuredDocument(
        fields=_string_map(raw.get("fields")),
        tables=_parse_tables(raw.get("tables")),
        prepared_by=_string_map(raw.get("prepared_by")),
        footer=_string_map(raw.get("footer")),
        notes=[_as_text(note) for note in _as_list(raw.get("notes")) if note is not None],
    )


def _parse_tables(raw: Any) -> list[NamedTable]:
    tables: list[NamedTable] = []
    for i, item in enumerate(_as_list(raw)):
        if not isinstance(item, dict):
            continue
        name = item.get("name") or item.get("title") or f"Table {i + 1}"
        tables.append(
            NamedTable(
                name=_as_text(name),
                headers=[_as_text(h) for h in _as_list(item.get("headers"))],
                rows=[_parse_row(row) for row in _as_list(item.get("rows"))],
            )
        )
    return tables


def _parse_row(raw: Any) -> list[str]:
    if isinstance(raw, dict):
        return [_as_text(value) for value in raw.values()]
    if isinstance(raw, list):
        return [_as_text(value) for value in raw]
    return [_as_text(raw)]


def _string_map(raw: Any) -> dict[str, str]:
    if not isinstance(raw, dict):
        return {}
    return {str(key): _as_text(value) for key, value in raw.items()}


def _as_list(raw: Any) -> list[Any]:
    return raw if isinstance(raw, list) else []


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)
