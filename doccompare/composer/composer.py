"""Builds the OCR side of the comparison view.

A document either has structured data from the OCR service, which is shown
as-is, or it does not, in which case every page goes through the table
reconstructor. The choice is made once per document: a partially filled
structured payload is never topped up with reconstructed tables.
Empty sections are left out of the result entirely.
"""

from doccompare.logging.logger import Log
from doccompare.ocr.models import NamedTable, OCRPage, OcrResponse, StructuredDocument
from doccompare.tables.exceptions import MalformedTableError
from doccompare.tables.reconstructor import TableReconstructor, page_lines

SOURCE_STRUCTURED = "structured"
SOURCE_RECONSTRUCTED = "reconstructed"


class ResultComposer:
    """Merges structured OCR data and reconstructed page tables into one JSON-ready dict."""

    def __init__(self, reconstructor: TableReconstructor | None = None) -> None:
        self._reconstructor = reconstructor if reconstructor is not None else TableReconstructor()

    def compose(self, response: OcrResponse) -> dict[str, object]:
        result: dict[str, object] = {
            "file_name": response.file_name,
            "pages": response.pages,
        }
        structured = response.structured_data
        if structured is not None and not structured.is_empty():
            result["source"] = SOURCE_STRUCTURED
            result.update(self._structured_sections(structured))
            Log.info(f"Composed structured result for {response.file_name}")
        else:
            result["source"] = SOURCE_RECONSTRUCTED
            result["page_results"] = [self._compose_page(page) for page in response.ocr_text]
            Log.info(
                f"Composed {len(response.ocr_text)} reconstructed pages for {response.file_name}"
            )
        return result

    def _structured_sections(self, structured: StructuredDocument) -> dict[str, object]:
        sections: dict[str, object] = {}
        if structured.fields:
            sections["fields"] = dict(structured.fields)
        tables = [_table_to_dict(t) for t in structured.tables if not t.is_empty()]
        if tables:
            sections["tables"] = tables
        if structured.prepared_by:
            sections["prepared_by"] = dict(structured.prepared_by)
        if structured.footer:
            sections["footer"] = dict(structured.footer)
        if structured.notes:
            sections["notes"] = list(structured.notes)
        return sections

    def _compose_page(self, page: OCRPage) -> dict[str, object]:
        lines = page_lines(page.raw_text)
        text = "\n".join(lines)
        try:
            table = self._reconstructor.reconstruct(lines)
        except MalformedTableError as exc:
            Log.warning(f"Page {page.page_number}: {exc}")
            return {"page": page.page_number, "kind": "text", "text": text, "error": str(exc)}
        if table is None:
            Log.debug(f"Page {page.page_number}: no table marker, showing text")
            return {"page": page.page_number, "kind": "text", "text": text}
        Log.debug(f"Page {page.page_number}: reconstructed {len(table.rows)} rows")
        return {"page": page.page_number, "kind": "table", "table": table.to_dict()}


def _table_to_dict(table: NamedTable) -> dict[str, object]:
    return {
        "name": table.name,
        "headers": list(table.headers),
        "rows": [list(row) for row in table.rows],
    }
