from dataclasses import dataclass, field


@dataclass(frozen=True)
class OCRPage:
    """Plain text the OCR service read from one physical page."""

    page_number: int
    raw_text: str


@dataclass(frozen=True)
class NamedTable:
    """A table the OCR service returned already structured."""

    name: str
    headers: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.headers and not self.rows


@dataclass(frozen=True)
class StructuredDocument:
    """Structured OCR output; every section is optional and may be empty."""

    fields: dict[str, str] = field(default_factory=dict)
    tables: list[NamedTable] = field(default_factory=list)
    prepared_by: dict[str, str] = field(default_factory=dict)
    footer: dict[str, str] = field(default_factory=dict)
    notes: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (
            self.fields
            or any(not table.is_empty() for table in self.tables)
            or self.prepared_by
            or self.footer
            or self.notes
        )


@dataclass(frozen=True)
class OcrResponse:
    """Normalized OCR service response."""

    file_name: str
    pages: int = 0
    ocr_text: list[OCRPage] = field(default_factory=list)
    structured_data: StructuredDocument | None = None
