from dataclasses import dataclass


@dataclass(frozen=True)
class ComparisonView:
    """What the comparison page shows for one stored document.

    ``document_path`` is always set so the document itself stays viewable
    when OCR is unavailable.
    """

    stored_name: str
    display_name: str
    document_path: str
    ocr_available: bool
    result: dict[str, object] | None = None
    error: str | None = None
