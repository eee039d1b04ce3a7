from dataclasses import dataclass, field

TABLE_MARKER = "Item"
RECORD_FIELDS: tuple[str, ...] = (
    "name",
    "id",
    "basic",
    "employer_contribution",
    "employee_contribution",
    "total_contribution",
)
TABLE_WIDTH = len(RECORD_FIELDS)


@dataclass(frozen=True)
class TableLayout:
    """Grammar the reconstructor assumes for a tabular OCR region.

    ``marker`` is the exact line that opens the table; it is followed by
    ``width`` header lines and then records of ``width`` lines each, mapped
    positionally onto ``fields``.
    """

    marker: str = TABLE_MARKER
    fields: tuple[str, ...] = RECORD_FIELDS
    ordinal_field: str = "name"

    def __post_init__(self) -> None:
        if not self.fields:
            raise ValueError("TableLayout.fields must not be empty")
        if self.ordinal_field not in self.fields:
            raise ValueError(
                f"ordinal_field '{self.ordinal_field}' is not one of {self.fields}"
            )

    @property
    def width(self) -> int:
        return len(self.fields)

    @property
    def ordinal_index(self) -> int:
        return self.fields.index(self.ordinal_field)


@dataclass(frozen=True)
class ParsedTable:
    """Headers and fixed-width rows rebuilt from flat OCR lines.

    Values are the OCR text as read; nothing is converted to numbers.
    """

    headers: tuple[str, ...]
    rows: list[tuple[str, ...]] = field(default_factory=list)
    fields: tuple[str, ...] = RECORD_FIELDS

    def records(self) -> list[dict[str, str]]:
        return [dict(zip(self.fields, row)) for row in self.rows]

    def to_dict(self) -> dict[str, object]:
        return {
            "headers": list(self.headers),
            "rows": self.records(),
        }
