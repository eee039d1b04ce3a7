"""Rebuilds a table from the flat line output of OCR.

The OCR collaborator reads a payroll table cell by cell, one cell per line,
so the table arrives as::

    Item
    <header 1> ... <header 6>
    <record 1 field 1> ... <record 1 field 6>
    <record 2 field 1> ...

Everything hinges on the marker line and the fixed width in ``TableLayout``;
any page that does not follow this layout is shown as plain text instead.
"""

import re

from doccompare.logging.logger import Log
from doccompare.tables.exceptions import MalformedTableError
from doccompare.tables.models import ParsedTable, TableLayout

_ORDINAL_PREFIX = re.compile(r"^\d+\s+")


def page_lines(text: str) -> list[str]:
    """Split raw page text into trimmed, non-empty lines."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def strip_ordinal(value: str) -> str:
    """Drop a leading ``<digits><whitespace>`` row number, e.g. ``12 Jane Doe`` -> ``Jane Doe``."""
    return _ORDINAL_PREFIX.sub("", value, count=1)


class TableReconstructor:
    """Detects the table region of one OCR page and regroups its lines into rows."""

    def __init__(self, layout: TableLayout | None = None) -> None:
        self._layout = layout if layout is not None else TableLayout()

    @property
    def layout(self) -> TableLayout:
        return self._layout

    def reconstruct(self, lines: list[str]) -> ParsedTable | None:
        """Rebuild the table on a page.

        Returns:
            The parsed table, or None when the page has no marker line.
            Trailing lines that do not fill a whole record are dropped.

        Raises:
            MalformedTableError: if the marker is present but fewer than
                ``layout.width`` header lines follow it.
        """
        layout = self._layout
        try:
            marker_index = lines.index(layout.marker)
        except ValueError:
            return None

        header_start = marker_index + 1
        headers = tuple(lines[header_start:header_start + layout.width])
        if len(headers) < layout.width:
            raise MalformedTableError(
                f"Table marker '{layout.marker}' at line {marker_index} is followed by "
                f"{len(headers)} header lines, expected {layout.width}"
            )

        body = lines[header_start + layout.width:]
        rows = [
            self._build_row(body[start:start + layout.width])
            for start in range(0, len(body) - layout.width + 1, layout.width)
        ]
        dropped = len(body) % layout.width
        if dropped:
            Log.debug(f"Dropped {dropped} trailing lines after the last full record")
        return ParsedTable(headers=headers, rows=rows, fields=layout.fields)

    def _build_row(self, window: list[str]) -> tuple[str, ...]:
        ordinal = self._layout.ordinal_index
        return tuple(
            strip_ordinal(value) if i == ordinal else value
            for i, value in enumerate(window)
        )
