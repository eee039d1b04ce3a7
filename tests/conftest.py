import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

PAYROLL_LINES = [
    "Item",
    "Name",
    "ID",
    "Basic",
    "Employer",
    "Employee",
    "Total",
    "1 Jane Doe",
    "E-001",
    "3000.00",
    "390.00",
    "330.00",
    "720.00",
    "2 John Roe",
    "E-002",
    "2500.00",
    "325.00",
    "275.00",
    "600.00",
]


def _pdf_with_pages(pages: list[list[str]]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 16
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def payroll_lines() -> list[str]:
    return list(PAYROLL_LINES)


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Minimal single-page PDF with known text content."""
    return _pdf_with_pages([["Hello PDF World"]])


@pytest.fixture()
def payroll_pdf_bytes() -> bytes:
    """Two pages: a cover page of prose and a page laid out as the payroll table."""
    return _pdf_with_pages([["Contribution Statement", "March"], PAYROLL_LINES])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Valid PDF with a blank page."""
    return _pdf_with_pages([[]])
