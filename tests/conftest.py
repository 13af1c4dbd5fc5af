import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

REPORT_LINE = "Hemoglobin 10.9 g/dL (ref 11.5-15.5) low, MCV 71 fL (ref 75-87) low."


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def report_pdf_bytes() -> bytes:
    """Generate a ten-page lab report with roughly 5,000 characters of text."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.setFont("Helvetica", 9)
    for page in range(10):
        c.drawString(72, 740, f"City Lab - Complete Blood Count - page {page + 1}")
        for line in range(7):
            c.drawString(72, 720 - line * 14, REPORT_LINE)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    """PNG signature followed by filler; enough for media type handling."""
    return b"\x89PNG\r\n\x1a\n" + b"\x00" * 64

