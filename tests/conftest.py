import io

import docx
import openpyxl
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

RATE_ROW = ["Hotel", "Downtown Suite", 120, "USD", "2024-01-01", "2024-12-31"]


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
def sample_docx_bytes() -> bytes:
    """Word document with a styled heading, a paragraph and a rates table."""
    document = docx.Document()
    document.add_heading("Summer Tariff", level=1)
    document.add_paragraph("Airport transfer 45 EUR per person")
    table = document.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Room"
    table.cell(0, 1).text = "Price"
    table.cell(1, 0).text = "Sea View Double"
    table.cell(1, 1).text = "180"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def sample_xlsx_bytes() -> bytes:
    """Workbook with a single sheet holding one hotel rate row."""
    workbook = openpyxl.Workbook()
    sheet = workbook.active
    sheet.title = "Rates"
    sheet.append(RATE_ROW)
    buf = io.BytesIO()
    workbook.save(buf)
    return buf.getvalue()


@pytest.fixture()
def multi_sheet_xlsx_bytes() -> bytes:
    workbook = openpyxl.Workbook()
    first = workbook.active
    first.title = "Hotels"
    first.append(["Hotel", "Garden Room", 95])
    second = workbook.create_sheet("Tours")
    second.append(["Tour", "City Walk", 30])
    buf = io.BytesIO()
    workbook.save(buf)
    return buf.getvalue()
