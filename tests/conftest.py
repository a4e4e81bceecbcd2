import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

INDENTURE_LINES = [
    "INDENTURE dated as of June 1, 2024 between Example Corp., as Issuer,",
    "and First Trust Company, as Trustee, relating to the 4.25% Senior Notes due 2030.",
    "The Notes will be senior unsecured obligations of the Issuer and will rank",
    "equally in right of payment with all existing and future senior indebtedness.",
    "Interest on the Notes will accrue at 4.25% per annum, payable semi-annually.",
    "The aggregate principal amount of Notes issued on the Issue Date is $100,000,000.",
]


def _pdf(pages: list[list[str]]) -> bytes:
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
def sample_pdf_bytes() -> bytes:
    """A one-page PDF with enough indenture text to pass the content check."""
    return _pdf([INDENTURE_LINES])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    return _pdf([["Page one content"], ["Page two content"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """A valid PDF with a single blank page."""
    return _pdf([[]])
