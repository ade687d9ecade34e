from pathlib import Path

import pytest
from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen import canvas

from article_kit.parsers.models import DecodedPdf
from article_kit.parsers.pdf_parser import PdfTextDecoder

EXPORT_PAGES = [
    [
        "Page 1 of 3",
        "Fire breaks out downtown ....... 2",
        "Budget talks resume ....... 3",
    ],
    [
        "Page 2 of 3",
        "Fire breaks out downtown",
        "Jane Smith",
        "412 words",
        "1 September 2025",
        "The Daily Example",
        "Fire crews battled a blaze on Main Street overnight.",
    ],
    [
        "Page 3 of 3",
        "Budget talks resume",
        "City council members returned to budget negotiations.",
    ],
]


def _write_pdf(path: Path, pages: list[list[str]]) -> None:
    """Creates a deterministic PDF with one text block per page."""
    c = canvas.Canvas(str(path), pagesize=LETTER)
    width, height = LETTER

    for lines in pages:
        text = c.beginText(40, height - 50)
        for line in lines:
            text.textLine(line)
        c.drawText(text)
        c.showPage()

    c.save()


@pytest.fixture(scope="module")
def pdf_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test PDFs once per module."""
    dir_path: Path = tmp_path_factory.mktemp("pdfs")

    _write_pdf(dir_path / "export.pdf", EXPORT_PAGES)
    _write_pdf(dir_path / "plain.pdf", [["No page markers here.", "Just text."]])

    return dir_path


@pytest.fixture(scope="module")
def decoded_export(pdf_dir: Path) -> DecodedPdf:
    """Decode the export PDF once, reuse across tests."""
    decoder = PdfTextDecoder()
    with open(pdf_dir / "export.pdf", "rb") as f:
        return decoder.decode(f)
