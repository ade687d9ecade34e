# src/article_kit/parsers/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class PdfDecoderConfig:
    """Limits applied before a payload reaches pdfplumber."""

    max_bytes: int = 50 * 1024 * 1024
    # Separator placed between the text of consecutive pages
    page_separator: str = "\n\n"
