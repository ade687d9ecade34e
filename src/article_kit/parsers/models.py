# parsers/models.py

from dataclasses import dataclass


@dataclass(frozen=True)
class DecodedPdf:
    text: str
    page_count: int
