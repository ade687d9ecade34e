# parsers/base.py

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO

from .models import DecodedPdf


class TextDecoder(ABC):
    @abstractmethod
    def decode(self, source: str | Path | bytes | BinaryIO) -> DecodedPdf:
        """
        Decode a document into plain text plus its page count.

        Requirements:
        - Deterministic output for same input
        - Pages in document order
        - Raise PdfDecodeError on any failure; never return partial text
        """
        raise NotImplementedError
