from .base import TextDecoder
from .config import PdfDecoderConfig
from .models import DecodedPdf
from .pdf_parser import PdfTextDecoder

__all__ = [
    "DecodedPdf",
    "PdfDecoderConfig",
    "PdfTextDecoder",
    "TextDecoder",
]
