# parsers/pdf_parser.py

import io
import logging
from pathlib import Path
from time import monotonic
from typing import Any, BinaryIO, cast

import pdfplumber

from article_kit.errors import PdfDecodeError
from article_kit.observability import names
from article_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import TextDecoder
from .config import PdfDecoderConfig
from .models import DecodedPdf

logger = logging.getLogger(__name__)

_PDF_MAGIC = b"%PDF"


class PdfTextDecoder(TextDecoder):
    """
    Deterministic PDF-to-text decoder.
    - Uses page order
    - One text block per page, joined by a blank line
    - Layout is not preserved beyond pdfplumber's line ordering
    """

    def __init__(
        self,
        config: PdfDecoderConfig = PdfDecoderConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._config = config
        self.metrics_hook = metrics_hook

    def decode(self, source: str | Path | bytes | BinaryIO) -> DecodedPdf:
        start = monotonic()
        self.metrics_hook.increment(names.PDF_DECODE_REQUESTS_TOTAL)

        try:
            if isinstance(source, bytes):
                self._check_payload(source)
                source = io.BytesIO(source)

            # pdfplumber.open accepts path-like or buffer objects; cast to Any
            with pdfplumber.open(cast(Any, source)) as pdf:
                texts = [page.extract_text() or "" for page in pdf.pages]
        except PdfDecodeError:
            self.metrics_hook.increment(names.PDF_DECODE_ERRORS_TOTAL)
            raise
        except Exception as exc:
            self.metrics_hook.increment(names.PDF_DECODE_ERRORS_TOTAL)
            logger.error("Failed to decode PDF: %s", exc)
            raise PdfDecodeError(f"Failed to decode PDF: {exc}") from exc

        text = self._config.page_separator.join(texts)
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PDF_DECODE_DURATION, elapsed_ms)
        logger.info("PDF has %d pages, %d characters", len(texts), len(text))
        return DecodedPdf(text=text, page_count=len(texts))

    def _check_payload(self, payload: bytes) -> None:
        if not payload:
            raise PdfDecodeError("PDF payload is empty")
        if len(payload) > self._config.max_bytes:
            raise PdfDecodeError(
                f"PDF payload is {len(payload)} bytes, "
                f"limit is {self._config.max_bytes}"
            )
        if not payload.startswith(_PDF_MAGIC):
            raise PdfDecodeError("Payload is not a PDF document")
