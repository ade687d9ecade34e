# src/article_kit/extraction/pipeline.py

import logging
from pathlib import Path
from time import monotonic
from typing import BinaryIO

from article_kit.observability import names
from article_kit.observability.base import MetricsHook, NoOpMetricsHook
from article_kit.parsers.base import TextDecoder
from article_kit.parsers.pdf_parser import PdfTextDecoder

from .boundaries import resolve_articles
from .cleaning import sanitize_text
from .config import ExtractionConfig
from .index import parse_index
from .metadata import extract_metadata
from .models import Article
from .pages import segment_pages
from .validation import filter_articles

logger = logging.getLogger(__name__)


def extract_articles(
    text: str,
    page_count: int | None = None,
    *,
    config: ExtractionConfig = ExtractionConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Article]:
    """
    Recover article records from the decoded text of a multi-article export.

    Stages: pages -> index entries -> raw articles -> metadata ->
    boilerplate removal -> validation.

    Deterministic and side-effect free apart from logging and metrics.
    An empty list is a valid outcome when no table of contents is found.
    """
    start = monotonic()
    logger.info(
        "Extracting articles from %s pages, %d characters",
        page_count if page_count is not None else "unknown",
        len(text),
    )

    pages = segment_pages(text, page_count, profile=config.profile)
    entries = parse_index(pages, config)
    if entries:
        logger.info("Found %d articles in index", len(entries))
    else:
        logger.warning(
            "No index entries found in the first %d pages",
            min(config.max_index_pages, len(pages)),
        )

    articles = resolve_articles(entries, pages)
    articles = [
        article.with_metadata(
            extract_metadata(
                article.text_content,
                article.title,
                scan_lines=config.metadata_scan_lines,
            )
        )
        for article in articles
    ]
    articles = [
        article.with_text(sanitize_text(article.text_content, config.profile))
        for article in articles
    ]
    valid = filter_articles(articles, config.max_article_characters)

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.EXTRACTION_DURATION, elapsed_ms)
    metrics_hook.increment(names.EXTRACTION_PAGES_SEGMENTED, len(pages))
    metrics_hook.increment(names.EXTRACTION_INDEX_ENTRIES, len(entries))
    metrics_hook.increment(names.EXTRACTION_ARTICLES_EXTRACTED, len(valid))
    metrics_hook.increment(
        names.EXTRACTION_ARTICLES_DISCARDED, len(articles) - len(valid)
    )
    logger.info("Returning %d valid articles", len(valid))
    return valid


def extract_articles_from_pdf(
    source: str | Path | bytes | BinaryIO,
    *,
    decoder: TextDecoder | None = None,
    config: ExtractionConfig = ExtractionConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Article]:
    """Decode a PDF and extract its articles.

    Raises:
        PdfDecodeError: If the PDF cannot be decoded. Nothing else escapes.
    """
    decoder = decoder or PdfTextDecoder(metrics_hook=metrics_hook)
    decoded = decoder.decode(source)
    return extract_articles(
        decoded.text,
        decoded.page_count,
        config=config,
        metrics_hook=metrics_hook,
    )
