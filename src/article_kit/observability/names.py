# src/article_kit/observability/names.py

"""Standard metric names for article-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# PDF Decoding Metrics
# ============================================================================

# Duration
PDF_DECODE_DURATION = "pdf_decode_duration"

# Counters
PDF_DECODE_REQUESTS_TOTAL = "pdf_decode_requests_total"
PDF_DECODE_ERRORS_TOTAL = "pdf_decode_errors_total"


# ============================================================================
# Article Extraction Metrics
# ============================================================================

# Duration
EXTRACTION_DURATION = "extraction_duration"

# Counters (accumulate over documents)
EXTRACTION_PAGES_SEGMENTED = "extraction_pages_segmented"
EXTRACTION_INDEX_ENTRIES = "extraction_index_entries"
EXTRACTION_ARTICLES_EXTRACTED = "extraction_articles_extracted"
EXTRACTION_ARTICLES_DISCARDED = "extraction_articles_discarded"
