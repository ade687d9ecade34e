# Errors
from .errors import ArticleKitError, PdfDecodeError, ProfileError

# Extraction
from .extraction import (
    FACTIVA_PROFILE,
    Article,
    ArticleMetadata,
    BoilerplateProfile,
    ExtractionConfig,
    extract_articles,
    extract_articles_from_pdf,
    load_profile,
)

# Ingest
from .ingest import ArticleImport, to_import_record, to_import_records

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import DecodedPdf, PdfDecoderConfig, PdfTextDecoder, TextDecoder

__all__ = [
    # Errors
    "ArticleKitError",
    "PdfDecodeError",
    "ProfileError",
    # Extraction
    "FACTIVA_PROFILE",
    "Article",
    "ArticleMetadata",
    "BoilerplateProfile",
    "ExtractionConfig",
    "extract_articles",
    "extract_articles_from_pdf",
    "load_profile",
    # Ingest
    "ArticleImport",
    "to_import_record",
    "to_import_records",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "DecodedPdf",
    "PdfDecoderConfig",
    "PdfTextDecoder",
    "TextDecoder",
]
