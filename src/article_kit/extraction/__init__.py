from .boundaries import resolve_articles
from .cleaning import sanitize_text
from .config import ExtractionConfig
from .index import parse_index
from .metadata import extract_metadata
from .models import Article, ArticleMetadata, IndexEntry, Page
from .pages import segment_pages
from .pipeline import extract_articles, extract_articles_from_pdf
from .profile import FACTIVA_PROFILE, BoilerplateProfile, load_profile
from .validation import filter_articles

__all__ = [
    "Article",
    "ArticleMetadata",
    "BoilerplateProfile",
    "ExtractionConfig",
    "FACTIVA_PROFILE",
    "IndexEntry",
    "Page",
    "extract_articles",
    "extract_articles_from_pdf",
    "extract_metadata",
    "filter_articles",
    "load_profile",
    "parse_index",
    "resolve_articles",
    "sanitize_text",
    "segment_pages",
]
