# src/article_kit/extraction/config.py

from dataclasses import dataclass

from .profile import FACTIVA_PROFILE, BoilerplateProfile


@dataclass(frozen=True)
class ExtractionConfig:
    """Tuning knobs for the extraction pipeline.

    Immutable. Explicit. Defaults match the Factiva export format.
    """

    # Table of contents is assumed to sit in the leading pages
    max_index_pages: int = 10
    metadata_scan_lines: int = 20
    max_article_characters: int = 50_000
    min_title_length: int = 5
    min_title_letter_ratio: float = 0.1
    # Exclusive bounds for plausible table-of-contents page references
    index_page_range: tuple[int, int] = (1, 500)
    profile: BoilerplateProfile = FACTIVA_PROFILE
