# src/article_kit/extraction/index.py

import logging
import re

from .config import ExtractionConfig
from .models import IndexEntry, Page

logger = logging.getLogger(__name__)

# "Article Title ........ 12"
_DOTTED_LEADER = re.compile(r"\.{2,}\s*(\d{1,3})(?!\d)")
_DOT_RUN = re.compile(r"\.{3,}")
_WHITESPACE = re.compile(r"\s+")
_LETTER = re.compile(r"[A-Za-z]")


def parse_index(
    pages: list[Page], config: ExtractionConfig = ExtractionConfig()
) -> list[IndexEntry]:
    """Collect table-of-contents entries from the leading pages.

    Only the first ``config.max_index_pages`` pages are scanned. Exact
    (title, page_number) duplicates are dropped, keeping the first one,
    and the result is stable-sorted by page number.
    """
    entries: list[IndexEntry] = []
    for page in pages[: config.max_index_pages]:
        page_entries = parse_index_page(page.text, config)
        logger.debug(
            "Index page %d yielded %d entries", page.page_number, len(page_entries)
        )
        entries.extend(page_entries)

    unique = list(dict.fromkeys(entries))
    if len(unique) < len(entries):
        logger.debug("Dropped %d duplicate index entries", len(entries) - len(unique))

    return sorted(unique, key=lambda entry: entry.page_number)


def parse_index_page(
    text: str, config: ExtractionConfig = ExtractionConfig()
) -> list[IndexEntry]:
    for pattern in config.profile.index_header_patterns:
        text = pattern.sub("", text)

    low, high = config.index_page_range
    entries: list[IndexEntry] = []
    last_end = 0

    for match in _DOTTED_LEADER.finditer(text):
        page_number = int(match.group(1))
        if not low < page_number < high:
            continue

        title = clean_title(text[last_end : match.start()])
        last_end = match.end()

        if is_valid_title(title, config):
            entries.append(IndexEntry(title=title, page_number=page_number))

    return entries


def clean_title(raw: str) -> str:
    title = _DOT_RUN.sub(" ", raw)
    return _WHITESPACE.sub(" ", title).strip()


def is_valid_title(title: str, config: ExtractionConfig = ExtractionConfig()) -> bool:
    """Reject short, mostly non-alphabetic or boilerplate title candidates."""
    if len(title) < config.min_title_length:
        return False

    if any(marker in title for marker in config.profile.title_blocklist):
        return False

    letters = len(_LETTER.findall(title))
    return letters / len(title) >= config.min_title_letter_ratio
