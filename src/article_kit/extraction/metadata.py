# src/article_kit/extraction/metadata.py

"""Per-article metadata heuristics.

Export formats print a small metadata block near the top of each article::

    Jane Smith | Staff Writer      <- author (line before the anchor)
    1,234 words                    <- word-count anchor
    1 September 2025               <- publish date
    10:30 AM                       <- optional clock time, skipped
    The Daily Example              <- source

Everything is located relative to the first word-count anchor found in the
leading lines. Without an anchor nothing is extracted.
"""

import logging
import re
from datetime import date

from .models import ArticleMetadata

logger = logging.getLogger(__name__)

DEFAULT_SCAN_LINES = 20

# Digits are bounded; longer runs are noise, not word counts
_WORD_COUNT = re.compile(
    r"^(\d{1,3}(?:,\d{3}){1,5}|\d{1,15})\s+words$", re.IGNORECASE
)
_DAY_MONTH_YEAR = re.compile(r"^(\d{1,2})\s+([A-Za-z]+)\s+(\d{4})$")
_CLOCK_TIME = re.compile(r"^\d{1,2}:\d{2}\s*(?:AM|PM)?$", re.IGNORECASE)
_PRESS = re.compile(r"\bPress\b", re.IGNORECASE)
_LETTER = re.compile(r"[A-Za-z]")
_DIGITS_ONLY = re.compile(r"^\d+$")

_MONTHS = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)


def extract_metadata(
    text: str, title: str, *, scan_lines: int = DEFAULT_SCAN_LINES
) -> ArticleMetadata:
    """Infer author, source, publish date and word count from article text.

    Only the first word-count anchor within ``scan_lines`` non-empty lines is
    used. An unrelated "NNN words" phrase early in the body will be taken as
    the anchor; there is no way to tell the two apart from the text alone.
    """
    lines = [line.strip() for line in text.split("\n")]
    lines = [line for line in lines if line]

    for i, line in enumerate(lines[:scan_lines]):
        match = _WORD_COUNT.match(line)
        if not match:
            continue

        word_count = int(match.group(1).replace(",", ""))
        publish_date = None
        source = None
        author = None

        if i + 1 < len(lines):
            publish_date = parse_date(lines[i + 1])

        if i + 2 < len(lines):
            if is_clock_time(lines[i + 2]):
                candidate = lines[i + 3] if i + 3 < len(lines) else None
            else:
                candidate = lines[i + 2]
            if candidate is not None and is_valid_source(candidate):
                source = candidate

        if i > 0:
            candidate = clean_author(lines[i - 1])
            if candidate and candidate != title and not looks_like_source(candidate):
                author = candidate

        logger.debug("Metadata anchor found on line %d of %r", i, title)
        return ArticleMetadata(
            author=author,
            source=source,
            publish_date=publish_date,
            word_count=word_count,
        )

    logger.debug("No word-count anchor found for %r", title)
    return ArticleMetadata()


def parse_date(text: str) -> str:
    """Normalize "<day> <Month> <yyyy>" to YYYY-MM-DD.

    Anything else, including impossible dates, is returned verbatim.
    """
    match = _DAY_MONTH_YEAR.match(text)
    if not match:
        return text

    month_name = match.group(2).lower()
    if month_name not in _MONTHS:
        return text

    try:
        parsed = date(
            int(match.group(3)), _MONTHS.index(month_name) + 1, int(match.group(1))
        )
    except ValueError:
        return text
    return parsed.isoformat()


def is_clock_time(text: str) -> bool:
    return bool(_CLOCK_TIME.match(text))


def is_valid_source(text: str) -> bool:
    if len(text) < 3:
        return False
    if len(_LETTER.findall(text)) < 2:
        return False
    if is_clock_time(text):
        return False
    return not _DIGITS_ONLY.match(text)


def clean_author(text: str) -> str | None:
    """Return the author part of a byline, or None for single-word lines.

    "Jane Smith | Staff Writer" becomes "Jane Smith".
    """
    if len(text.split()) < 2:
        return None

    if "|" in text:
        before_pipe = text.split("|", 1)[0].strip()
        if len(before_pipe.split()) < 2:
            return None
        return before_pipe

    return text


def looks_like_source(text: str) -> bool:
    # "Associated Press Newswires" style lines sit where bylines usually are
    if len(text) < 3:
        return False
    return bool(_PRESS.search(text)) and len(text.split()) > 2
