# src/article_kit/extraction/pages.py

import logging

from .models import Page
from .profile import FACTIVA_PROFILE, BoilerplateProfile

logger = logging.getLogger(__name__)


def segment_pages(
    text: str,
    page_count: int | None = None,
    *,
    profile: BoilerplateProfile = FACTIVA_PROFILE,
) -> list[Page]:
    """
    Split decoded document text into pages on "Page N of M" markers.

    - Each page runs from its marker to the next marker (or document end)
    - Page numbers are taken from the markers as-is; duplicates are kept
    - Markers whose label cannot be read as an int are skipped
    - No markers: the whole text becomes page 1
    - page_count is informational only
    """
    markers: list[tuple[int, int]] = []
    for match in profile.page_marker.finditer(text):
        try:
            page_number = int(match.group(1))
        except ValueError:
            # Labels past the interpreter's int digit limit
            logger.debug(
                "Skipping page marker with unusable label at %d", match.start()
            )
            continue
        markers.append((match.start(), page_number))

    if not markers:
        logger.debug("No page markers found, treating document as a single page")
        return [Page(page_number=1, text=text)]

    if page_count is not None and page_count != len(markers):
        logger.warning(
            "Declared page count %d differs from %d page markers found",
            page_count,
            len(markers),
        )

    pages: list[Page] = []
    for i, (start, page_number) in enumerate(markers):
        end = markers[i + 1][0] if i + 1 < len(markers) else len(text)
        pages.append(Page(page_number=page_number, text=text[start:end].strip()))

    logger.debug("Segmented %d pages", len(pages))
    return pages
