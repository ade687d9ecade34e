# src/article_kit/extraction/boundaries.py

import logging

from .models import Article, IndexEntry, Page

logger = logging.getLogger(__name__)


def resolve_articles(entries: list[IndexEntry], pages: list[Page]) -> list[Article]:
    """
    Turn sorted index entries into raw articles.

    - Entry i spans [entry_i.page_number, entry_{i+1}.page_number - 1]
    - The last entry spans up to the highest page number seen
    - Pages are joined with a blank line; missing page numbers are skipped
    """
    if not entries or not pages:
        return []

    # First page carrying each label wins
    by_number: dict[int, Page] = {}
    for page in pages:
        by_number.setdefault(page.page_number, page)

    labels = sorted(by_number)
    last_page_number = labels[-1]
    articles: list[Article] = []

    for i, entry in enumerate(entries):
        if i + 1 < len(entries):
            end_page = entries[i + 1].page_number - 1
        else:
            end_page = last_page_number

        text = _join_pages(by_number, labels, entry.page_number, end_page)
        logger.debug(
            "Article %r spans pages %d-%d (%d chars)",
            entry.title,
            entry.page_number,
            end_page,
            len(text),
        )
        articles.append(
            Article(title=entry.title, page_number=entry.page_number, text_content=text)
        )

    return articles


def _join_pages(
    by_number: dict[int, Page], labels: list[int], start_page: int, end_page: int
) -> str:
    # Visit existing labels only; a range can span billions of numbers
    parts = [
        by_number[number].text
        for number in labels
        if start_page <= number <= end_page
    ]
    return "\n\n".join(parts).strip()
