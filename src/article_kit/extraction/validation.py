# src/article_kit/extraction/validation.py

import logging

from .models import Article

logger = logging.getLogger(__name__)

MAX_ARTICLE_CHARACTERS = 50_000


def filter_articles(
    articles: list[Article], max_characters: int = MAX_ARTICLE_CHARACTERS
) -> list[Article]:
    """Drop empty or oversized articles, keeping the order of the rest.

    Oversized text usually means a mis-segmented extraction, so it is
    discarded rather than truncated.
    """
    kept: list[Article] = []
    for article in articles:
        if not article.text_content:
            logger.info("Discarding %r: no text", article.title)
            continue
        if len(article.text_content) > max_characters:
            logger.info(
                "Discarding %r: too long (%d chars)",
                article.title,
                len(article.text_content),
            )
            continue
        kept.append(article)

    discarded = len(articles) - len(kept)
    if discarded:
        logger.info("Filtered out %d invalid article(s)", discarded)
    return kept
