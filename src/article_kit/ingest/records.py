# src/article_kit/ingest/records.py

import logging
from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict

from article_kit.extraction.models import Article

logger = logging.getLogger(__name__)

UNKNOWN_OUTLET = "Unknown Source"
DEFAULT_SOURCE_URI = "factiva"


class ArticleImport(BaseModel):
    """Shape handed to the persistence layer for one extracted article.

    The persistence layer tags every record with input method "pdf" and
    queues it for analysis; neither happens here.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_id: str
    title: str
    news_outlet: str
    authors: list[str]
    url: str = ""
    full_body_text: str
    date_written: date | None = None
    input_method: Literal["pdf"] = "pdf"
    source_uri: str
    word_count: int | None = None


def to_import_record(article: Article, project_id: str) -> ArticleImport:
    return ArticleImport(
        project_id=project_id,
        title=article.title,
        news_outlet=article.source or UNKNOWN_OUTLET,
        authors=[article.author] if article.author else [],
        full_body_text=article.text_content,
        date_written=_parse_iso_date(article.publish_date),
        source_uri=article.source or DEFAULT_SOURCE_URI,
        word_count=article.word_count,
    )


def to_import_records(articles: list[Article], project_id: str) -> list[ArticleImport]:
    return [to_import_record(article, project_id) for article in articles]


def _parse_iso_date(value: str | None) -> date | None:
    # Unparsed publish dates are kept verbatim upstream; only ISO dates map here
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.debug("Publish date %r is not ISO formatted, leaving unset", value)
        return None
