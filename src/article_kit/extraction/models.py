# src/article_kit/extraction/models.py

from dataclasses import asdict, dataclass, replace
from typing import Any


@dataclass(frozen=True)
class Page:
    """One page of decoded document text.

    page_number is the label captured from the page marker. It is not
    guaranteed to be contiguous or unique.
    """

    page_number: int
    text: str


@dataclass(frozen=True)
class IndexEntry:
    """A (title, target page) pair parsed from a table-of-contents page."""

    title: str
    page_number: int


@dataclass(frozen=True)
class ArticleMetadata:
    """Best-effort metadata found around the word-count anchor.

    Every field is None when unset:
    - author: no line before the anchor, or it was rejected
      (single word, equal to the title, or source-like).
    - source: no source candidate, or it did not qualify.
    - publish_date: no line after the anchor. Otherwise either
      YYYY-MM-DD or the raw candidate text when it is not a
      "<day> <Month> <yyyy>" date.
    - word_count: no anchor in the scanned lines.
    """

    author: str | None = None
    source: str | None = None
    publish_date: str | None = None
    word_count: int | None = None


@dataclass(frozen=True)
class Article:
    """An extracted article.

    Immutable. Later pipeline stages return new instances.
    """

    title: str
    page_number: int
    text_content: str
    source: str | None = None
    author: str | None = None
    publish_date: str | None = None
    word_count: int | None = None

    def with_metadata(self, metadata: ArticleMetadata) -> "Article":
        return replace(
            self,
            source=metadata.source,
            author=metadata.author,
            publish_date=metadata.publish_date,
            word_count=metadata.word_count,
        )

    def with_text(self, text_content: str) -> "Article":
        return replace(self, text_content=text_content)

    def to_dict(self) -> dict[str, Any]:
        """Serialize, leaving out metadata fields that were never set."""
        return {key: value for key, value in asdict(self).items() if value is not None}
