from datetime import date

import pytest
from pydantic import ValidationError

from article_kit.extraction.models import Article
from article_kit.ingest.records import (
    ArticleImport,
    to_import_record,
    to_import_records,
)

PROJECT_ID = "5f0c7f1e-3a53-4c1b-9d0e-2f6a1b7c8d90"


class TestToImportRecord:
    def test_maps_full_article(self) -> None:
        article = Article(
            title="Fire breaks out downtown",
            page_number=2,
            text_content="Fire crews battled a blaze.",
            source="The Daily Example",
            author="Jane Smith",
            publish_date="2025-09-01",
            word_count=412,
        )

        record = to_import_record(article, PROJECT_ID)

        assert record == ArticleImport(
            project_id=PROJECT_ID,
            title="Fire breaks out downtown",
            news_outlet="The Daily Example",
            authors=["Jane Smith"],
            url="",
            full_body_text="Fire crews battled a blaze.",
            date_written=date(2025, 9, 1),
            input_method="pdf",
            source_uri="The Daily Example",
            word_count=412,
        )

    def test_defaults_for_missing_metadata(self) -> None:
        article = Article(title="Budget talks resume", page_number=3, text_content="x")

        record = to_import_record(article, PROJECT_ID)

        assert record.news_outlet == "Unknown Source"
        assert record.authors == []
        assert record.source_uri == "factiva"
        assert record.date_written is None
        assert record.word_count is None
        assert record.input_method == "pdf"

    def test_unnormalized_publish_date_is_left_unset(self) -> None:
        article = Article(
            title="Budget talks resume",
            page_number=3,
            text_content="x",
            publish_date="Sept. 2025",
        )

        assert to_import_record(article, PROJECT_ID).date_written is None

    def test_to_import_records_preserves_order(self) -> None:
        articles = [
            Article(title="B", page_number=2, text_content="b"),
            Article(title="A", page_number=3, text_content="a"),
        ]

        records = to_import_records(articles, PROJECT_ID)

        assert [r.title for r in records] == ["B", "A"]
        assert all(r.project_id == PROJECT_ID for r in records)


class TestArticleImportModel:
    def test_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            ArticleImport(
                project_id=PROJECT_ID,
                title="t",
                news_outlet="o",
                authors=[],
                full_body_text="b",
                source_uri="factiva",
                category="news",
            )

    def test_input_method_is_always_pdf(self) -> None:
        with pytest.raises(ValidationError):
            ArticleImport(
                project_id=PROJECT_ID,
                title="t",
                news_outlet="o",
                authors=[],
                full_body_text="b",
                source_uri="factiva",
                input_method="manual",
            )

    def test_serializes_dates_as_iso_strings(self) -> None:
        record = ArticleImport(
            project_id=PROJECT_ID,
            title="t",
            news_outlet="o",
            authors=[],
            full_body_text="b",
            source_uri="factiva",
            date_written=date(2025, 9, 1),
        )

        assert record.model_dump(mode="json")["date_written"] == "2025-09-01"
