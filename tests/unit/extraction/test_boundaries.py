from time import monotonic

from article_kit.extraction.boundaries import resolve_articles
from article_kit.extraction.models import Article, IndexEntry, Page


def _pages(*numbers: int) -> list[Page]:
    return [Page(page_number=n, text=f"text of page {n}") for n in numbers]


class TestResolveArticles:
    def test_each_entry_spans_until_next_entry(self) -> None:
        entries = [
            IndexEntry(title="First", page_number=2),
            IndexEntry(title="Second", page_number=4),
            IndexEntry(title="Third", page_number=5),
        ]

        result = resolve_articles(entries, _pages(1, 2, 3, 4, 5, 6))

        assert [a.text_content for a in result] == [
            "text of page 2\n\ntext of page 3",
            "text of page 4",
            "text of page 5\n\ntext of page 6",
        ]

    def test_ranges_are_contiguous_and_disjoint(self) -> None:
        pages = _pages(*range(1, 11))
        entries = [
            IndexEntry(title="A", page_number=2),
            IndexEntry(title="B", page_number=5),
            IndexEntry(title="C", page_number=6),
        ]

        result = resolve_articles(entries, pages)

        covered = [
            int(line.rsplit(" ", 1)[1])
            for article in result
            for line in article.text_content.split("\n\n")
        ]
        assert covered == list(range(2, 11))

    def test_creates_raw_articles_without_metadata(self) -> None:
        result = resolve_articles([IndexEntry(title="Only", page_number=1)], _pages(1))

        assert result == [Article(title="Only", page_number=1, text_content="text of page 1")]
        assert result[0].author is None
        assert result[0].word_count is None

    def test_missing_pages_are_skipped(self) -> None:
        entries = [IndexEntry(title="Gappy", page_number=2)]

        result = resolve_articles(entries, _pages(1, 2, 4))

        assert result[0].text_content == "text of page 2\n\ntext of page 4"

    def test_range_with_no_pages_gives_empty_text(self) -> None:
        entries = [
            IndexEntry(title="Missing", page_number=7),
            IndexEntry(title="Present", page_number=9),
        ]

        result = resolve_articles(entries, _pages(1, 2, 9))

        assert [a.text_content for a in result] == ["", "text of page 9"]

    def test_entries_sharing_a_page(self) -> None:
        """The earlier entry gets an empty range, the later one the page."""
        entries = [
            IndexEntry(title="One", page_number=3),
            IndexEntry(title="Two", page_number=3),
        ]

        result = resolve_articles(entries, _pages(1, 2, 3))

        assert [a.text_content for a in result] == ["", "text of page 3"]

    def test_duplicate_page_labels_use_first_page(self) -> None:
        pages = [
            Page(page_number=2, text="first copy"),
            Page(page_number=2, text="second copy"),
        ]

        result = resolve_articles([IndexEntry(title="Dup", page_number=2)], pages)

        assert result[0].text_content == "first copy"

    def test_last_entry_runs_to_highest_page_number(self) -> None:
        pages = [
            Page(page_number=2, text="two"),
            Page(page_number=5, text="five"),
            Page(page_number=3, text="three"),
        ]

        result = resolve_articles([IndexEntry(title="Tail", page_number=2)], pages)

        assert result[0].text_content == "two\n\nthree\n\nfive"

    def test_preserves_entry_order(self) -> None:
        entries = [
            IndexEntry(title="B", page_number=2),
            IndexEntry(title="A", page_number=3),
        ]

        result = resolve_articles(entries, _pages(1, 2, 3))

        assert [a.title for a in result] == ["B", "A"]

    def test_empty_inputs(self) -> None:
        assert resolve_articles([], _pages(1, 2)) == []
        assert resolve_articles([IndexEntry(title="X", page_number=1)], []) == []

    def test_sparse_huge_page_label_only_visits_existing_pages(self) -> None:
        pages = [
            Page(page_number=2, text="two"),
            Page(page_number=3, text="three"),
            Page(page_number=3_000_000_000, text="stray"),
        ]
        start = monotonic()

        result = resolve_articles([IndexEntry(title="Only", page_number=2)], pages)

        assert monotonic() - start < 1
        assert result[0].text_content == "two\n\nthree\n\nstray"
