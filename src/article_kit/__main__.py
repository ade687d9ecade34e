"""Command-line entry point: extract articles from a PDF export as JSON."""

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from article_kit.errors import PdfDecodeError, ProfileError
from article_kit.extraction.config import ExtractionConfig
from article_kit.extraction.pipeline import extract_articles
from article_kit.extraction.profile import load_profile
from article_kit.parsers.pdf_parser import PdfTextDecoder


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="article_kit",
        description="Extract articles from a multi-article PDF export",
    )
    parser.add_argument("pdf_file", help="Path to PDF file")
    parser.add_argument("--output", "-o", help="Output JSON file (default: stdout)")
    parser.add_argument("--profile", help="YAML boilerplate profile to use")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = ExtractionConfig()
        if args.profile:
            config = ExtractionConfig(profile=load_profile(args.profile))
        decoded = PdfTextDecoder().decode(Path(args.pdf_file))
    except (PdfDecodeError, ProfileError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    articles = extract_articles(decoded.text, decoded.page_count, config=config)

    report = {
        "source_file": str(args.pdf_file),
        "extraction_time": datetime.now(timezone.utc).isoformat(),
        "page_count": decoded.page_count,
        "article_count": len(articles),
        "articles": [article.to_dict() for article in articles],
    }

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, ensure_ascii=False)
        print(f"Extracted {len(articles)} articles to {args.output}")
    else:
        print(json.dumps(report, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
