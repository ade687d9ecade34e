# src/article_kit/errors.py


class ArticleKitError(Exception):
    """Base class for errors raised by article-kit."""


class PdfDecodeError(ArticleKitError):
    """The PDF payload could not be decoded into text.

    This is the only failure that escapes the extraction pipeline; every
    later stage degrades instead of raising.
    """


class ProfileError(ArticleKitError):
    """A boilerplate profile definition is malformed."""
