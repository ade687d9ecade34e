# src/article_kit/extraction/cleaning.py

import re
from typing import Any

from .profile import FACTIVA_PROFILE, BoilerplateProfile

_BLANK_LINE_RUN = re.compile(r"\n\s*\n\s*\n")
_HORIZONTAL_SPACE = re.compile(r"[^\S\n]+")
_SPACE_AFTER_NEWLINE = re.compile(r"\n[^\S\n]+")
_SPACE_BEFORE_NEWLINE = re.compile(r"[^\S\n]+\n")


def sanitize_text(text: Any, profile: BoilerplateProfile = FACTIVA_PROFILE) -> Any:
    """Strip export boilerplate and normalize whitespace.

    Header patterns run before footer patterns, each list in order.
    Non-string input is returned unchanged.
    """
    if not isinstance(text, str) or not text:
        return text

    for pattern in profile.header_patterns:
        text = pattern.sub("", text)
    for pattern in profile.footer_patterns:
        text = pattern.sub("", text)

    return normalize_whitespace(text)


def normalize_whitespace(text: str) -> str:
    text = _BLANK_LINE_RUN.sub("\n\n", text)
    text = text.strip()
    text = _HORIZONTAL_SPACE.sub(" ", text)
    text = _SPACE_AFTER_NEWLINE.sub("\n", text)
    return _SPACE_BEFORE_NEWLINE.sub("\n", text)
