# src/article_kit/extraction/profile.py

"""Boilerplate profiles.

A profile bundles the patterns that are tuned to one export format and one
PDF-to-text decoder: the page marker, the header/footer boilerplate and the
strings that disqualify a table-of-contents title. Pattern order matters;
patterns are applied first to last.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from article_kit.errors import ProfileError

logger = logging.getLogger(__name__)

_FLAG_NAMES = {
    "IGNORECASE": re.IGNORECASE,
    "MULTILINE": re.MULTILINE,
}

_REQUIRED_KEYS = (
    "name",
    "page_marker",
    "index_header_patterns",
    "header_patterns",
    "footer_patterns",
    "title_blocklist",
)


@dataclass(frozen=True)
class BoilerplateProfile:
    name: str
    # Must capture the page label in group 1
    page_marker: re.Pattern[str]
    index_header_patterns: tuple[re.Pattern[str], ...]
    header_patterns: tuple[re.Pattern[str], ...]
    footer_patterns: tuple[re.Pattern[str], ...]
    title_blocklist: tuple[str, ...]


FACTIVA_PROFILE = BoilerplateProfile(
    name="factiva",
    page_marker=re.compile(r"Page (\d+) of \d+"),
    index_header_patterns=(
        re.compile(r"Page \d+ of \d+\s*© \d+ Factiva, Inc\. All rights reserved\."),
        re.compile(r"Page \d+ of \d+"),
        re.compile(r"© \d+ Factiva, Inc\. All rights reserved\."),
    ),
    header_patterns=(
        re.compile(
            r"Page\s+\d+\s+of\s+\d+\s*©\s*\d{4}\s+Factiva, Inc\.\s+All\s+rights\s+reserved\.",
            re.IGNORECASE,
        ),
        re.compile(r"^Page\s+\d+\s+of\s+\d+$", re.MULTILINE),
        re.compile(
            r"©\s*\d{4}\s+Factiva, Inc\.\s+All\s+rights\s+reserved\.", re.IGNORECASE
        ),
        re.compile(r"©\s*\d{4}\s+Factiva, Inc\.", re.IGNORECASE),
        re.compile(r"^All\s+rights\s+reserved\.$", re.MULTILINE),
        re.compile(r"^Factiva, Inc\.$", re.MULTILINE),
        re.compile(r"^Factiva$", re.MULTILINE),
    ),
    footer_patterns=(
        re.compile(r"ISSN:\s*\d{4}-\d{4}", re.IGNORECASE),
        re.compile(r"Volume\s+\d+;\s*Issue\s+\d+", re.IGNORECASE),
        re.compile(r"Vol\.\s*\d+;\s*Issue\s+\d+", re.IGNORECASE),
        re.compile(r"Document\s+\d+", re.IGNORECASE),
        re.compile(r"^English$", re.MULTILINE),
        re.compile(r"^\d+-\d+$", re.MULTILINE),
        re.compile(r"©\s*\d{4}\s+[^.]+\s*provided\s+by", re.IGNORECASE),
        re.compile(r"^Volume\s+\d+$", re.MULTILINE),
        re.compile(r"^Issue\s+\d+$", re.MULTILINE),
        re.compile(r"^Document\s+\d+$", re.MULTILINE),
    ),
    title_blocklist=(
        "Page",
        "Factiva",
        "Inc",
        "All rights reserved",
        "©",
        "Document",
        "Unknown",
        "Dow Jones",
    ),
)


def load_profile(path: str | Path) -> BoilerplateProfile:
    """Load a boilerplate profile from a YAML file.

    Each pattern entry is either a plain regex string or a mapping with
    ``pattern`` and an optional ``flags`` list (IGNORECASE, MULTILINE).

    Raises:
        ProfileError: If the file is missing keys or holds an invalid regex.
    """
    file_path = Path(path)
    logger.info("Loading boilerplate profile from %s", file_path)
    try:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ProfileError(f"Cannot read profile {file_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ProfileError(f"Profile {file_path} must be a mapping")

    missing = [key for key in _REQUIRED_KEYS if key not in data]
    if missing:
        raise ProfileError(f"Profile {file_path} is missing keys: {', '.join(missing)}")

    page_marker = _compile(data["page_marker"])
    if page_marker.groups < 1:
        raise ProfileError("page_marker must capture the page number in a group")

    profile = BoilerplateProfile(
        name=str(data["name"]),
        page_marker=page_marker,
        index_header_patterns=_compile_all(data["index_header_patterns"]),
        header_patterns=_compile_all(data["header_patterns"]),
        footer_patterns=_compile_all(data["footer_patterns"]),
        title_blocklist=tuple(str(item) for item in data["title_blocklist"] or ()),
    )
    logger.debug(
        "Loaded profile %s: %d header, %d footer patterns",
        profile.name,
        len(profile.header_patterns),
        len(profile.footer_patterns),
    )
    return profile


def _compile_all(entries: Any) -> tuple[re.Pattern[str], ...]:
    if entries is None:
        return ()
    if not isinstance(entries, list):
        raise ProfileError("Pattern lists must be YAML sequences")
    return tuple(_compile(entry) for entry in entries)


def _compile(entry: Any) -> re.Pattern[str]:
    if isinstance(entry, str):
        pattern, flag_names = entry, []
    elif isinstance(entry, dict) and "pattern" in entry:
        pattern, flag_names = entry["pattern"], entry.get("flags") or []
    else:
        raise ProfileError(f"Invalid pattern entry: {entry!r}")

    flags = 0
    for flag_name in flag_names:
        try:
            flags |= _FLAG_NAMES[str(flag_name).upper()]
        except KeyError:
            raise ProfileError(f"Unknown regex flag: {flag_name}")

    try:
        return re.compile(str(pattern), flags)
    except re.error as exc:
        raise ProfileError(f"Invalid regex {pattern!r}: {exc}") from exc
