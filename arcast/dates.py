"""Extraction of dates embedded in episode titles."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum


class DateFormat(Enum):
    """Known layouts of dates written into titles."""

    AMERICAN_CONVENTIONAL = "AmericanConventional"

    def make_extractor(self, edge_strip_pattern: str | None = None) -> DateExtractor:
        """Build an extractor, optionally widening the match by ``edge_strip_pattern`` on both sides."""
        base = _BASE_PATTERNS[self]
        if edge_strip_pattern is None:
            pattern = base
        else:
            pattern = re.compile(f"{edge_strip_pattern}{base.pattern}{edge_strip_pattern}")
        return DateExtractor(self, pattern)


_BASE_PATTERNS: dict[DateFormat, re.Pattern[str]] = {
    DateFormat.AMERICAN_CONVENTIONAL: re.compile(r"(\d{1,2})[\-/](\d{1,2})[\-/](\d{2,4})"),
}

DateMatch = tuple[date, tuple[int, int]]


def _parse_number(text: str | None) -> int | None:
    if text is None or not (text.isascii() and text.isdigit()):
        return None
    return int(text)


def _extract_american(string: str, pattern: re.Pattern[str]) -> DateMatch | None:
    match = pattern.search(string)
    if match is None or pattern.groups != 3:
        return None

    month = _parse_number(match.group(1))
    day = _parse_number(match.group(2))
    year = _parse_number(match.group(3))
    if month is None or day is None or year is None:
        return None
    if year < 100:
        year += 2000

    try:
        found = date(year, month, day)
    except ValueError:
        return None
    return found, match.span()


@dataclass(frozen=True)
class DateExtractor:
    """Finds a date of a given format in a string."""

    format: DateFormat
    pattern: re.Pattern[str]

    def extract_date(self, string: str) -> DateMatch | None:
        """Return the date found and the (start, end) span it occupies, or None."""
        if self.format is DateFormat.AMERICAN_CONVENTIONAL:
            return _extract_american(string, self.pattern)
        return None