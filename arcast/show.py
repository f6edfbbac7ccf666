"""Show descriptions: the settings read from a show's configuration file."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import IO, Any, Callable, Generic, Sequence, TypeVar

from .cache import Cache
from .dates import DateExtractor, DateFormat

T = TypeVar("T")
R = TypeVar("R")


class ShowConfigError(ValueError):
    """A show description is malformed."""


class ClusionKind(Enum):
    """Whether patterns select the episodes to keep or the ones to drop."""

    INCLUSION = "inclusion"
    EXCLUSION = "exclusion"


@dataclass(frozen=True)
class Clusions(Generic[T]):
    """A list of inclusion or exclusion patterns."""

    kind: ClusionKind
    patterns: tuple[T, ...]

    def map(self, func: Callable[[Sequence[T]], Sequence[R]]) -> Clusions[R]:
        """Return clusions of the same kind with ``func`` applied to the pattern list."""
        return Clusions(self.kind, tuple(func(self.patterns)))


@dataclass(frozen=True)
class TitleHandling:
    """How episode titles are cleaned: strip given patterns, or drop the title entirely."""

    strip_whole_title: bool = False
    patterns: tuple[str, ...] = ()

    def strip_patterns(self) -> tuple[str, ...] | None:
        """The custom strip patterns, or None when there are none or the whole title goes."""
        if self.strip_whole_title or not self.patterns:
            return None
        return self.patterns


@dataclass(frozen=True)
class DateExtraction:
    """Settings for pulling a date out of episode titles."""

    format: DateFormat
    edge_strip_pattern: str | None = None
    _extractor: Cache[DateExtractor] = field(
        default_factory=Cache, init=False, repr=False, compare=False
    )

    def date_extractor(self) -> DateExtractor:
        """The extractor for these settings, built once."""
        return self._extractor.get(lambda: self.format.make_extractor(self.edge_strip_pattern))


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a user-supplied regular expression."""
    try:
        return re.compile(pattern)
    except re.error as err:
        raise ShowConfigError(f"Bad Regex {pattern!r}: {err}") from err


@dataclass(frozen=True)
class RegexContainer:
    """The compiled regular expressions a show needs."""

    leading_show_title_strip: re.Pattern[str]
    custom_episode_title_strips: tuple[re.Pattern[str], ...]
    clusions: Clusions[re.Pattern[str]] | None

    @classmethod
    def from_show(cls, show: Show) -> RegexContainer:
        leading = re.compile(re.escape(show.title) + r"[:\s]+")
        custom = tuple(compile_pattern(p) for p in show.title_handling.strip_patterns() or ())
        clusions = None
        if show.raw_clusions is not None:
            clusions = show.raw_clusions.map(lambda raw: [compile_pattern(p) for p in raw])
        return cls(leading, custom, clusions)

    def has_only_default_title_strip(self) -> bool:
        return not self.custom_episode_title_strips and self.clusions is None


@dataclass(frozen=True)
class Show:
    """A podcast show and how its episodes are named and filtered."""

    title: str
    url: str
    title_handling: TitleHandling = field(default_factory=TitleHandling)
    date_extraction: DateExtraction | None = None
    raw_clusions: Clusions[str] | None = None
    not_before_date: date | None = None
    _regexes: Cache[RegexContainer] = field(
        default_factory=Cache, init=False, repr=False, compare=False
    )

    @classmethod
    def from_dict(cls, data: Any) -> Show:
        """Build a show from a decoded JSON object with camelCase keys."""
        if not isinstance(data, Mapping):
            raise ShowConfigError("expected a correctly formed show description")

        values: dict[str, Any] = {}
        title_handling: TitleHandling | None = None
        raw_clusions: Clusions[str] | None = None

        for key, value in data.items():
            if key == "title":
                values["title"] = _expect_str(key, value)
            elif key == "url":
                values["url"] = _expect_str(key, value)
            elif key == "dateExtraction":
                values["date_extraction"] = _date_extraction_from(value)
            elif key in ("stripWholeTitle", "titleStripPatterns"):
                _assert_empty(title_handling is not None, ("StripWholeTitle", "TitleStripPatterns"))
                if key == "stripWholeTitle":
                    if not isinstance(value, bool):
                        raise ShowConfigError(f"`{key}` must be a boolean")
                    if value:
                        title_handling = TitleHandling(strip_whole_title=True)
                else:
                    title_handling = TitleHandling(patterns=_expect_str_list(key, value))
            elif key == "notBefore":
                values["not_before_date"] = _parse_date(value)
            elif key in ("inclusionPatterns", "exclusionPatterns"):
                _assert_empty(raw_clusions is not None, ("InclusionPatterns", "ExclusionPatterns"))
                kind = ClusionKind.INCLUSION if key == "inclusionPatterns" else ClusionKind.EXCLUSION
                raw_clusions = Clusions(kind, _expect_str_list(key, value))
            else:
                raise ShowConfigError(f"unknown field `{key}`")

        for required in ("title", "url"):
            if required not in values:
                raise ShowConfigError(f"`{required}` must be initialized")

        return cls(
            title_handling=title_handling or TitleHandling(),
            raw_clusions=raw_clusions,
            **values,
        )

    def regex_container(self) -> RegexContainer:
        """The show's compiled patterns, built once."""
        return self._regexes.get(lambda: RegexContainer.from_show(self))

    def date_extractor(self) -> DateExtractor | None:
        if self.date_extraction is None:
            return None
        return self.date_extraction.date_extractor()

    def title_strip_patterns(self) -> tuple[str, ...] | None:
        return self.title_handling.strip_patterns()


def load_show(stream: IO[str]) -> Show:
    """Read a JSON show description from a text stream."""
    try:
        data = json.load(stream)
    except json.JSONDecodeError as err:
        raise ShowConfigError(str(err)) from err
    return Show.from_dict(data)


def _assert_empty(has_value: bool, fields: Sequence[str]) -> None:
    if not has_value:
        return
    quoted = [f"'{name}'" for name in fields]
    if len(quoted) > 1:
        joined = ", ".join(quoted[:-2] + [" or ".join(quoted[-2:])])
    else:
        joined = quoted[0]
    raise ShowConfigError(f"Only one of {joined} is allowed at a time")


def _expect_str(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ShowConfigError(f"`{key}` must be a string")
    return value


def _expect_str_list(key: str, value: Any) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ShowConfigError(f"`{key}` must be a list of strings")
    return tuple(value)


def _parse_date(value: Any) -> date | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ShowConfigError("`notBefore` must be a date string")
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as err:
        raise ShowConfigError(f"invalid date {value!r}") from err


def _date_extraction_from(value: Any) -> DateExtraction | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise ShowConfigError("`dateExtraction` must be an object")
    if "format" not in value:
        raise ShowConfigError("missing field `format`")
    try:
        date_format = DateFormat(value["format"])
    except ValueError as err:
        raise ShowConfigError(f"unknown date format {value['format']!r}") from err
    edge = value.get("edgeStripPattern")
    if edge is not None and not isinstance(edge, str):
        raise ShowConfigError("`edgeStripPattern` must be a string")
    return DateExtraction(date_format, edge)