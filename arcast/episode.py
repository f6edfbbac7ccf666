"""Episodes of a show, built from the items of its RSS feed."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import date
from email.utils import parsedate_to_datetime
from typing import IO

from .show import RegexContainer, Show

DEFAULT_EXTENSION = "mp3"

_EDGE_TRIM = re.compile(r"\A\s+|\s+\Z")
_ENCLOSURE_EXTENSION = re.compile(r"\.([a-z0-9]+)(?:\?.*?)?\Z", re.IGNORECASE)
_CHARACTER_REPLACEMENTS = (("\u00a0", " "),)


class ParsingError(Exception):
    """A feed or one of its items could not be understood."""


@dataclass(frozen=True)
class FeedItem:
    """The parts of an RSS item an episode is built from."""

    title: str | None = None
    pub_date: str | None = None
    enclosure_url: str | None = None


@dataclass(frozen=True)
class Episode:
    """An episode to download, with the file name it is stored under."""

    enclosure_url: str
    filename: str
    name_range: tuple[int, int]
    pub_date: date

    @classmethod
    def from_item(cls, show: Show, item: FeedItem) -> Episode:
        """Build an episode from a feed item, naming it according to the show's settings."""
        if item.title is None:
            raise ParsingError("episode missing title")
        title = item.title

        if item.pub_date is None:
            raise ParsingError("episode missing pubDate")
        pub_date = _parse_rfc2822_date(item.pub_date)

        extractor = show.date_extractor()
        if extractor is not None:
            found = extractor.extract_date(title)
            if found is not None:
                pub_date, (start, end) = found
                title = title[:start] + title[end:]

        processed: str | None
        if show.title_handling.strip_whole_title:
            processed = None
        else:
            processed = process_raw_title(title, show.regex_container())

        if item.enclosure_url is None:
            raise ParsingError("episode missing URL")
        enclosure_url = item.enclosure_url

        extension = enclosure_extension(enclosure_url)
        filename, name_range = generate_filename(show, pub_date, processed, extension)
        return cls(enclosure_url, filename, name_range, pub_date)

    def episode_name(self) -> str:
        """The file name without its extension."""
        start, end = self.name_range
        return self.filename[start:end]


def _parse_rfc2822_date(text: str) -> date:
    try:
        return parsedate_to_datetime(text).date()
    except (TypeError, ValueError, IndexError) as err:
        raise ParsingError(f"invalid pubDate {text!r}") from err


def enclosure_extension(url: str) -> str:
    """The file extension of an enclosure URL, ignoring any query; ``mp3`` if there is none."""
    match = _ENCLOSURE_EXTENSION.search(url)
    return match.group(1) if match else DEFAULT_EXTENSION


def generate_filename(
    show: Show, pub_date: date, title: str | None, extension: str
) -> tuple[str, tuple[int, int]]:
    """Return the file name for an episode and the span of it before the extension."""
    stem = f"{show.title} - {pub_date.isoformat()}"
    if title:
        stem = f"{stem} - {title}"
    return f"{stem}.{extension}", (0, len(stem))


def process_raw_title(raw_title: str, regexes: RegexContainer) -> str:
    """Strip the show name, surrounding whitespace and custom patterns from a title."""
    patterns = (
        regexes.leading_show_title_strip,
        _EDGE_TRIM,
        *regexes.custom_episode_title_strips,
    )
    title = raw_title
    for pattern in patterns:
        title = pattern.sub("", title)
    for source, replacement in _CHARACTER_REPLACEMENTS:
        title = title.replace(source, replacement)
    return title.replace("/", "-")


def parse_items(stream: IO[bytes] | IO[str]) -> list[FeedItem]:
    """Read the items of an RSS document."""
    try:
        root = ET.parse(stream).getroot()
    except ET.ParseError as err:
        raise ParsingError(f"malformed feed: {err}") from err

    if root.tag != "rss":
        raise ParsingError("the input did not begin with an rss tag")
    channel = root.find("channel")
    if channel is None:
        raise ParsingError("the feed has no channel")

    items = []
    for element in channel.iter("item"):
        enclosure = element.find("enclosure")
        items.append(
            FeedItem(
                title=element.findtext("title"),
                pub_date=element.findtext("pubDate"),
                enclosure_url=None if enclosure is None else enclosure.get("url", ""),
            )
        )
    return items


def episodes_from_reader(reader: IO[bytes] | IO[str], show: Show) -> list[Episode]:
    """Parse a feed and build every episode that can be built; unusable items are skipped."""
    episodes = []
    for item in parse_items(reader):
        try:
            episodes.append(Episode.from_item(show, item))
        except ParsingError:
            continue
    return episodes