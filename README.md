# arcast

arcast reads a podcast's RSS feed and works out a consistent filename for
each episode, of the form `Show - YYYY-MM-DD - Episode Title.ext`. How titles
are cleaned, which episodes are kept and where dates come from is set in a
small JSON description of the show.

## Installing

    pip install .

## Describing a show

```json
{
    "title": "Hard Pod",
    "url": "https://example.com/hardpod.xml",
    "titleStripPatterns": ["\\s*Episode\\s*\\d+:\\s*"],
    "exclusionPatterns": ["(?i)Best of"],
    "dateExtraction": {
        "format": "AmericanConventional",
        "edgeStripPattern": "[\\-\\s]*"
    },
    "notBefore": "2022-06-01"
}
```

Only `title` and `url` are required. Unknown keys are rejected.

- `titleStripPatterns`: regular expressions removed from every episode title.
  A leading copy of the show title (followed by colons or whitespace) and
  surrounding whitespace are always removed; non-breaking spaces become plain
  spaces and `/` becomes `-`.
- `stripWholeTitle`: if `true`, the filename holds only the show title and the
  date. It cannot be combined with `titleStripPatterns`.
- `inclusionPatterns` / `exclusionPatterns`: patterns matched against episode
  names. Only one of the two may be given. They are compiled and kept on the
  show (`Show.regex_container().clusions`).
- `dateExtraction`: take the episode date from its title instead of its
  publication date, and remove it from the title. `AmericanConventional`
  reads dates such as `7/4/19` or `07-04-2019` (two-digit years are taken as
  20xx). `edgeStripPattern` also removes what matches it on either side of
  the date.
- `notBefore`: a date, kept on the show as `not_before_date`.

A malformed description raises `arcast.show.ShowConfigError`.

## Using it

```python
from arcast.show import load_show
from arcast.episode import episodes_from_reader

with open("hardpod.json") as stream:
    show = load_show(stream)

with open("hardpod.xml", "rb") as feed:
    for episode in episodes_from_reader(feed, show):
        print(episode.filename, episode.enclosure_url, episode.pub_date)
```

`episodes_from_reader` skips feed items that lack a title, a `pubDate` or an
enclosure; a document that is not RSS raises `arcast.episode.ParsingError`.
The file extension is taken from the enclosure URL, `mp3` if it has none.

Other pieces:

- `arcast.dates.DateFormat.make_extractor()` builds a `DateExtractor` whose
  `extract_date(text)` returns the date and its `(start, end)` span, or `None`.
- `arcast.progress.TitledBar(title, width)` renders a one-line progress bar,
  `title [###---]  50%`; set its progress with `set()` and render with `str()`.
- `arcast.config.parse_args(argv)` turns options `-d/--destination`,
  `-c/--config-file-path`, `-p/--pretend`, `-e/--print-existing-episodes` and
  `-n/--number-to-download` into a `Config`.
- `arcast.cache.Cache` holds one lazily produced value.

## What it does not do

arcast has no command to run. It does not fetch feeds or episode files over
the network, does not look at which files already exist in a directory, and
does not decide which episodes to download or apply the inclusion, exclusion
and `notBefore` settings to a list of episodes. Those settings are read and
kept, and `parse_args` reads the options, but acting on them is left to the
caller.