import sys
from pathlib import Path

import pytest

from arcast.config import Config, parse_args


def test_required_options_and_defaults():
    config = parse_args(["-d", "downloads", "-c", "show.json"])
    assert config.destination == Path("downloads")
    assert config.config_file_path == Path("show.json")
    assert config.pretend is False
    assert config.print_existing_episodes is False
    assert config.number_to_download is None
    assert config.download_limit == sys.maxsize


def test_long_options_and_flags():
    config = parse_args(
        [
            "--destination",
            "out",
            "--config-file-path",
            "conf.json",
            "--pretend",
            "--print-existing-episodes",
            "--number-to-download",
            "3",
        ]
    )
    assert config.destination == Path("out")
    assert config.config_file_path == Path("conf.json")
    assert config.pretend is True
    assert config.print_existing_episodes is True
    assert config.number_to_download == 3
    assert config.download_limit == 3


def test_short_flags():
    config = parse_args(["-d", "a", "-c", "b", "-p", "-e", "-n", "0"])
    assert config.pretend is True
    assert config.print_existing_episodes is True
    assert config.download_limit == 0


@pytest.mark.parametrize(
    "argv",
    [
        ["-c", "show.json"],
        ["-d", "downloads"],
        ["-d", "a", "-c", "b", "-n", "-1"],
        ["-d", "a", "-c", "b", "-n", "many"],
    ],
)
def test_bad_usage_exits(argv):
    with pytest.raises(SystemExit) as exc:
        parse_args(argv)
    assert exc.value.code == 2


def test_config_constructed_directly_has_unlimited_default():
    config = Config(Path("x"), Path("y"))
    assert config.download_limit == sys.maxsize