"""Command-line settings."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

_VERSION = "0.1.0"


@dataclass(frozen=True)
class Config:
    """What the user asked for on the command line."""

    destination: Path
    config_file_path: Path
    pretend: bool = False
    print_existing_episodes: bool = False
    number_to_download: int | None = None

    @property
    def download_limit(self) -> int:
        """How many missing episodes may be processed; unlimited when none was given."""
        if self.number_to_download is None:
            return sys.maxsize
        return self.number_to_download


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from err
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="arcast")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument(
        "-d", "--destination", type=Path, required=True, help="Download directory path"
    )
    parser.add_argument(
        "-c",
        "--config-file-path",
        type=Path,
        required=True,
        help="Path to configuration file",
    )
    parser.add_argument(
        "-p", "--pretend", action="store_true", help="Pretend (don't download anything)"
    )
    parser.add_argument(
        "-e",
        "--print-existing-episodes",
        action="store_true",
        help="Print existing episodes",
    )
    parser.add_argument(
        "-n",
        "--number-to-download",
        type=_non_negative_int,
        default=None,
        help="Limit number of episodes",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Config:
    """Parse command-line arguments into a ``Config``; exits on bad usage."""
    namespace = _build_parser().parse_args(argv)
    return Config(
        destination=namespace.destination,
        config_file_path=namespace.config_file_path,
        pretend=namespace.pretend,
        print_existing_episodes=namespace.print_existing_episodes,
        number_to_download=namespace.number_to_download,
    )