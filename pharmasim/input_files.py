"""Reading the name lists and checking paths given in the configuration."""

import re
from dataclasses import dataclass, field


@dataclass
class Names:
    """First names and last names to give generated clients."""

    first_names: list = field(default_factory=list)
    last_names: list = field(default_factory=list)


_LOG_PATTERN = re.compile(r".*.log$")
_DIRECTORY_PATTERN = re.compile(r"/$")


def open_verified(path):
    """Open a text file for reading, raising ValueError if it cannot be opened."""
    try:
        return open(path, encoding="utf-8")
    except OSError as error:
        raise ValueError(f"Failed to open a file! {path}") from error


def _read_lines(lines):
    return [line.rstrip("\n").replace("\r", "") for line in lines]


def names_from_files(first, last):
    """Read first names and last names, one per line."""
    return Names(_read_lines(first), _read_lines(last))


def medicine_names_from_file(medicine_file):
    """Read medicine names, one per line."""
    return _read_lines(medicine_file)


def verify_output_path(path):
    """Return the log file path, adding a file name to a directory path."""
    if _LOG_PATTERN.search(path):
        return path
    if _DIRECTORY_PATTERN.search(path):
        return path + "output.log"
    raise ValueError("wrong path to output")