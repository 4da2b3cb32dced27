"""Directory listing with * and ? wildcards."""

import logging
import os
import re
from collections.abc import Iterable

from ..common.pydantic import MatchResult, SearchPattern

logger = logging.getLogger(__name__)


def pattern_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a wildcard pattern. Only * and ? are special."""
    parts = []
    for char in os.path.normcase(pattern):
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.DOTALL)


def normalize_directory(directory: str) -> str:
    """Directory with a trailing separator."""
    return os.path.join(directory, "")


def contains_directory(directories: Iterable[str], directory: str) -> bool:
    """Whether the directory is listed, ignoring case and a trailing separator."""
    wanted = normalize_directory(directory).casefold()
    return any(normalize_directory(d).casefold() == wanted for d in directories if d.strip())


def list_matches(directory: str, regex: re.Pattern[str]) -> list[str]:
    """Names of the files in a directory that match, sorted."""
    try:
        with os.scandir(directory) as entries:
            names = [entry.name for entry in entries if entry.is_file() and regex.fullmatch(os.path.normcase(entry.name))]
    except OSError as exc:
        logger.debug("Skipping %s: %s", directory, exc)
        return []
    return sorted(names)


def perform_search(pattern: SearchPattern, directories: Iterable[str]) -> MatchResult:
    """Search every directory for the pattern."""
    regex = pattern_to_regex(pattern.text)
    locations: dict[str, list[str]] = {}
    for directory in directories:
        if not directory.strip():
            continue
        for name in list_matches(directory, regex):
            locations.setdefault(name, []).append(normalize_directory(directory))
    logger.debug("%s matched %d name(s)", pattern.text, len(locations))
    return MatchResult(locations=locations)
