"""Running totals across searches."""

from more_itertools import flatten, unique_everseen

from ..common.pydantic import MatchResult


class ResultAggregator:
    """Distinct filenames and directories seen so far, in first-seen order."""

    def __init__(self) -> None:
        """Start with nothing found."""
        self._filenames: list[str] = []
        self._directories: list[str] = []

    @property
    def filenames(self) -> list[str]:
        """Distinct matched filenames."""
        return list(self._filenames)

    @property
    def directories(self) -> list[str]:
        """Distinct directories holding a match."""
        return list(self._directories)

    def add(self, result: MatchResult) -> None:
        """Merge one search result."""
        self._filenames = list(unique_everseen([*self._filenames, *result.filenames]))
        self._directories = list(unique_everseen([*self._directories, *flatten(result.directories)]))
