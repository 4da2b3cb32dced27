"""Console output."""

from collections.abc import Iterable

from rich.console import Console

from .. import __version__
from ..common.errors import ExitCode, PathFindError
from ..common.pydantic import MatchResult, SearchOutcome


def plain_console() -> Console:
    """Console that prints text as is."""
    return Console(highlight=False, markup=False, emoji=False, soft_wrap=True)


class Reporter:
    """Prints banners, matches and the closing summary."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the reporter."""
        self.console = console or plain_console()

    def lines(self, lines: Iterable[str]) -> None:
        """Print lines one after another."""
        for line in lines:
            self.console.print(line)

    def banner(self) -> None:
        """Program name and version."""
        self.lines(["", f"PathFind v{__version__}"])

    def usage(self, usage: Iterable[str]) -> None:
        """Usage text."""
        self.lines(usage)

    def error(self, error: PathFindError) -> None:
        """Error message."""
        self.lines(error.lines)

    def extension_notice(self, variable: str) -> None:
        """Announce that extensions will be tried."""
        self.lines(["", f"(No extension specified; using {variable} environment variable extensions.)"])

    def matches(self, result: MatchResult) -> None:
        """One section per matched filename."""
        for filename, directories in result.locations.items():
            self.lines(["", f"{filename} is present in:"])
            self.lines(f"  {directory}" for directory in directories)

    def summary(self, outcome: SearchOutcome, path_variable: str) -> ExitCode:
        """Closing messages; returns the exit status they imply."""
        if not outcome.found_on_path:
            self.lines(["", f"No matching file was found on the {path_variable}."])
            if outcome.found_in_current_directory:
                self.lines(
                    [
                        "",
                        "Note: A matching file *is* present in the current directory. (The current",
                        f"directory is not on the {path_variable}).",
                    ]
                )
                return ExitCode.SUCCESS
            return ExitCode.NOT_FOUND

        if outcome.filenames_found >= 2 or outcome.directories_found >= 2:
            self.lines(
                [
                    "",
                    f"{outcome.filenames_found} total matching filename(s) found in "
                    f"{outcome.directories_found} {path_variable} folder(s).",
                ]
            )

        if outcome.found_in_current_directory:
            self.lines(
                [
                    "",
                    "Caution: A matching file is also present in the current directory. (The current",
                    f"directory is not on the {path_variable}).",
                ]
            )
        return ExitCode.SUCCESS
