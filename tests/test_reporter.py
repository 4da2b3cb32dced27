"""Test suite for console output."""

from pathfind import __version__
from pathfind.common.errors import ExitCode, PathFindError
from pathfind.common.pydantic import MatchResult, SearchOutcome
from tests.test_utils import CapturingReporter


class TestReporter:
    """Reporter output and exit status."""

    def test_banner(self, reporter: CapturingReporter):
        """Banner names the program and version."""
        reporter.banner()

        assert reporter.output == f"\nPathFind v{__version__}\n"

    def test_matches(self, reporter: CapturingReporter):
        """One section per filename, directories indented."""
        reporter.matches(MatchResult(locations={"a.exe": ["/x/", "/y/"], "b.exe": ["/z/"]}))

        assert reporter.output == "\na.exe is present in:\n  /x/\n  /y/\n\nb.exe is present in:\n  /z/\n"

    def test_text_printed_verbatim(self, reporter: CapturingReporter):
        """Brackets and backslashes are not treated as markup."""
        reporter.matches(MatchResult(locations={"[red]x.exe": ["C:\\Tools\\"]}))

        assert "[red]x.exe is present in:\n  C:\\Tools\\\n" in reporter.output

    def test_error(self, reporter: CapturingReporter):
        """Error lines are printed as given."""
        reporter.error(PathFindError.unexpected(RuntimeError("boom")))

        assert reporter.output == "An unexpected exception occurred:\nRuntimeError: boom\n"

    def test_not_found(self, reporter: CapturingReporter):
        """Nothing found anywhere."""
        code = reporter.summary(SearchOutcome(), "PATH")

        assert code is ExitCode.NOT_FOUND
        assert reporter.output == "\nNo matching file was found on the PATH.\n"

    def test_only_in_current_directory(self, reporter: CapturingReporter):
        """Not on the path but present in the current directory."""
        code = reporter.summary(SearchOutcome(found_in_current_directory=True), "PATH")

        assert code is ExitCode.SUCCESS
        assert "No matching file was found on the PATH." in reporter.output
        assert "Note: A matching file *is* present in the current directory." in reporter.output
        assert "Caution" not in reporter.output

    def test_single_match_has_no_totals(self, reporter: CapturingReporter):
        """One filename in one directory."""
        code = reporter.summary(SearchOutcome(filenames_found=1, directories_found=1, found_on_path=True), "PATH")

        assert code is ExitCode.SUCCESS
        assert reporter.output == ""

    def test_totals(self, reporter: CapturingReporter):
        """Totals are printed from two directories up."""
        reporter.summary(SearchOutcome(filenames_found=1, directories_found=2, found_on_path=True), "PATH")

        assert reporter.output == "\n1 total matching filename(s) found in 2 PATH folder(s).\n"

    def test_caution_with_path_matches(self, reporter: CapturingReporter):
        """Current directory match alongside path matches."""
        outcome = SearchOutcome(
            filenames_found=2, directories_found=1, found_on_path=True, found_in_current_directory=True
        )

        code = reporter.summary(outcome, "PATH")

        assert code is ExitCode.SUCCESS
        assert "2 total matching filename(s) found in 1 PATH folder(s)." in reporter.output
        assert "Caution: A matching file is also present in the current directory. (The current\n" in reporter.output
        assert reporter.output.endswith("directory is not on the PATH).\n")
