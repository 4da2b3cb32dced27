"""Runs one search from parsed arguments to exit status."""

import argparse
import logging
import os
from collections.abc import Mapping

from ..common.errors import ExitCode, PathFindError
from ..common.pydantic import SearchOutcome, SearchPattern
from ..search.aggregator import ResultAggregator
from ..search.directory_search import contains_directory, perform_search
from .app_config import AppConfig
from .arguments import USAGE, HelpRequest, parse_arguments
from .environment import expand_patterns, read_search_path
from .reporter import Reporter

logger = logging.getLogger(__name__)


class PathFindApp:
    """Search the path directories and report what was found."""

    def __init__(
        self,
        config: AppConfig | None = None,
        reporter: Reporter | None = None,
        environ: Mapping[str, str] | None = None,
        current_directory: str | None = None,
    ) -> None:
        """Initialize the app. Environment and working directory default to the process's own."""
        self.config = config or AppConfig()
        self.reporter = reporter or Reporter()
        self.environ = os.environ if environ is None else environ
        self.current_directory = current_directory

    def run(self, args: argparse.Namespace) -> ExitCode:
        """Run the whole pipeline. Unexpected exceptions become an error result."""
        self.reporter.banner()
        try:
            result = self._run(args)
        except Exception as exc:
            logger.debug("Search failed", exc_info=True)
            result = PathFindError.unexpected(exc)

        if isinstance(result, PathFindError):
            self.reporter.error(result)
            return result.exit_code
        return result

    def _run(self, args: argparse.Namespace) -> ExitCode | PathFindError:
        """Pipeline steps; errors come back as values."""
        request = parse_arguments(args, self.config)
        if isinstance(request, HelpRequest):
            self.reporter.usage(USAGE)
            return ExitCode.SUCCESS
        if isinstance(request, PathFindError):
            return request

        directories = read_search_path(self.environ, self.config)
        if isinstance(directories, PathFindError):
            return directories

        outcome = self.search(request, directories)
        return self.reporter.summary(outcome, self.config.path_variable)

    def search(self, pattern: SearchPattern, directories: list[str]) -> SearchOutcome:
        """Search every candidate pattern, printing matches as they are found."""
        current_directory = self.current_directory or os.getcwd()
        search_current_directory = not contains_directory(directories, current_directory)

        if not pattern.skips_extension_expansion:
            self.reporter.extension_notice(self.config.extensions_variable)

        aggregator = ResultAggregator()
        found_on_path = False
        found_in_current_directory = False
        for candidate in expand_patterns(pattern, self.environ, self.config):
            result = perform_search(candidate, directories)
            aggregator.add(result)
            self.reporter.matches(result)
            found_on_path |= bool(result)

            if search_current_directory:
                found_in_current_directory |= bool(perform_search(candidate, [current_directory]))

        return SearchOutcome(
            filenames_found=len(aggregator.filenames),
            directories_found=len(aggregator.directories),
            found_on_path=found_on_path,
            found_in_current_directory=found_in_current_directory,
        )
