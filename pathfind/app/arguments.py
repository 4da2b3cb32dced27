"""Command-line arguments and filename validation."""

import argparse
import logging
import sys

from ..common.errors import PathFindError
from ..common.pydantic import FrozenBaseModel, SearchPattern
from .app_config import AppConfig

logger = logging.getLogger(__name__)

HELP_TOKENS = frozenset({"-?", "/?", "-h", "--help"})

USAGE = (
    "",
    "Searches the current path for instances of a file with the specified name,",
    "based on the value of the PATH environment variable.",
    "",
    "If the specified filename does not include an extension, then the search will",
    "include all extensions from the PATHEXT environment variable (which typically",
    "includes executable extensions such as .exe and .bat).",
    "",
    "Additionally, the * and ? wildcards are supported.",
    "",
    "Usage:",
    "",
    "  pathfind [filename]",
    "",
    "To view the value of the PATH environment variable, use:",
    "",
    "  path",
)


class HelpRequest(FrozenBaseModel):
    """The user asked for usage text."""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser. Only logging is an option; everything else is a search argument."""
    parser = argparse.ArgumentParser(prog="pathfind", add_help=False, allow_abbrev=False)
    parser.add_argument("arguments", nargs="*", help="File name to look for; * and ? are allowed")
    parser.add_argument("--verbose", action="store_true", help="Log debug details to stderr")
    return parser


def parse_command_line(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line. The first token other than ``--verbose`` is the filename; the rest are ignored.

    Tokens that look like options, such as ``-tool.exe``, ``-v`` or ``-?``, are kept as search arguments in
    the order they were given.
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    args, unknown = build_parser().parse_known_args(argv)
    remaining = set(args.arguments) | set(unknown)
    tokens = [token for token in argv if token in remaining]
    return argparse.Namespace(filename=tokens[0] if tokens else None, verbose=args.verbose)


def validate_filename(filename: str, config: AppConfig) -> PathFindError | None:
    """Check the filename for length and reserved characters."""
    if len(filename) > config.max_filename_length:
        return PathFindError.validation(
            "",
            f"The specified file name is too long.  Please enter a file name that is {config.max_filename_length}",
            "characters or less in length.",
        )
    if any(char in config.reserved_characters for char in filename):
        shown = " ".join(config.reserved_characters)
        return PathFindError.validation("", f"Please enter a filename that does not include these characters:  {shown}")
    return None


def parse_arguments(args: argparse.Namespace, config: AppConfig) -> HelpRequest | SearchPattern | PathFindError:
    """Turn parsed arguments into a help request, a search pattern or an error."""
    if args.filename is None or args.filename in HELP_TOKENS:
        return HelpRequest()

    error = validate_filename(args.filename, config)
    if error is not None:
        logger.debug("Rejected filename %r", args.filename)
        return error
    return SearchPattern(text=args.filename)
