"""Application entry point."""

import logging
import sys

from .app.arguments import parse_command_line
from .app.pathfind_app import PathFindApp


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_command_line(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    return int(PathFindApp().run(args))


if __name__ == "__main__":
    sys.exit(main())
