"""Environment variables that drive the search."""

import logging
from collections.abc import Mapping

from ..common.errors import PathFindError
from ..common.pydantic import SearchPattern
from .app_config import AppConfig

logger = logging.getLogger(__name__)


def get_variable(environ: Mapping[str, str], name: str) -> str | None:
    """Look up a variable, ignoring the case of its name."""
    if name in environ:
        return environ[name]
    wanted = name.casefold()
    for key, value in environ.items():
        if key.casefold() == wanted:
            return value
    return None


def read_search_path(environ: Mapping[str, str], config: AppConfig) -> list[str] | PathFindError:
    """Directories listed in the path variable, blanks included."""
    value = get_variable(environ, config.path_variable)
    if value is None:
        return PathFindError.environment(f"The {config.path_variable} environment variable is undefined.")
    directories = value.split(config.separator)
    logger.debug("%s has %d entries", config.path_variable, len(directories))
    return directories


def read_extensions(environ: Mapping[str, str], config: AppConfig) -> list[str]:
    """Extensions listed in the extensions variable; empty when unset or blank."""
    value = get_variable(environ, config.extensions_variable)
    if not value:
        logger.debug("%s is not set", config.extensions_variable)
        return []
    return value.split(config.separator)


def expand_patterns(pattern: SearchPattern, environ: Mapping[str, str], config: AppConfig) -> list[SearchPattern]:
    """Patterns to search for.

    A name with an extension or a wildcard is searched as given. A bare name is searched once per
    extension, and not at all when there are no extensions.
    """
    if pattern.skips_extension_expansion:
        return [pattern]
    return [pattern.with_extension(extension) for extension in read_extensions(environ, config)]
