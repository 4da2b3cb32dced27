"""Error results and exit codes."""

from enum import Enum, IntEnum

from .pydantic import FrozenBaseModel


class ExitCode(IntEnum):
    """Process exit status."""

    SUCCESS = 0
    NOT_FOUND = 1
    ERROR = 2


class ErrorKind(str, Enum):
    """Category of a failed run."""

    VALIDATION = "validation"
    ENVIRONMENT = "environment"
    UNEXPECTED = "unexpected"


class PathFindError(FrozenBaseModel):
    """An error returned in place of a result.

    Every kind ends the run with ``ExitCode.ERROR``; ``lines`` is what gets shown to the user.
    """

    kind: ErrorKind
    lines: tuple[str, ...]

    @property
    def exit_code(self) -> ExitCode:
        """Exit status for this error."""
        return ExitCode.ERROR

    @classmethod
    def validation(cls, *lines: str) -> "PathFindError":
        """Bad filename."""
        return cls(kind=ErrorKind.VALIDATION, lines=lines)

    @classmethod
    def environment(cls, *lines: str) -> "PathFindError":
        """Missing or unusable environment."""
        return cls(kind=ErrorKind.ENVIRONMENT, lines=lines)

    @classmethod
    def unexpected(cls, exc: BaseException) -> "PathFindError":
        """Anything raised past the searcher."""
        return cls(
            kind=ErrorKind.UNEXPECTED,
            lines=("An unexpected exception occurred:", f"{type(exc).__name__}: {exc}"),
        )
