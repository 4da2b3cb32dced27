"""Pydantic base model."""

from pydantic import BaseModel, ConfigDict, Field

EXTENSION_MARKERS = (".", "*", "?")


class FrozenBaseModel(BaseModel):
    """Pydantic frozen base model."""

    model_config = ConfigDict(frozen=True, strict=True)


class SearchPattern(FrozenBaseModel):
    """Filename to look for, possibly with wildcards."""

    text: str

    @property
    def skips_extension_expansion(self) -> bool:
        """Whether the name already carries an extension or a wildcard."""
        return any(marker in self.text for marker in EXTENSION_MARKERS)

    def with_extension(self, extension: str) -> "SearchPattern":
        """Pattern with a lower-cased extension appended."""
        return SearchPattern(text=self.text + extension.lower())


class MatchResult(FrozenBaseModel):
    """Matched filenames and the directories where each was found."""

    locations: dict[str, list[str]] = Field(default_factory=dict)

    @property
    def filenames(self) -> list[str]:
        """Matched filenames, in first-seen order."""
        return list(self.locations)

    @property
    def directories(self) -> list[list[str]]:
        """Directory lists, one per matched filename."""
        return list(self.locations.values())

    def __bool__(self) -> bool:
        """Whether anything matched."""
        return bool(self.locations)


class SearchOutcome(FrozenBaseModel):
    """Totals of a whole run."""

    filenames_found: int = 0
    directories_found: int = 0
    found_on_path: bool = False
    found_in_current_directory: bool = False
