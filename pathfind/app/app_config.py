"""App configuration."""

from pydantic import BaseModel, Field


class AppConfig(BaseModel):
    """Names and limits used by a run."""

    path_variable: str = Field(default="PATH", description="Variable holding the directories to search.")
    extensions_variable: str = Field(default="PATHEXT", description="Variable holding extensions to try.")
    separator: str = Field(default=";", min_length=1, description="Separator between list entries.")
    max_filename_length: int = Field(default=255, gt=0, description="Longest accepted filename.")
    reserved_characters: str = Field(default="\\/:<>|", description="Characters rejected in a filename.")
