"""Search the directories on PATH for files matching a name."""

__version__ = "2.1.0"
