"""Pytest configuration and fixtures for the test suite."""

from collections.abc import Callable
from pathlib import Path

import pytest

from tests.test_utils import CapturingReporter


@pytest.fixture
def temp_workspace(tmp_path: Path) -> Path:
    """Provide an empty directory for file operations."""
    return tmp_path


@pytest.fixture
def make_tree(temp_workspace: Path) -> Callable[[dict[str, list[str]]], dict[str, Path]]:
    """Create directories holding empty files, keyed by directory name."""

    def make(layout: dict[str, list[str]]) -> dict[str, Path]:
        created = {}
        for dirname, filenames in layout.items():
            directory = temp_workspace / dirname
            directory.mkdir(parents=True, exist_ok=True)
            for filename in filenames:
                (directory / filename).write_text("")
            created[dirname] = directory
        return created

    return make


@pytest.fixture
def reporter() -> CapturingReporter:
    """Reporter fixture."""
    return CapturingReporter()
