"""
Shared test fixtures and utilities for the tagflow test suite.
"""

from pathlib import Path

import pytest


@pytest.fixture
def write_program(tmp_path):
    """Write an XML program into the test's temporary directory.

    Usage:
        def test_something(write_program):
            path = write_program("<pipeline>...</pipeline>")
    """

    def _write(text: str, name: str = "program.xml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def greeting_file(tmp_path) -> Path:
    """A file containing the text ``hello``."""
    path = tmp_path / "greeting.txt"
    path.write_text("hello", encoding="utf-8")
    return path
