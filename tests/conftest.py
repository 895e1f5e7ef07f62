"""Shared pytest fixtures for cssdocs tests."""

import pytest

DOUBLE_CSS = """/**
Doubles a number.
@param {number} --n The input.
@returns {number} The doubled value.
@example --double(2)
@output 4
*/
@function --double(n: 1) {}
"""


@pytest.fixture
def double_css():
    return DOUBLE_CSS


@pytest.fixture
def stylesheet(tmp_path):
    """Write CSS to a temporary index.css and return its path."""

    def write(content: str):
        path = tmp_path / "index.css"
        path.write_text(content, encoding="utf-8")
        return path

    return write
