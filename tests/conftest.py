"""Pytest configuration and fixtures for blackboard-py tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

from blackboard_py.core.board import Board
from blackboard_py.core.grid import Grid
from blackboard_py.core.models import Circle, Line, Rectangle, Triangle

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any logging configuration a test (or the CLI) applied."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


# Grid and board fixtures


@pytest.fixture
def grid() -> Grid:
    """Create a blank 80x25 grid."""
    return Grid()


@pytest.fixture
def board() -> Board:
    """Create an empty 80x25 board with a fresh id counter."""
    return Board()


# Shape fixtures


@pytest.fixture
def sample_triangle() -> Triangle:
    """Create a sample triangle with its apex at column 5, row 0."""
    return Triangle(5, 0, height=3)


@pytest.fixture
def sample_circle() -> Circle:
    """Create a sample circle centred on (10, 5)."""
    return Circle(10, 5, radius=5)


@pytest.fixture
def sample_rectangle() -> Rectangle:
    """Create a sample 8 wide, 5 high rectangle at (3, 6)."""
    return Rectangle(3, 6, width=8, height=5)


@pytest.fixture
def sample_line() -> Line:
    """Create a sample line that starts one column off the board."""
    return Line(-1, 12, length=15)


# Record fixtures


@pytest.fixture
def shapes_file(tmp_path: Path) -> Path:
    """Write a record file with one shape of each kind plus a bad line."""
    path = tmp_path / "shapes.txt"
    path.write_text(
        "add Triangle 20 2 4\n"
        "add Circle 10 5 5\n"
        "add Hexagon abc\n"
        "add Rectangle 3 6 5 8\n"
        "add Line -1 12 15\n",
        encoding="utf-8",
    )
    return path
