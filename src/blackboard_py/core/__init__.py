"""Core domain models for blackboard-py."""

from blackboard_py.core.board import NO_SHAPES, Board
from blackboard_py.core.grid import Grid
from blackboard_py.core.models import (
    Circle,
    Line,
    Rectangle,
    Shape,
    ShapeIdGenerator,
    ShapeRequest,
    Triangle,
)
from blackboard_py.core.types import BLANK, BOARD_HEIGHT, BOARD_WIDTH, GLYPH, ShapeKind

__all__ = [
    "BLANK",
    "BOARD_HEIGHT",
    "BOARD_WIDTH",
    "GLYPH",
    "NO_SHAPES",
    "Board",
    "Circle",
    "Grid",
    "Line",
    "Rectangle",
    "Shape",
    "ShapeIdGenerator",
    "ShapeKind",
    "ShapeRequest",
    "Triangle",
]
