"""Blackboard-py: text-mode drawing of simple shapes on a fixed character grid.

Triangles, circles, rectangles and lines are rasterized onto an 80x25 board
of characters in the order they were added and printed as plain text. Shapes
can be added one at a time or loaded from a line-oriented record file, and
the most recent shape can be undone.

Key Components:
    - Core Models: Grid, Shape, Triangle, Circle, Rectangle, Line
    - Board: ordered shape stack with add, undo, redo, render and list
    - Services: shape record parsing and file loading
    - CLI: ``blackboard draw``, ``blackboard list`` and ``blackboard shell``

Quick Start:
    >>> from blackboard_py import Board, Rectangle
    >>>
    >>> board = Board()
    >>> _ = board.add(Rectangle(3, 6, width=8, height=5))
    >>> print(board.render())

Loading Records:
    >>> from blackboard_py import Board, load_lines
    >>>
    >>> board = Board()
    >>> shapes = load_lines(board, ["add Circle 10 5 5", "add Line 0 0 5"])
    >>> board.list()
    ['Circle', 'Line']
"""

from __future__ import annotations

from blackboard_py.config import BoardConfig
from blackboard_py.core import (
    NO_SHAPES,
    Board,
    Circle,
    Grid,
    Line,
    Rectangle,
    Shape,
    ShapeIdGenerator,
    ShapeKind,
    ShapeRequest,
    Triangle,
)
from blackboard_py.exceptions import (
    BlackboardError,
    InvalidShapeRecordError,
    ShapeFileError,
    UnknownShapeKindError,
)
from blackboard_py.services import iter_requests, load_file, load_lines, parse_record

__all__ = [
    "NO_SHAPES",
    "BlackboardError",
    "Board",
    "BoardConfig",
    "Circle",
    "Grid",
    "InvalidShapeRecordError",
    "Line",
    "Rectangle",
    "Shape",
    "ShapeFileError",
    "ShapeIdGenerator",
    "ShapeKind",
    "ShapeRequest",
    "Triangle",
    "UnknownShapeKindError",
    "iter_requests",
    "load_file",
    "load_lines",
    "parse_record",
]

__version__ = "0.1.0"
