"""Core type definitions for blackboard-py."""

from __future__ import annotations

from enum import StrEnum

BOARD_WIDTH = 80
BOARD_HEIGHT = 25

GLYPH = "*"
BLANK = " "


class ShapeKind(StrEnum):
    """Enumeration of shape kinds that can be drawn on the board.

    Values match the kind token used in shape records.
    """

    TRIANGLE = "Triangle"
    CIRCLE = "Circle"
    RECTANGLE = "Rectangle"
    LINE = "Line"
