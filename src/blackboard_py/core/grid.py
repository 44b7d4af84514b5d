"""Fixed-size character grid that shapes are rasterized into."""

from __future__ import annotations

from blackboard_py.core.types import BLANK, BOARD_HEIGHT, BOARD_WIDTH, GLYPH


class Grid:
    """A mutable ``width x height`` buffer of single characters.

    The dimensions are fixed at construction. Every write goes through
    :meth:`set`, which silently discards coordinates outside the buffer;
    this is the only clipping that shapes rely on.

    Attributes:
        width: Number of columns.
        height: Number of rows.
    """

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> None:
        """Initialize a blank grid.

        Args:
            width: Number of columns.
            height: Number of rows.
        """
        self._width = width
        self._height = height
        self._cells: list[list[str]] = [[BLANK] * width for _ in range(height)]

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    def clear(self) -> None:
        """Reset every cell to the blank character."""
        for row in self._cells:
            row[:] = [BLANK] * self._width

    def contains(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies inside the grid."""
        return 0 <= x < self._width and 0 <= y < self._height

    def set(self, x: int, y: int, glyph: str = GLYPH) -> None:
        """Write a glyph into cell ``(x, y)`` if it is inside the grid.

        Args:
            x: Column index.
            y: Row index.
            glyph: Character to write.
        """
        if self.contains(x, y):
            self._cells[y][x] = glyph

    def get(self, x: int, y: int) -> str | None:
        """Read cell ``(x, y)``.

        Returns:
            The cell's character, or None if the coordinate is out of range.
        """
        if not self.contains(x, y):
            return None
        return self._cells[y][x]

    def render(self) -> str:
        """Serialize the grid row by row, top row first.

        Returns:
            ``height`` lines of exactly ``width`` characters joined by newlines.
        """
        return "\n".join("".join(row) for row in self._cells)
