"""The board: a grid plus the ordered stack of shapes drawn on it."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

import structlog

from blackboard_py.core.grid import Grid
from blackboard_py.core.models import ShapeIdGenerator
from blackboard_py.core.types import BOARD_HEIGHT, BOARD_WIDTH

if TYPE_CHECKING:
    from collections.abc import Iterator

    from blackboard_py.core.models import Shape, ShapeRequest

logger = structlog.get_logger(__name__)

NO_SHAPES = "None"


class Board:
    """Owns a grid and the shapes drawn on it, in insertion order.

    Shapes are rendered in the order they were added, so later shapes draw
    over earlier ones. Removal follows stack discipline: only the most
    recently added shape can be undone. Undone shapes are kept on a redo
    stack until the next add.

    Attributes:
        grid: The grid shapes are rasterized into.
    """

    def __init__(
        self,
        width: int = BOARD_WIDTH,
        height: int = BOARD_HEIGHT,
        *,
        id_generator: ShapeIdGenerator | None = None,
    ) -> None:
        """Initialize an empty board.

        Args:
            width: Grid width in characters.
            height: Grid height in characters.
            id_generator: Source of shape ids. A fresh generator starting at
                1 is created when omitted.
        """
        self.grid = Grid(width, height)
        self._ids = id_generator or ShapeIdGenerator()
        self._shapes: list[Shape] = []
        self._redo_stack: list[Shape] = []

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    @property
    def shapes(self) -> tuple[Shape, ...]:
        """Shapes on the board, oldest first."""
        return tuple(self._shapes)

    def add(self, shape: Shape) -> Shape:
        """Append a shape to the top of the stack.

        A shape that has no id yet (id 0) is stored as a copy carrying the
        next id from this board's generator. Adding a shape discards
        anything that could have been redone.

        Args:
            shape: The shape to add.

        Returns:
            The stored shape.
        """
        if not shape.id:
            shape = replace(shape, id=self._ids.next_id())
        self._shapes.append(shape)
        self._redo_stack.clear()
        logger.debug("Shape added", shape_id=shape.id, kind=shape.label, count=len(self._shapes))
        return shape

    def create(self, request: ShapeRequest) -> Shape:
        """Build the shape described by ``request`` and add it.

        The new shape gets the next id from this board's generator.

        Args:
            request: The parsed construction request.

        Returns:
            The created shape.
        """
        return self.add(request.build(self._ids.next_id()))

    def undo(self) -> Shape | None:
        """Remove the most recently added shape.

        Returns:
            The removed shape, or None if the board was empty.
        """
        if not self._shapes:
            logger.debug("Nothing to undo")
            return None
        shape = self._shapes.pop()
        self._redo_stack.append(shape)
        logger.debug("Shape undone", shape_id=shape.id, kind=shape.label, count=len(self._shapes))
        return shape

    def redo(self) -> Shape | None:
        """Restore the most recently undone shape.

        Returns:
            The restored shape, or None if there was nothing to redo.
        """
        if not self._redo_stack:
            logger.debug("Nothing to redo")
            return None
        shape = self._redo_stack.pop()
        self._shapes.append(shape)
        logger.debug("Shape redone", shape_id=shape.id, kind=shape.label, count=len(self._shapes))
        return shape

    def can_undo(self) -> bool:
        """Check if there is a shape to undo."""
        return len(self._shapes) > 0

    def can_redo(self) -> bool:
        """Check if there is a shape to redo."""
        return len(self._redo_stack) > 0

    def render(self) -> str:
        """Redraw every shape onto a cleared grid.

        Returns:
            The grid as text, ``height`` lines of ``width`` characters.
        """
        self.grid.clear()
        for shape in self._shapes:
            shape.rasterize(self.grid)
        return self.grid.render()

    def list(self) -> list[str]:
        """Label every shape, oldest first.

        Returns:
            One label per shape, or ``[NO_SHAPES]`` if the board is empty.
        """
        if not self._shapes:
            return [NO_SHAPES]
        return [shape.label for shape in self._shapes]
