"""Core domain models for the blackboard-py drawing system."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from itertools import count
from typing import TYPE_CHECKING, ClassVar

from blackboard_py.core.types import ShapeKind

if TYPE_CHECKING:
    from blackboard_py.core.grid import Grid


def _span(start: int, length: int, limit: int) -> range:
    """Offsets in ``[0, length)`` that keep ``start + offset`` inside ``[0, limit)``."""
    return range(max(0, -start), min(length, limit - start))


class ShapeIdGenerator:
    """Hands out strictly increasing shape ids, starting at ``start``.

    Each board owns one generator, so separate boards (and tests) never
    share a counter.
    """

    def __init__(self, start: int = 1) -> None:
        self._counter = count(start)

    def next_id(self) -> int:
        """Return the next unused id."""
        return next(self._counter)


@dataclass(frozen=True)
class Shape(ABC):
    """Base class for all shapes drawn on the board.

    Shapes only hold their geometry. They receive the grid to draw into on
    every call to :meth:`rasterize` and rely on the grid to clip points that
    fall outside of it.

    Attributes:
        x: Column of the shape's anchor point.
        y: Row of the shape's anchor point.
        id: Identifier assigned by the board, 0 until the shape is added.
            Not used for equality.
    """

    kind: ClassVar[ShapeKind]

    x: int
    y: int
    id: int = field(default=0, kw_only=True, compare=False)

    @abstractmethod
    def rasterize(self, grid: Grid) -> None:
        """Write this shape's glyphs into ``grid``."""
        ...

    @property
    def label(self) -> str:
        """Human-readable name of the shape's kind."""
        return self.kind.value

    @property
    def params(self) -> tuple[int, ...]:
        """Size parameters in shape-record order."""
        return ()


@dataclass(frozen=True)
class Triangle(Shape):
    """Isosceles triangle with its apex at ``(x, y)``, opening downwards.

    Attributes:
        height: Number of rows, apex row included.
    """

    kind: ClassVar[ShapeKind] = ShapeKind.TRIANGLE

    height: int

    def rasterize(self, grid: Grid) -> None:
        """Draw both slanted edges, then the base row."""
        if self.height <= 0:
            return

        for i in _span(self.y, self.height, grid.height):
            grid.set(self.x - i, self.y + i)
            if i != 0:
                grid.set(self.x + i, self.y + i)

        base_y = self.y + self.height - 1
        base_x = self.x - self.height + 1
        if not 0 <= base_y < grid.height:
            return
        for j in _span(base_x, 2 * self.height - 1, grid.width):
            grid.set(base_x + j, base_y)

    @property
    def params(self) -> tuple[int, ...]:
        return (self.height,)


@dataclass(frozen=True)
class Circle(Shape):
    """Circle outline centred on ``(x, y)``.

    The outline is every integer offset whose squared distance lies in the
    band ``[radius**2 - radius, radius**2]``.

    Attributes:
        radius: Radius in cells.
    """

    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    radius: int

    def rasterize(self, grid: Grid) -> None:
        """Plot every offset inside the squared-distance band."""
        if self.radius <= 0:
            return

        outer = self.radius * self.radius
        inner = outer - self.radius
        diameter = 2 * self.radius + 1
        for col in _span(self.x - self.radius, diameter, grid.width):
            i = col - self.radius
            for row in _span(self.y - self.radius, diameter, grid.height):
                j = row - self.radius
                if inner <= i * i + j * j <= outer:
                    grid.set(self.x + i, self.y + j)

    @property
    def params(self) -> tuple[int, ...]:
        return (self.radius,)


@dataclass(frozen=True)
class Rectangle(Shape):
    """Rectangle outline with its top-left corner at ``(x, y)``.

    Attributes:
        width: Number of columns covered.
        height: Number of rows covered.
    """

    kind: ClassVar[ShapeKind] = ShapeKind.RECTANGLE

    width: int
    height: int

    def rasterize(self, grid: Grid) -> None:
        """Draw the top and bottom rows, then the left and right columns."""
        if self.width <= 0 or self.height <= 0:
            return

        bottom = self.y + self.height - 1
        right = self.x + self.width - 1
        for i in _span(self.x, self.width, grid.width):
            grid.set(self.x + i, self.y)
            grid.set(self.x + i, bottom)

        for j in _span(self.y, self.height, grid.height):
            grid.set(self.x, self.y + j)
            grid.set(right, self.y + j)

    @property
    def params(self) -> tuple[int, ...]:
        # Records list height before width
        return (self.height, self.width)


@dataclass(frozen=True)
class Line(Shape):
    """Horizontal line running right from ``(x, y)``.

    Attributes:
        length: Number of cells covered.
    """

    kind: ClassVar[ShapeKind] = ShapeKind.LINE

    length: int

    def rasterize(self, grid: Grid) -> None:
        """Plot ``length`` consecutive cells on row ``y``."""
        if self.length <= 0:
            return

        for i in _span(self.x, self.length, grid.width):
            grid.set(self.x + i, self.y)

    @property
    def params(self) -> tuple[int, ...]:
        return (self.length,)


@dataclass(frozen=True)
class ShapeRequest:
    """A parsed instruction to create one shape.

    Attributes:
        kind: Which shape variant to build.
        x: Anchor column.
        y: Anchor row.
        params: Size parameters in record order. One value (height, radius
            or length) for most kinds, ``(height, width)`` for rectangles.
    """

    kind: ShapeKind
    x: int
    y: int
    params: tuple[int, ...]

    def build(self, shape_id: int = 0) -> Shape:
        """Instantiate the shape variant this request describes.

        Args:
            shape_id: Identifier to give the new shape.

        Returns:
            A new shape.

        Raises:
            ValueError: If ``params`` has the wrong arity for ``kind``.
        """
        expected = PARAM_COUNTS[self.kind]
        if len(self.params) != expected:
            msg = f"{self.kind} takes {expected} size parameter(s), got {len(self.params)}"
            raise ValueError(msg)

        if self.kind is ShapeKind.RECTANGLE:
            height, width = self.params
            return Rectangle(self.x, self.y, width=width, height=height, id=shape_id)
        (size,) = self.params
        if self.kind is ShapeKind.TRIANGLE:
            return Triangle(self.x, self.y, height=size, id=shape_id)
        if self.kind is ShapeKind.CIRCLE:
            return Circle(self.x, self.y, radius=size, id=shape_id)
        return Line(self.x, self.y, length=size, id=shape_id)


PARAM_COUNTS: dict[ShapeKind, int] = {
    ShapeKind.TRIANGLE: 1,
    ShapeKind.CIRCLE: 1,
    ShapeKind.RECTANGLE: 2,
    ShapeKind.LINE: 1,
}
