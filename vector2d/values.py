"""Concrete planar value types.

All types are immutable, slotted dataclasses that only declare their fields
and the mapping onto the capability interfaces:

- Point: a location ``(x, y)``, Vector2D and a degenerate Rectangular
- Size: an extent ``(width, height)``, Vector2D with x = width, y = height
- Vector: a displacement ``(dx, dy)``, Vector2D
- UnitPoint: a point in relative coordinates, conventionally in [0, 1]
- Rect: an axis-aligned rectangle ``(origin, size)``, Rectangular

Point, Size and Vector hold the same coordinate pair under different names, so
they convert into one another without loss (``Point(1, 2).as_type(Size)``).
Equality compares type as well as fields: ``Point(1, 2) != Size(1, 2)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from vector2d.protocols import Field
from vector2d.rectangular import Rectangular
from vector2d.vector import Vector2D


@dataclass(frozen=True, slots=True)
class Point(Vector2D, Rectangular):
    """A location in the plane.

    As a Rectangular shape a point is the zero-size rectangle at itself.
    """

    x: Field = 0.0
    y: Field = 0.0

    @property
    def origin(self) -> Point:
        """The point itself."""
        return self

    @property
    def size(self) -> Size:
        """The zero size."""
        return ZERO_SIZE


@dataclass(frozen=True, slots=True)
class Size(Vector2D, Rectangular):
    """A width and height, possibly negative for a flipped extent.

    As a Rectangular shape a size is the rectangle spanned from the origin.
    Its own ``width`` and ``height`` are the stored values, not their
    absolute values.
    """

    width: Field = 0.0
    height: Field = 0.0

    @classmethod
    def from_xy(cls, x: Field, y: Field) -> Self:
        """Create a size with width x and height y."""
        return cls(width=x, height=y)

    @property
    def x(self) -> Field:
        """The width."""
        return self.width

    @property
    def y(self) -> Field:
        """The height."""
        return self.height

    @property
    def origin(self) -> Point:
        """The zero point."""
        return ZERO_POINT

    @property
    def size(self) -> Size:
        """The size itself."""
        return self


@dataclass(frozen=True, slots=True)
class Vector(Vector2D):
    """A displacement ``(dx, dy)``."""

    dx: Field = 0.0
    dy: Field = 0.0

    @classmethod
    def from_xy(cls, x: Field, y: Field) -> Self:
        """Create a vector with dx = x and dy = y."""
        return cls(dx=x, dy=y)

    @property
    def x(self) -> Field:
        """The horizontal displacement."""
        return self.dx

    @property
    def y(self) -> Field:
        """The vertical displacement."""
        return self.dy


@dataclass(frozen=True, slots=True)
class UnitPoint(Vector2D, Rectangular):
    """A point in coordinates relative to some rectangle.

    Coordinates are conventionally in [0, 1] but are not clamped, so a unit
    point can be fed straight into ``Rectangular.relative_point``::

        anchor = UnitPoint(0.5, 1.0)
        rect[anchor.x, anchor.y] == rect.bottom

    """

    x: Field = 0.0
    y: Field = 0.0

    @property
    def origin(self) -> Point:
        """This unit point as a plain point."""
        return self.point

    @property
    def size(self) -> Size:
        """The zero size."""
        return ZERO_SIZE


ZERO_POINT = Point(0.0, 0.0)
ZERO_SIZE = Size(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Rect(Rectangular):
    """An axis-aligned rectangle given by its origin and size.

    A negative size component describes a rectangle extending to the left
    of (or above) its origin. Derived bounds are ordered regardless.
    """

    origin: Point = ZERO_POINT
    size: Size = ZERO_SIZE

    @classmethod
    def from_xywh(cls, x: Field, y: Field, width: Field, height: Field) -> Self:
        """Create a rectangle from origin coordinates and dimensions."""
        return cls(Point(x, y), Size(width, height))


UNIT_SQUARE = Rect(Point(0.0, 0.0), Size(1.0, 1.0))
