"""The Rectangular capability: geometry derived from an origin and a size.

Provides the :class:`Rectangular` mixin. A conforming class only exposes

- ``origin``: a point with ``x`` and ``y``
- ``size``: an extent with ``width`` and ``height``, possibly negative

and gains bounds, edges, named anchor points, corners, a relative-position
lookup, absolute dimensions and the bounding and inscribed squares. None of
it is stored; every value is computed from ``origin`` and ``size`` on access.

The y-axis grows downward as on a screen: ``top`` is at ``min_y`` and
``bottom`` at ``max_y``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vector2d.numeric import ieee_divide

if TYPE_CHECKING:
    from vector2d.protocols import Field
    from vector2d.values import Point, Rect


def _point(x: Field, y: Field) -> Point:
    from vector2d.values import Point  # noqa: PLC0415

    return Point(x, y)


def _rect(x: Field, y: Field, width: Field, height: Field) -> Rect:
    from vector2d.values import Rect  # noqa: PLC0415

    return Rect.from_xywh(x, y, width, height)


class _UnitSquare:
    """Class-level unit square, the same rectangle for every conforming class."""

    def __get__(self, instance, owner=None) -> Rect:
        from vector2d.values import UNIT_SQUARE  # noqa: PLC0415

        return UNIT_SQUARE


class Rectangular:
    """Mixin deriving rectangle geometry from ``origin`` and ``size``.

    Attributes:
        unit_square: the rectangle with origin (0, 0) and size (1, 1)

    Notes:
        ``width`` and ``height`` are the absolute values of the stored size.
        A conforming class that already has its own ``width``/``height``
        attributes keeps them; ``min_side``, ``max_side`` and
        ``aspect_ratio`` take the absolute value again for that reason.

    """

    __slots__ = ()

    unit_square = _UnitSquare()

    # ------------------------------------------------------------------
    # bounds
    # ------------------------------------------------------------------

    @property
    def bounds_x(self) -> tuple[Field, Field]:
        """The x-coordinates ``(origin.x, origin.x + size.width)``, unordered."""
        x1 = self.origin.x
        return x1, x1 + self.size.width

    @property
    def bounds_y(self) -> tuple[Field, Field]:
        """The y-coordinates ``(origin.y, origin.y + size.height)``, unordered."""
        y1 = self.origin.y
        return y1, y1 + self.size.height

    # ------------------------------------------------------------------
    # coordinates
    # ------------------------------------------------------------------

    @property
    def min_x(self) -> Field:
        """Lower bound of the x range."""
        return min(self.bounds_x)

    @property
    def max_x(self) -> Field:
        """Upper bound of the x range."""
        return max(self.bounds_x)

    @property
    def mid_x(self) -> Field:
        """Midpoint of the x range, ``origin.x + size.width / 2``."""
        return self.origin.x + self.size.width / 2

    @property
    def min_y(self) -> Field:
        """Lower bound of the y range."""
        return min(self.bounds_y)

    @property
    def max_y(self) -> Field:
        """Upper bound of the y range."""
        return max(self.bounds_y)

    @property
    def mid_y(self) -> Field:
        """Midpoint of the y range, ``origin.y + size.height / 2``."""
        return self.origin.y + self.size.height / 2

    # ------------------------------------------------------------------
    # points
    # ------------------------------------------------------------------

    @property
    def top(self) -> Point:
        """Midpoint of the top edge, (mid_x, min_y)."""
        return _point(self.mid_x, self.min_y)

    @property
    def bottom(self) -> Point:
        """Midpoint of the bottom edge, (mid_x, max_y)."""
        return _point(self.mid_x, self.max_y)

    @property
    def left(self) -> Point:
        """Midpoint of the left edge, (min_x, mid_y)."""
        return _point(self.min_x, self.mid_y)

    @property
    def right(self) -> Point:
        """Midpoint of the right edge, (max_x, mid_y)."""
        return _point(self.max_x, self.mid_y)

    @property
    def center(self) -> Point:
        """The center, (mid_x, mid_y)."""
        return _point(self.mid_x, self.mid_y)

    @property
    def top_left(self) -> Point:
        """The corner (min_x, min_y)."""
        return _point(self.min_x, self.min_y)

    @property
    def top_right(self) -> Point:
        """The corner (max_x, min_y)."""
        return _point(self.max_x, self.min_y)

    @property
    def bottom_left(self) -> Point:
        """The corner (min_x, max_y)."""
        return _point(self.min_x, self.max_y)

    @property
    def bottom_right(self) -> Point:
        """The corner (max_x, max_y)."""
        return _point(self.max_x, self.max_y)

    @property
    def corners(self) -> list[Point]:
        """The four corners, in the order bottom-left, bottom-right, top-right, top-left."""
        return [self.bottom_left, self.bottom_right, self.top_right, self.top_left]

    def relative_point(self, s: Field, t: Field) -> Point:
        """A point given relative to the width and height of the shape.

        ``(0, 0)`` is ``top_left`` and ``(1, 1)`` is ``bottom_right``. Values
        outside [0, 1] extrapolate linearly.

        Args:
            s: fraction of the width, measured from ``min_x``
            t: fraction of the height, measured from ``min_y``

        """
        return _point(self.min_x + s * abs(self.width), self.min_y + t * abs(self.height))

    def __getitem__(self, key: tuple[Field, Field]) -> Point:
        s, t = key
        return self.relative_point(s, t)

    # ------------------------------------------------------------------
    # dimensions
    # ------------------------------------------------------------------

    @property
    def width(self) -> Field:
        """Absolute width."""
        return abs(self.size.width)

    @property
    def height(self) -> Field:
        """Absolute height."""
        return abs(self.size.height)

    @property
    def min_side(self) -> Field:
        """The shorter of width and height."""
        return min(abs(self.width), abs(self.height))

    @property
    def max_side(self) -> Field:
        """The longer of width and height."""
        return max(abs(self.width), abs(self.height))

    @property
    def aspect_ratio(self) -> Field:
        """``|width / height|``; infinite for zero height and NaN when both are zero."""
        return abs(ieee_divide(self.width, self.height))

    # ------------------------------------------------------------------
    # rectangles
    # ------------------------------------------------------------------

    @property
    def rect(self) -> Rect:
        """The plain :class:`~vector2d.values.Rect` with this origin and size."""
        return _rect(self.origin.x, self.origin.y, self.size.width, self.size.height)

    @property
    def bounding_square(self) -> Rect:
        """The smallest square containing the shape, sharing its center."""
        side = self.max_side
        d = side / 2
        return _rect(self.mid_x - d, self.mid_y - d, side, side)

    @property
    def inscribed_square(self) -> Rect:
        """The largest square inside the shape, sharing its center."""
        side = self.min_side
        d = side / 2
        return _rect(self.mid_x - d, self.mid_y - d, side, side)
