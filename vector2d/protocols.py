"""Protocols describing the minimal interface of the two capabilities.

This module provides:
- ``SupportsVector2D``: anything with ``x``, ``y`` and a ``from_xy`` constructor
- ``SupportsRectangular``: anything with an ``origin`` point and a ``size``

The matching mixins, :class:`vector2d.vector.Vector2D` and
:class:`vector2d.rectangular.Rectangular`, supply every derived operation in
terms of these few members. Protocols are used for structural typing, so a
value can be checked against the interface without inheriting from a mixin::

    from vector2d.protocols import SupportsVector2D
    from vector2d import Point

    assert isinstance(Point(1.0, 2.0), SupportsVector2D)

"""

from __future__ import annotations

from typing import Protocol, Self, runtime_checkable

import numpy as np

# Scalar field of all coordinates. numpy floating scalars behave like float.
Field = float | np.floating


@runtime_checkable
class SupportsVector2D(Protocol):
    """Protocol for a coordinate pair constructible from ``(x, y)``."""

    @property
    def x(self) -> Field:
        """The first coordinate."""
        ...

    @property
    def y(self) -> Field:
        """The second coordinate."""
        ...

    @classmethod
    def from_xy(cls, x: Field, y: Field) -> Self:
        """Create a value from its two coordinates."""
        ...


@runtime_checkable
class SupportsRectangular(Protocol):
    """Protocol for an axis-aligned rectangle given by origin and size.

    ``origin`` must expose ``x``/``y`` and ``size`` must expose
    ``width``/``height``. The size may be negative, describing a flipped
    rectangle.
    """

    @property
    def origin(self):
        """The origin point."""
        ...

    @property
    def size(self):
        """The extent, possibly with negative components."""
        ...
