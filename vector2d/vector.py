"""The Vector2D capability: vector and complex arithmetic over a coordinate pair.

A conforming class exposes ``x`` and ``y`` and can be built back from a pair
through the ``from_xy`` classmethod. Mixing in :class:`Vector2D` then gives it

- vector addition, negation and subtraction (``u + v``, ``-v``, ``u - v``)
- scalar multiplication and division (``a * v``, ``v * a``, ``v / a``)
- dot and cross products (``u.dot(v)`` or ``u @ v``, ``u.cross(v)``)
- complex multiplication (``u * v``, ``u *= v``), treating ``(x, y)`` as ``x + yi``
- element-wise, non-proportional scaling (``u ** v``)
- polar construction and conversions between conforming types

Binary operations accept any :class:`Vector2D` on the right-hand side and
return the type of the left-hand operand. Division by zero and non-finite
input follow IEEE-754 and never raise.
"""

from __future__ import annotations

import numbers
import warnings
from collections.abc import Iterator
from typing import TYPE_CHECKING, Self

import numpy as np
from numpy.typing import ArrayLike

from vector2d.errors import ConformanceError
from vector2d.numeric import ieee_cos, ieee_divide, ieee_sin
from vector2d.vector2d_logging import create_module_logger, method_logger

if TYPE_CHECKING:
    from vector2d.protocols import Field
    from vector2d.values import Point

_vector2d_logger = create_module_logger()


class _BasisVector:
    """Class-level basis vector, built with the constructor of the accessing class."""

    def __init__(self, x: Field, y: Field):
        self.x = x
        self.y = y

    def __get__(self, instance, owner=None):
        if owner is None:
            owner = type(instance)
        return owner.from_xy(self.x, self.y)


class Vector2D:
    """Mixin for coordinate pairs that behave as 2D vectors and complex numbers.

    Conforming classes must provide ``x`` and ``y``. The default ``from_xy``
    calls ``cls(x, y)``; classes whose fields are named differently (a size
    with ``width``/``height`` for instance) override it.

    Attributes:
        i: the basis vector ``(1, 0)`` of the conforming class
        j: the basis vector ``(0, 1)`` of the conforming class

    """

    __slots__ = ()

    # make numpy defer to the reflected operators below instead of
    # broadcasting over __array__, so np.float64(2) * v stays a vector
    __array_ufunc__ = None

    i = _BasisVector(1.0, 0.0)
    j = _BasisVector(0.0, 1.0)

    # ------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------

    @classmethod
    def from_xy(cls, x: Field, y: Field) -> Self:
        """Create a value from its two coordinates."""
        return cls(x, y)

    @classmethod
    def of(cls, *values: Field) -> Self:
        """Create a value from up to two coordinates, padding missing ones with 0.

        ``of()`` is the zero vector and ``of(v)`` is ``(v, 0)``. Values past the
        second are ignored with a warning.
        """
        if len(values) > 2:
            warnings.warn(
                f"{cls.__name__}.of() takes at most 2 values, ignoring {values[2:]}.",
                UserWarning,
                stacklevel=2,
            )
        x, y = (*values, 0.0, 0.0)[:2]
        return cls.from_xy(x, y)

    @classmethod
    def polar(cls, r: Field, angle: Field) -> Self:
        """Create a value from polar coordinates.

        Args:
            r: the radius
            angle: the angle in radians, counter-clockwise from the positive x-axis

        """
        return cls.from_xy(r * ieee_cos(angle), r * ieee_sin(angle))

    @classmethod
    def from_complex(cls, z: complex) -> Self:
        """Create a value from the complex number ``x + yi``."""
        return cls.from_xy(z.real, z.imag)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Self:
        """Create a value from a coordinate tuple or a numpy array of shape (2,)."""
        array = np.asarray(array, dtype=float)
        if array.shape != (2,):
            raise ValueError(
                f"expected a pair of coordinates, got an array of shape {array.shape}"
            )
        return cls.from_xy(float(array[0]), float(array[1]))

    @classmethod
    @method_logger(__name__)
    def from_vector(cls, other: Vector2D) -> Self:
        """Create a value with the coordinates of any other Vector2D value."""
        if not isinstance(other, Vector2D):
            raise ConformanceError(other)
        return cls.from_xy(other.x, other.y)

    def as_type[V: Vector2D](self, target: type[V]) -> V:
        """Reinterpret this coordinate pair as another conforming type.

        Args:
            target: the Vector2D class to convert to

        Raises:
            ConformanceError: if target is not a Vector2D class

        """
        if not (isinstance(target, type) and issubclass(target, Vector2D)):
            raise ConformanceError(target)
        _vector2d_logger.debug(
            f"converting {type(self).__name__} to {target.__name__}"
        )
        return target.from_xy(self.x, self.y)

    @property
    def point(self) -> Point:
        """This coordinate pair as a plain :class:`~vector2d.values.Point`."""
        from vector2d.values import Point  # noqa: PLC0415

        return Point(self.x, self.y)

    # ------------------------------------------------------------------
    # linear combinations
    # ------------------------------------------------------------------

    def __add__(self, other: Vector2D) -> Self:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.from_xy(self.x + other.x, self.y + other.y)

    def __neg__(self) -> Self:
        return self.from_xy(-self.x, -self.y)

    def __sub__(self, other: Vector2D) -> Self:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self + (-other)

    # ------------------------------------------------------------------
    # scalar multiplication, complex multiplication
    # ------------------------------------------------------------------

    def scale(self, a: Field) -> Self:
        """Scalar multiplication ``a * v``."""
        return self.from_xy(a * self.x, a * self.y)

    def complex_mul(self, other: Vector2D) -> Self:
        """Complex multiplication of ``x + yi`` by ``other.x + other.y i``."""
        a, b, c, d = self.x, self.y, other.x, other.y
        return self.from_xy(a * c - b * d, a * d + b * c)

    def __mul__(self, other: Vector2D | Field) -> Self:
        if isinstance(other, Vector2D):
            return self.complex_mul(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Field) -> Self:
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other: Field) -> Self:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self.from_xy(ieee_divide(self.x, other), ieee_divide(self.y, other))

    # ------------------------------------------------------------------
    # products
    # ------------------------------------------------------------------

    def dot(self, other: Vector2D) -> Field:
        """Dot product ``x1 x2 + y1 y2``."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2D) -> Field:
        """2D cross product (the determinant) ``x1 y2 - y1 x2``."""
        return self.x * other.y - self.y * other.x

    def scale_by(self, other: Vector2D) -> Self:
        """Non-proportional scale: ``(a, b) ** (c, d) == (ac, bd)``."""
        return self.from_xy(self.x * other.x, self.y * other.y)

    def __matmul__(self, other: Vector2D) -> Field:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.dot(other)

    def __pow__(self, other: Vector2D) -> Self:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.scale_by(other)

    # ------------------------------------------------------------------
    # python protocols
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Field]:
        yield self.x
        yield self.y

    def __complex__(self) -> complex:
        return complex(self.x, self.y)

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float if dtype is None else dtype)
