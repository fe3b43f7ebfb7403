"""Tests for the Vector2D capability."""

import math

import numpy as np
import pytest

from vector2d import Point, Size, UnitPoint, Vector


def random_vectors(n, seed=42):
    """Return n random points with coordinates in [-100, 100)."""
    rng = np.random.default_rng(seed)
    return [Point(float(x), float(y)) for x, y in rng.uniform(-100, 100, (n, 2))]


def assert_close(actual, expected):
    """Assert that two values of the same type have approximately equal coordinates."""
    assert type(actual) is type(expected)
    assert tuple(actual) == pytest.approx(tuple(expected))


class TestConstruction:
    """Test the constructors derived from from_xy."""

    def test_from_xy(self):
        """from_xy maps onto the fields of each type."""
        assert Point.from_xy(1.0, 2.0) == Point(1.0, 2.0)
        assert Size.from_xy(1.0, 2.0) == Size(width=1.0, height=2.0)
        assert Vector.from_xy(1.0, 2.0) == Vector(dx=1.0, dy=2.0)
        assert UnitPoint.from_xy(0.25, 0.75) == UnitPoint(0.25, 0.75)

    def test_of_pads_with_zeros(self):
        """of() pads missing trailing coordinates with 0."""
        assert Point.of() == Point(0.0, 0.0)
        assert Point.of(3.0) == Point(3.0, 0.0)
        assert Point.of(3.0, 4.0) == Point(3.0, 4.0)
        assert Size.of(5.0) == Size(5.0, 0.0)

    def test_of_ignores_extra_values(self):
        """of() warns about and ignores values past the second."""
        with pytest.warns(UserWarning, match="takes at most 2 values"):
            p = Point.of(1.0, 2.0, 3.0)
        assert p == Point(1.0, 2.0)

    def test_basis_vectors(self):
        """i and j are built with the constructor of the accessing type."""
        assert Point.i == Point(1.0, 0.0)
        assert Point.j == Point(0.0, 1.0)
        assert Size.i == Size(1.0, 0.0)
        assert Vector.j == Vector(0.0, 1.0)
        assert Point(5.0, 5.0).i == Point(1.0, 0.0)

    def test_polar(self):
        """polar() follows the counter-clockwise convention."""
        p = Point.polar(2.0, math.pi / 2)
        assert p.x == pytest.approx(0.0, abs=1e-12)
        assert p.y == pytest.approx(2.0)

        v = Vector.polar(1.0, math.pi)
        assert v.x == pytest.approx(-1.0)
        assert v.y == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.parametrize("r", [0.0, 0.5, 1.0, 3.0, 1e6])
    def test_polar_magnitude(self, r):
        """The point of polar(r, a) lies at distance r from the origin."""
        rng = np.random.default_rng(7)
        for angle in rng.uniform(-10, 10, 20):
            p = Size.polar(r, float(angle)).point
            assert math.hypot(p.x, p.y) == pytest.approx(r)

    def test_polar_non_finite_angle(self):
        """polar() with an infinite angle gives NaN instead of raising."""
        p = Point.polar(1.0, math.inf)
        assert math.isnan(p.x)
        assert math.isnan(p.y)


class TestLinearCombinations:
    """Test addition, negation, subtraction and scalar multiplication."""

    def test_add(self):
        """Addition is component-wise."""
        assert Point(1.0, 2.0) + Point(3.0, 5.0) == Point(4.0, 7.0)

    def test_neg(self):
        """Negation flips both coordinates."""
        assert -Vector(1.0, -2.0) == Vector(-1.0, 2.0)

    def test_sub(self):
        """Subtraction is component-wise."""
        assert Size(5.0, 7.0) - Size(1.0, 2.0) == Size(4.0, 5.0)

    def test_vector_space_laws(self):
        """Addition and scalar multiplication obey the vector space laws."""
        vectors = random_vectors(30)
        for u, v, w in zip(vectors, vectors[1:], vectors[2:]):
            a = u.x / 10
            assert u + v == v + u
            assert_close((u + v) + w, u + (v + w))
            assert u - v == u + (-v)
            assert_close(a * (u + v), a * u + a * v)

    def test_scalar_multiplication(self):
        """Scalars multiply from either side, including numpy scalars."""
        v = Point(1.5, -2.0)
        assert 2 * v == Point(3.0, -4.0)
        assert v * 2 == Point(3.0, -4.0)
        assert np.float64(2.0) * v == Point(3.0, -4.0)
        assert isinstance(np.float64(2.0) * v, Point)

    def test_scalar_division(self):
        """Division by a scalar divides each coordinate."""
        assert Vector(3.0, -6.0) / 3 == Vector(1.0, -2.0)

    def test_division_by_zero(self):
        """Division by zero gives infinity or NaN instead of raising."""
        v = Point(1.0, 0.0) / 0
        assert v.x == math.inf
        assert math.isnan(v.y)

        w = Point(-1.0, 2.0) / 0.0
        assert w.x == -math.inf
        assert w.y == math.inf

    def test_result_has_left_operand_type(self):
        """Mixed-type operations return the type of the left operand."""
        assert Point(1.0, 1.0) + Vector(1.0, 2.0) == Point(2.0, 3.0)
        assert Vector(1.0, 2.0) - Point(1.0, 1.0) == Vector(0.0, 1.0)

    def test_unsupported_operands(self):
        """Operands that are neither scalars nor vectors raise TypeError."""
        with pytest.raises(TypeError):
            Point(1.0, 2.0) + (1.0, 2.0)
        with pytest.raises(TypeError):
            Point(1.0, 2.0) * "2"
        with pytest.raises(TypeError):
            Point(1.0, 2.0) / Point(1.0, 1.0)
        with pytest.raises(TypeError):
            Point(1.0, 2.0) ** 2


class TestProducts:
    """Test dot, cross, complex and element-wise products."""

    def test_basis_products(self):
        """Products of the basis vectors."""
        i, j = Point.i, Point.j
        assert i.cross(j) == 1
        assert j.cross(i) == -1
        assert i.dot(i) == 1
        assert i.dot(j) == 0
        assert i @ j == 0

    def test_dot_and_cross(self):
        """Dot and cross products of arbitrary vectors."""
        u, v = Vector(1.0, 2.0), Vector(3.0, 4.0)
        assert u.dot(v) == 11.0
        assert u @ v == 11.0
        assert u.cross(v) == -2.0
        assert v.cross(u) == 2.0

    def test_complex_multiplication(self):
        """Vector times vector is complex multiplication."""
        u, v = Point(1.0, 2.0), Point(3.0, 4.0)
        # (1 + 2i)(3 + 4i) = -5 + 10i
        assert u * v == Point(-5.0, 10.0)
        assert u.complex_mul(v) == Point(-5.0, 10.0)
        assert complex(u * v) == complex(u) * complex(v)

    def test_complex_identity(self):
        """Multiplying by i = 1 + 0i leaves a vector unchanged."""
        for v in random_vectors(10):
            assert Point.i * v == v
            assert v * Point.i == v

    def test_multiplying_by_j_rotates(self):
        """Multiplying by j = 0 + 1i rotates a quarter turn counter-clockwise."""
        assert Point.j * Point(2.0, 1.0) == Point(-1.0, 2.0)

    def test_complex_multiplication_in_place(self):
        """*= rebinds to the complex product."""
        u = Vector(0.0, 1.0)
        u *= Vector(0.0, 1.0)
        assert u == Vector(-1.0, 0.0)

    def test_element_wise_product(self):
        """** is the non-proportional scale."""
        assert Point(2.0, 3.0) ** Point(4.0, 5.0) == Point(8.0, 15.0)
        assert Size(2.0, 3.0).scale_by(Vector(4.0, 5.0)) == Size(8.0, 15.0)
