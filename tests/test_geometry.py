"""Unit tests for geometry module."""

import pytest
import math
import random

from wallrnd.geometry import (
    Pos,
    Frame,
    Path,
    DegenerateGeometryError,
    radians,
    crossprod_sign,
    intersect,
)


class TestPos:
    """Tests for Pos class."""

    def test_create(self):
        """Test creating a position."""
        p = Pos(3.0, 4.0)
        assert p.x == 3.0
        assert p.y == 4.0

    def test_to_tuple(self):
        """Test converting to tuple."""
        assert Pos(3.0, 4.0).to_tuple() == (3.0, 4.0)

    def test_add_sub(self):
        """Test vector addition and subtraction."""
        assert Pos(1, 2) + Pos(3, 5) == Pos(4, 7)
        assert Pos(1, 2) - Pos(3, 5) == Pos(-2, -3)
        assert -Pos(1, -2) == Pos(-1, 2)

    def test_scale(self):
        """Test scaling by real and integer factors."""
        assert Pos(1.5, -2) * 2 == Pos(3.0, -4)
        assert Pos(1, 2) * -1 == Pos(-1, -2)
        assert Pos(1, 2) * 0.5 == Pos(0.5, 1.0)
        assert 3 * Pos(1, 2) == Pos(3, 6)

    def test_dot(self):
        """Test dot product and squared norm."""
        assert Pos(1, 2).dot(Pos(3, 4)) == 11
        assert Pos(3, 4).dot_self() == 25

    def test_equality_is_exact(self):
        """Near-identical positions are distinct outside the tiler."""
        assert Pos(1.0, 1.0) != Pos(1.001, 1.0)

    def test_polar(self):
        """Test polar construction in degrees."""
        p = Pos.polar(90, 2.0)
        assert p.x == pytest.approx(0.0, abs=1e-12)
        assert p.y == pytest.approx(2.0)
        q = Pos.polar(180, 1.0)
        assert q.x == pytest.approx(-1.0)

    def test_radians(self):
        """Test degree conversion."""
        assert radians(180) == pytest.approx(math.pi)
        assert radians(30) == pytest.approx(math.pi / 6)

    def test_random_inside_frame(self):
        """Random positions fall inside the frame."""
        rng = random.Random(7)
        frame = Frame(10, 5)
        for _ in range(100):
            assert frame.is_inside(Pos.random(frame, rng))


class TestOrientation:
    """Tests for crossprod_sign and intersect."""

    def test_ccw_positive(self):
        """Point left of a directed line gives a positive orientation."""
        assert crossprod_sign(Pos(0, 1), Pos(0, 0), Pos(1, 0)) > 0

    def test_cw_negative(self):
        """Point right of a directed line gives a negative orientation."""
        assert crossprod_sign(Pos(0, -1), Pos(0, 0), Pos(1, 0)) < 0

    def test_collinear_zero(self):
        """Collinear points give zero."""
        assert crossprod_sign(Pos(2, 0), Pos(0, 0), Pos(1, 0)) == 0

    def test_intersect(self):
        """Two perpendicular lines meet where expected."""
        p = intersect((Pos(0, 0), 0), (Pos(3, -2), 90))
        assert p.x == pytest.approx(3.0)
        assert p.y == pytest.approx(0.0, abs=1e-9)

    def test_intersect_behind_origin(self):
        """Lines, not rays: the intersection may lie behind an origin."""
        p = intersect((Pos(5, 5), 45), (Pos(0, 10), -90))
        assert p.x == pytest.approx(0.0, abs=1e-9)
        assert p.y == pytest.approx(0.0, abs=1e-9)

    def test_intersect_parallel_raises(self):
        """Parallel lines have no intersection."""
        with pytest.raises(DegenerateGeometryError):
            intersect((Pos(0, 0), 30), (Pos(1, 0), 210))


class TestFrame:
    """Tests for Frame class."""

    def test_is_inside(self):
        """Test containment including the border."""
        frame = Frame(100, 50)
        assert frame.is_inside(Pos(50, 25))
        assert frame.is_inside(Pos(0, 0))
        assert frame.is_inside(Pos(100, 50))
        assert not frame.is_inside(Pos(-1, 25))
        assert not frame.is_inside(Pos(50, 51))

    def test_center(self):
        """Test center."""
        assert Frame(100, 50).center() == Pos(50, 25)

    def test_non_positive_raises(self):
        """Frames must have positive dimensions."""
        with pytest.raises(ValueError):
            Frame(0, 10)
        with pytest.raises(ValueError):
            Frame(10, -1)

    def test_dict_roundtrip(self):
        """Test serialization."""
        frame = Frame(640, 480)
        assert frame.to_dict() == {"width": 640, "height": 480}
        assert Frame.from_dict(frame.to_dict()) == frame


class TestPath:
    """Tests for Path class."""

    def test_vertices(self):
        """Test length, indexing and iteration."""
        path = Path([Pos(0, 0), Pos(10, 0), Pos(0, 10)])
        assert len(path) == 3
        assert path[1] == Pos(10, 0)
        assert list(path)[2] == Pos(0, 10)

    def test_centroid(self):
        """Test vertex mean."""
        path = Path([Pos(0, 0), Pos(10, 0), Pos(10, 10), Pos(0, 10)])
        assert path.centroid == Pos(5, 5)

    def test_area(self):
        """Test shoelace area for both windings."""
        square = [Pos(0, 0), Pos(10, 0), Pos(10, 10), Pos(0, 10)]
        assert Path(square).area == pytest.approx(100.0)
        assert Path(list(reversed(square))).area == pytest.approx(100.0)

    def test_svg_data(self):
        """Path data is closed and keeps vertex order."""
        path = Path([Pos(0, 0), Pos(1.5, 0), Pos(0, 2)])
        assert path.to_svg_data(precision=1) == "M0.0,0.0 L1.5,0.0 L0.0,2.0 Z"

    def test_empty(self):
        """Empty path has no data."""
        assert Path().to_svg_data() == ""
        assert Path().centroid == Pos(0, 0)
