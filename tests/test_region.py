"""Tests for Region geometry."""

import numpy as np
import pytest

from worldbuilder.exceptions import InvalidGeometryError, UnknownLocationError
from worldbuilder.region import Region
from worldbuilder.types import Location, Point


class TestRegionExtents:
    """Tests for width, height and derived corners."""

    def test_from_size(self):
        region = Region.from_size(4.0, 2.0)
        assert region.width() == 4.0
        assert region.height() == 2.0
        assert region.top_left() == Point(x=0, y=0)
        assert region.bottom_right() == Point(x=4, y=2)

    def test_corner_order_irrelevant(self):
        """Swapped corners give the same extents and derived corners."""
        a = Region(p1=Point(x=1, y=5), p2=Point(x=3, y=2))
        b = Region(p1=Point(x=3, y=2), p2=Point(x=1, y=5))
        assert a.width() == b.width() == 2
        assert a.height() == b.height() == 3
        assert a.top_left() == b.top_left() == Point(x=1, y=2)
        assert a.bottom_right() == b.bottom_right() == Point(x=3, y=5)

    def test_from_corner(self):
        region = Region.from_corner(Point(x=1, y=1), 2, 3)
        assert region.bottom_right() == Point(x=3, y=4)


class TestSubdivide:
    """Tests for grid subdivision."""

    def test_count(self):
        assert len(Region.from_size(1, 1).subdivide(4, 3)) == 12

    def test_row_major_order(self):
        """Cells run left to right within a row, rows top to bottom."""
        cells = Region.from_size(3, 2).subdivide(3, 2)
        assert cells[0].top_left() == Point(x=0, y=0)
        assert cells[1].top_left() == Point(x=1, y=0)
        assert cells[2].top_left() == Point(x=2, y=0)
        assert cells[3].top_left() == Point(x=0, y=1)
        assert cells[5].bottom_right() == Point(x=3, y=2)

    def test_offset_region(self):
        """Subdivision starts from the top-left corner."""
        region = Region(p1=Point(x=12, y=14), p2=Point(x=10, y=10))
        cells = region.subdivide(2, 2)
        assert cells[0].top_left() == Point(x=10, y=10)
        assert cells[3].bottom_right() == Point(x=12, y=14)

    def test_cells_tile_region(self):
        """Cell areas sum to the region area."""
        region = Region.from_size(1.5, 1.0)
        cells = region.subdivide(3, 3)
        total = sum(c.width() * c.height() for c in cells)
        assert total == pytest.approx(1.5)

    def test_non_positive_counts_rejected(self):
        with pytest.raises(InvalidGeometryError):
            Region.from_size(1, 1).subdivide(0, 3)
        with pytest.raises(InvalidGeometryError):
            Region.from_size(1, 1).subdivide(3, -1)


class TestGetLocation:
    """Tests for compass location lookup."""

    def test_central(self):
        cell = Region.from_size(3, 3).get_location(Location.CENTRAL)
        assert cell.top_left() == Point(x=1, y=1)
        assert cell.bottom_right() == Point(x=2, y=2)

    def test_corners(self):
        region = Region.from_size(3, 3)
        assert region.get_location(Location.NORTHWEST).top_left() == Point(x=0, y=0)
        assert region.get_location(Location.NORTHEAST).top_left() == Point(x=2, y=0)
        assert region.get_location(Location.SOUTHWEST).top_left() == Point(x=0, y=2)
        assert region.get_location(Location.SOUTHEAST).top_left() == Point(x=2, y=2)

    def test_east_is_right_of_west(self):
        region = Region.from_size(3, 3)
        assert region.get_location(Location.EAST).top_left() == Point(x=2, y=1)
        assert region.get_location(Location.WEST).top_left() == Point(x=0, y=1)

    def test_string_name_accepted(self):
        region = Region.from_size(3, 3)
        assert region.get_location("South") == region.get_location(Location.SOUTH)

    def test_unknown_location_fails(self):
        with pytest.raises(UnknownLocationError):
            Region.from_size(3, 3).get_location("Nowhere")  # type: ignore


class TestContains:
    """Tests for closed rectangle containment."""

    def test_interior(self):
        assert Region.from_size(2, 2).contains(Point(x=1, y=1))

    def test_boundary_inclusive(self):
        region = Region.from_size(2, 2)
        assert region.contains(Point(x=0, y=0))
        assert region.contains(Point(x=2, y=2))
        assert region.contains(Point(x=2, y=0.5))

    def test_outside(self):
        region = Region.from_size(2, 2)
        assert not region.contains(Point(x=2.01, y=1))
        assert not region.contains(Point(x=1, y=-0.01))


class TestChoosePoint:
    """Tests for uniform point sampling."""

    def test_points_inside(self, rng):
        region = Region(p1=Point(x=5, y=-1), p2=Point(x=2, y=3))
        for _ in range(200):
            assert region.contains(region.choose_point(rng))

    def test_deterministic(self):
        region = Region.from_size(10, 10)
        a = region.choose_point(np.random.default_rng(9))
        b = region.choose_point(np.random.default_rng(9))
        assert a == b

    def test_degenerate_axis_is_fixed(self, rng):
        """A zero-width axis yields its single coordinate."""
        region = Region(p1=Point(x=1, y=0), p2=Point(x=1, y=5))
        for _ in range(20):
            point = region.choose_point(rng)
            assert point.x == 1
            assert 0 <= point.y <= 5

    def test_degenerate_region_is_point(self, rng):
        region = Region(p1=Point(x=2, y=3), p2=Point(x=2, y=3))
        assert region.choose_point(rng) == Point(x=2, y=3)
