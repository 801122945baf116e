#!/usr/bin/env python3
"""
Native Geometry Tests

Tests for construction, validation and immutability of the native
geometry values.

Run with: pytest tests/test_geometry.py -v
"""

import dataclasses
import sys
from pathlib import Path

import numpy as np
import pytest

# Add the package to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from geowkb import (
    GeometryCollection,
    GeometryKind,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)


# ============================================================================
# Point Tests
# ============================================================================

class TestPoint:
    """Point construction and validation."""

    def test_coordinates_are_float64(self):
        """Integer input is stored as float64."""
        point = Point((1, 2))

        assert point.coords.dtype == np.float64
        assert point.x == 1.0
        assert point.y == 2.0

    def test_empty(self):
        """A Point without coordinates is empty."""
        assert Point().is_empty
        assert not Point((0.0, 0.0)).is_empty

    @pytest.mark.parametrize('coords', [(1.0,), (1.0, 2.0, 3.0, 4.0, 5.0)])
    def test_invalid_dimensions(self, coords):
        """Points need 2 to 4 coordinates."""
        with pytest.raises(ValueError, match="coordinates"):
            Point(coords)

    def test_nested_coordinates_rejected(self):
        """A sequence of positions is not a point."""
        with pytest.raises(ValueError, match="1-D"):
            Point([(1.0, 2.0), (3.0, 4.0)])

    def test_read_only(self):
        """Coordinates cannot be modified in place."""
        point = Point((1.0, 2.0))

        with pytest.raises(ValueError):
            point.coords[0] = 5.0

    def test_frozen(self):
        """Attributes cannot be reassigned."""
        point = Point((1.0, 2.0))

        with pytest.raises(dataclasses.FrozenInstanceError):
            point.coords = np.array([3.0, 4.0])

    def test_equality(self):
        """Points compare by coordinate values."""
        assert Point((1.0, 2.0)) == Point((1, 2))
        assert Point((1.0, 2.0)) != Point((2.0, 1.0))
        assert len({Point((1.0, 2.0)), Point((1, 2))}) == 1

    def test_signed_zero_equality_matches_hash(self):
        """Equal Points hash equally; -0.0 and 0.0 are distinct bit patterns."""
        positive = Point((0.0, 1.0))
        negative = Point((-0.0, 1.0))

        assert positive != negative
        assert len({positive, negative}) == 2
        assert Point((-0.0, 1.0)) == negative
        assert hash(Point((-0.0, 1.0))) == hash(negative)

    def test_linestring_signed_zero(self):
        """LineString equality is bit-exact like its hash."""
        assert LineString([(0.0, 0.0), (1.0, 1.0)]) != LineString([(-0.0, 0.0), (1.0, 1.0)])


# ============================================================================
# LineString Tests
# ============================================================================

class TestLineString:
    """LineString and LinearRing construction."""

    def test_from_tuples(self):
        """Positions become an Nxd array."""
        line = LineString([(0.0, 0.0), (1.0, 1.0), (2.0, 0.0)])

        assert line.coords.shape == (3, 2)
        assert len(line) == 3

    def test_from_points(self):
        """Point members are accepted."""
        line = LineString([Point((0.0, 0.0)), Point((1.0, 1.0))])

        assert line[1] == Point((1.0, 1.0))

    def test_from_array(self):
        """Numpy input is copied, the original stays writable."""
        arr = np.array([[0.0, 0.0], [1.0, 2.0]])
        line = LineString(arr)
        arr[0, 0] = 9.0

        assert line.coords[0, 0] == 0.0
        assert not line.coords.flags.writeable

    def test_iteration(self):
        """Iterating yields Points in order."""
        line = LineString([(0.0, 1.0), (2.0, 3.0)])

        assert list(line) == [Point((0.0, 1.0)), Point((2.0, 3.0))]

    def test_empty(self):
        """An empty LineString has no positions."""
        assert len(LineString()) == 0
        assert len(LineString([])) == 0

    def test_ragged_rejected(self):
        """All positions share one dimensionality."""
        with pytest.raises(ValueError):
            LineString([(0.0, 0.0), (1.0, 1.0, 1.0)])

    def test_empty_points_rejected(self):
        """Positions without coordinates are rejected, not dropped."""
        with pytest.raises(ValueError, match="coordinates"):
            LineString([Point(), Point()])

    def test_empty_positions_rejected(self):
        """Empty raw positions are rejected too."""
        with pytest.raises(ValueError, match="coordinates"):
            LineString([(), ()])

    def test_too_few_dimensions(self):
        """Positions need at least two coordinates."""
        with pytest.raises(ValueError, match="coordinates"):
            LineString([(0.0,), (1.0,)])

    def test_ring_kind(self):
        """A LinearRing has the LineString kind but compares by type."""
        coords = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (0.0, 0.0)]

        assert LinearRing(coords).kind is GeometryKind.LINESTRING
        assert LinearRing(coords) != LineString(coords)


# ============================================================================
# Composite Tests
# ============================================================================

class TestComposites:
    """Polygon, multi geometries and collections."""

    def test_polygon_rings(self):
        """Raw ring coordinates become LinearRings."""
        outer = [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 0.0)]
        inner = [(1.0, 1.0), (2.0, 1.0), (1.0, 2.0), (1.0, 1.0)]
        polygon = Polygon([outer, inner])

        assert isinstance(polygon.exterior, LinearRing)
        assert len(polygon.interiors) == 1
        assert len(polygon) == 2

    def test_empty_polygon(self):
        """A Polygon without rings has no exterior."""
        assert Polygon().exterior is None

    def test_multipoint_coerces(self):
        """MultiPoint accepts positions and Points."""
        multi = MultiPoint([(0.0, 0.0), Point((1.0, 1.0))])

        assert all(isinstance(p, Point) for p in multi)

    def test_wrong_member_type(self):
        """Members of the wrong geometry type are rejected."""
        with pytest.raises(TypeError, match="MultiPoint"):
            MultiPoint([LineString([(0.0, 0.0), (1.0, 1.0)])])

    def test_multilinestring_accepts_rings(self):
        """LinearRings are LineStrings."""
        ring = LinearRing([(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (0.0, 0.0)])

        assert MultiLineString([ring])[0] is ring

    def test_multipolygon(self):
        """MultiPolygon holds Polygons."""
        square = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 0.0)]
        multi = MultiPolygon([Polygon([square]), Polygon([square])])

        assert len(multi) == 2
        assert multi[0] == multi[1]

    def test_collection_keeps_members(self):
        """Collections keep members as given."""
        mapping = {'type': 'Point', 'coordinates': [1.0, 2.0]}
        collection = GeometryCollection([Point((0.0, 0.0)), mapping])

        assert collection[1] is mapping
        assert isinstance(collection.geometries, tuple)
