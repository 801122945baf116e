#!/usr/bin/env python3
"""
Geometry Kind Tests

Tests that the kind registry and wire constants are fixed and complete.

Run with: pytest tests/test_kinds.py -v
"""

import sys
from pathlib import Path

# Add the package to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from geowkb.kinds import (
    CATEGORY,
    COORD_SIZE,
    COUNT_SIZE,
    GEOJSON_NAMES,
    HEADER_SIZE,
    LITTLE_ENDIAN,
    Category,
    GeometryKind,
    pack_count,
    pack_header,
)


class TestWireCodes:
    """Wire codes are fixed and bijective."""

    def test_values(self):
        """Each kind has its standard WKB code."""
        assert GeometryKind.POINT == 1
        assert GeometryKind.LINESTRING == 2
        assert GeometryKind.POLYGON == 3
        assert GeometryKind.MULTIPOINT == 4
        assert GeometryKind.MULTILINESTRING == 5
        assert GeometryKind.MULTIPOLYGON == 6
        assert GeometryKind.GEOMETRYCOLLECTION == 7

    def test_bijective(self):
        """Codes 1-7 map to exactly one kind each."""
        assert sorted(k.value for k in GeometryKind) == list(range(1, 8))
        assert all(GeometryKind(code).value == code for code in range(1, 8))


class TestCategories:
    """Every kind has exactly one serialization category."""

    def test_every_kind_covered(self):
        """The category table covers the whole enumeration."""
        assert set(CATEGORY) == set(GeometryKind)
        assert set(GEOJSON_NAMES) == set(GeometryKind)

    def test_categories(self):
        """Only Point is point-like and only GeometryCollection tags children."""
        assert CATEGORY[GeometryKind.POINT] is Category.POINT
        assert CATEGORY[GeometryKind.GEOMETRYCOLLECTION] is Category.COLLECTION
        composites = [k for k, c in CATEGORY.items() if c is Category.COMPOSITE]
        assert len(composites) == 5


class TestPacking:
    """Header and count serialization."""

    def test_constants(self):
        assert LITTLE_ENDIAN == b'\x01'
        assert HEADER_SIZE == 5
        assert COUNT_SIZE == 4
        assert COORD_SIZE == 8

    def test_pack_header(self):
        """Header is the endianness byte plus a little-endian uint32."""
        assert pack_header(GeometryKind.POLYGON) == b'\x01\x03\x00\x00\x00'
        assert len(pack_header(GeometryKind.GEOMETRYCOLLECTION)) == HEADER_SIZE

    def test_pack_count(self):
        """Counts are little-endian uint32."""
        assert pack_count(258) == b'\x02\x01\x00\x00'
        assert len(pack_count(0)) == COUNT_SIZE
