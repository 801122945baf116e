"""WKB geometry kinds and wire constants.

Geometry frame format (little endian):
| Endianness (1) | Wire code (4) | Count (4) | Children or coordinates |

Endianness: 0x01 (little endian), only on headed geometries
Wire code: Geometry kind (1-7), only on headed geometries
Count: Number of sub-geometries (composites and collections only)
Coordinates: float64 values (point-like geometries only)

Headers are written for the top-level geometry and for every child of a
GeometryCollection. Children of every other composite have their kind implied
by the parent and are written without one.
"""

import struct
from enum import Enum, IntEnum
from typing import Dict

# Endianness marker: little endian (NDR)
LITTLE_ENDIAN = b'\x01'

# Sizes in bytes
HEADER_SIZE = 5
COUNT_SIZE = 4
COORD_SIZE = 8

_HEADER = struct.Struct('<BI')
_COUNT = struct.Struct('<I')


class GeometryKind(IntEnum):
    """Geometry kinds of the simple features model.

    The values are the WKB wire codes and never change.
    """
    POINT = 1
    LINESTRING = 2
    POLYGON = 3
    MULTIPOINT = 4
    MULTILINESTRING = 5
    MULTIPOLYGON = 6
    GEOMETRYCOLLECTION = 7


class Category(Enum):
    """How a geometry kind is serialized."""
    POINT = 'point'            # raw coordinates, no children
    COMPOSITE = 'composite'    # children with implied kind
    COLLECTION = 'collection'  # children tagged individually


CATEGORY: Dict[GeometryKind, Category] = {
    GeometryKind.POINT: Category.POINT,
    GeometryKind.LINESTRING: Category.COMPOSITE,
    GeometryKind.POLYGON: Category.COMPOSITE,
    GeometryKind.MULTIPOINT: Category.COMPOSITE,
    GeometryKind.MULTILINESTRING: Category.COMPOSITE,
    GeometryKind.MULTIPOLYGON: Category.COMPOSITE,
    GeometryKind.GEOMETRYCOLLECTION: Category.COLLECTION,
}

# GeoJSON type names, used by the mapping adapter and payload metadata
GEOJSON_NAMES: Dict[GeometryKind, str] = {
    GeometryKind.POINT: 'Point',
    GeometryKind.LINESTRING: 'LineString',
    GeometryKind.POLYGON: 'Polygon',
    GeometryKind.MULTIPOINT: 'MultiPoint',
    GeometryKind.MULTILINESTRING: 'MultiLineString',
    GeometryKind.MULTIPOLYGON: 'MultiPolygon',
    GeometryKind.GEOMETRYCOLLECTION: 'GeometryCollection',
}


def pack_header(kind: GeometryKind) -> bytes:
    """Serialize the endianness byte and wire code (5 bytes)."""
    return _HEADER.pack(LITTLE_ENDIAN[0], kind)


def pack_count(n: int) -> bytes:
    """Serialize a sub-geometry count (4 bytes)."""
    return _COUNT.pack(n)
