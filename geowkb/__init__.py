"""Well-Known Binary (WKB) encoding of simple feature geometries."""

from .access import GeometryAccess, NativeAccess, GeoJSONAccess, get_access, register_access
from .encoders import WkbEncoder, WkbPayloadEncoder, decode_payload, encode, get_encoder
from .errors import GeoWkbError, UnknownGeometryKindError, UnsupportedGeometryError
from .geometry import (
    EMPTY,
    GeometryCollection,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from .kinds import GeometryKind

__version__ = '0.1.0'

__all__ = [
    'encode',
    'get_encoder',
    'WkbEncoder',
    'WkbPayloadEncoder',
    'decode_payload',
    'GeometryAccess',
    'NativeAccess',
    'GeoJSONAccess',
    'get_access',
    'register_access',
    'GeometryKind',
    'GeoWkbError',
    'UnknownGeometryKindError',
    'UnsupportedGeometryError',
    'EMPTY',
    'Point',
    'LineString',
    'LinearRing',
    'Polygon',
    'MultiPoint',
    'MultiLineString',
    'MultiPolygon',
    'GeometryCollection',
]
