"""Encoder for Well-Known Binary (WKB)."""

import logging
import numpy as np
from typing import Any, Dict, Iterator, Optional, Tuple

from .base import BaseEncoder, register_encoder
from ..access import GeometryAccess, get_access
from ..errors import UnknownGeometryKindError
from ..kinds import CATEGORY, GEOJSON_NAMES, Category, GeometryKind, pack_count, pack_header

logger = logging.getLogger(__name__)


@register_encoder('wkb')
class WkbEncoder(BaseEncoder):
    """
    Encodes geometries as little-endian WKB.

    A single depth-first walk appends to one buffer per encode() call:
    - Point-like: header (if requested) + float64 coordinates
    - Composite: header (if requested) + count + children without headers
    - GeometryCollection: header (if requested) + count + children with headers

    A geometry without a determinable kind contributes no bytes, unless the
    encoder is strict.

    Coordinate arity is written as-is; the wire code is always the plain 2D
    code, so Z/M values are not flagged in the type field.
    """

    def __init__(self, strict: bool = False, access: Optional[GeometryAccess] = None):
        self.strict = strict
        self.access = access

    def encode(self, geom: Any) -> bytes:
        """Encode a geometry to WKB."""
        buf = bytearray()
        self.write(buf, geom, emit_header=True)
        return bytes(buf)

    def write(self, buf: bytearray, geom: Any, emit_header: bool,
              access: Optional[GeometryAccess] = None):
        """Classify `geom` and append its encoding to `buf`."""
        access = access or self._access_for(geom)
        kind = access.kind_of(geom)
        if kind is None:
            if self.strict:
                raise UnknownGeometryKindError(
                    f"Cannot classify geometry of type {type(geom).__name__}"
                )
            logger.debug("Skipping geometry with unknown kind: %r", geom)
            return

        category = CATEGORY[kind]
        if category is Category.POINT:
            self.encode_point(buf, kind, geom, emit_header, access)
        elif category is Category.COMPOSITE:
            self.encode_composite(buf, kind, geom, emit_header, False, access)
        else:
            self.encode_composite(buf, kind, geom, emit_header, True, access)

    def encode_point(self, buf: bytearray, kind: GeometryKind, geom: Any,
                     emit_header: bool, access: GeometryAccess):
        """Append a point-like geometry: optional header, then its coordinates."""
        if emit_header:
            buf += pack_header(kind)

        n = access.coord_count(geom)
        coords = np.array([access.coord_at(geom, i) for i in range(1, n + 1)], dtype='<f8')
        buf += coords.tobytes()

    def encode_composite(self, buf: bytearray, kind: GeometryKind, geom: Any,
                         emit_header: bool, children_emit_header: bool,
                         access: GeometryAccess):
        """Append a geometry with children: optional header, count, children.

        Children of a collection are tagged and may use another
        representation, so their access adapter is resolved per child.
        """
        if emit_header:
            buf += pack_header(kind)

        n = access.child_count(geom)
        buf += pack_count(n)

        child_access = None if children_emit_header else access
        for i in range(1, n + 1):
            child = access.child_at(geom, i)
            self.write(buf, child, children_emit_header, child_access)

    def get_metadata(self, geom: Any) -> Dict[str, Any]:
        """Extract geometry metadata."""
        access = self._access_for(geom)
        kind = access.kind_of(geom)
        if kind is None:
            return {
                'kind': None,
                'wire_code': 0,
                'dimensions': 0,
                'num_geometries': 0,
                'bounds': None,
            }

        positions = list(self.iter_positions(geom, access))
        if CATEGORY[kind] is Category.POINT:
            num_geometries = 1
        else:
            num_geometries = access.child_count(geom)

        return {
            'kind': GEOJSON_NAMES[kind],
            'wire_code': int(kind),
            'dimensions': max((len(p) for p in positions), default=0),
            'num_geometries': num_geometries,
            'bounds': _bounds(positions),
        }

    def iter_positions(self, geom: Any,
                       access: Optional[GeometryAccess] = None) -> Iterator[Tuple[float, ...]]:
        """Yield every position of `geom` in encoding order."""
        access = access or self._access_for(geom)
        kind = access.kind_of(geom)
        if kind is None:
            return

        category = CATEGORY[kind]
        if category is Category.POINT:
            n = access.coord_count(geom)
            yield tuple(access.coord_at(geom, i) for i in range(1, n + 1))
            return

        child_access = None if category is Category.COLLECTION else access
        for i in range(1, access.child_count(geom) + 1):
            yield from self.iter_positions(access.child_at(geom, i), child_access)

    def _access_for(self, geom: Any) -> GeometryAccess:
        return self.access or get_access(geom)


def _bounds(positions) -> Optional[list]:
    """[minx, miny, maxx, maxy] over the first two axes."""
    xy = np.array([p[:2] for p in positions if len(p) >= 2], dtype=np.float64)
    if xy.size == 0:
        return None
    mins = xy.min(axis=0)
    maxs = xy.max(axis=0)
    return [float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1])]


def encode(geom: Any, access: Optional[GeometryAccess] = None) -> bytes:
    """Encode a geometry to WKB bytes.

    Unknown or empty geometries encode to b''.
    """
    return WkbEncoder(access=access).encode(geom)
